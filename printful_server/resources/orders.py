"""Order tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..printful_client import PrintfulClient
from ..utils.logging import truncate
from ..utils.projection import next_cursor, offset_from_cursor, project_items

logger = logging.getLogger("printful_server.resources.orders")


async def printful_orders(
    limit: int = 20,
    cursor: str | None = None,
    status: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List store orders with pagination and optional status filter.

    Parameters:
    - limit: Items per page (max 100)
    - cursor: Opaque cursor for next page (pass from previous response)
    - status: draft, pending, failed, canceled, inprocess, onhold, partial, fulfilled
    - fields: Additional fields to include beyond defaults, or ["*"] for all

    Available fields: id, external_id, status, shipping, created, updated,
        recipient, items, costs, retail_costs, shipments
        Default returns: id, external_id, status
    """
    logger.debug(
        "Tool call: printful_orders(limit=%s, cursor=%s, status=%s)",
        limit, cursor, status,
    )
    offset = offset_from_cursor(cursor)
    client = PrintfulClient.from_env()
    raw = await client.orders.get_orders(offset=offset, limit=limit, status=status)

    items = project_items(raw["orders"], fields, base_fields={"id", "external_id", "status"})
    cursor_out = next_cursor(offset, limit, raw["paging"], len(items))
    result = {
        "results": items,
        "has_more": cursor_out is not None,
        "cursor": cursor_out,
        "total_returned": len(items),
        "error": raw["error"],
    }
    logger.debug("Tool result: printful_orders -> %s", truncate(str(result)))
    return result


async def printful_create_order(
    payload: Dict[str, Any],
    confirm: bool = False,
    update_existing: bool = False,
) -> Dict[str, Any]:
    """Create a Printful order, as a draft unless confirm is true.

    Read printful://templates/order first for the payload structure. Required:
    - recipient (name, address1, city, country_code, zip; state_code for US/CA/AU)
    - items (each with sync_variant_id, or variant_id plus files, and quantity)

    Parameters:
    - confirm: Submit for fulfillment immediately (charges the store)
    - update_existing: Update the order with the same external_id if present

    Docs: https://developers.printful.com/docs/#operation/createOrder
    """
    logger.debug(
        "Tool call: printful_create_order(confirm=%s, update_existing=%s, payload=%s)",
        confirm, update_existing, truncate(str(payload)),
    )
    client = PrintfulClient.from_env()
    result = await client.orders.create_order(
        payload, confirm=confirm, update_existing=update_existing
    )
    logger.debug("Tool result: printful_create_order -> %s", truncate(str(result)))
    return result
