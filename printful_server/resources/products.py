"""Sync product tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..printful_client import PrintfulClient
from ..utils.logging import truncate
from ..utils.projection import next_cursor, offset_from_cursor, project_dict, project_items

logger = logging.getLogger("printful_server.resources.products")


async def printful_sync_products(
    limit: int = 20,
    cursor: str | None = None,
    category_id: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List sync products of the store with pagination.

    Parameters:
    - limit: Items per page (max 100)
    - cursor: Opaque cursor for next page (pass from previous response)
    - category_id: Optional comma-separated list of category ids
    - fields: Additional fields to include beyond defaults, or ["*"] for all

    Available fields: id, external_id, name, variants, synced, thumbnail_url,
        is_ignored
        Default returns: id, name
    """
    logger.debug(
        "Tool call: printful_sync_products(limit=%s, cursor=%s, category_id=%s)",
        limit, cursor, category_id,
    )
    offset = offset_from_cursor(cursor)
    client = PrintfulClient.from_env()
    raw = await client.products.get_sync_products(
        offset=offset, limit=limit, category_id=category_id or ""
    )

    items = project_items(raw["products"], fields, base_fields={"id", "name"})
    cursor_out = next_cursor(offset, limit, raw["paging"], len(items))
    result = {
        "results": items,
        "has_more": cursor_out is not None,
        "cursor": cursor_out,
        "total_returned": len(items),
        "error": raw["error"],
    }
    logger.debug("Tool result: printful_sync_products -> %s", truncate(str(result)))
    return result


async def printful_get_sync_product(
    product_id: str,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """Get a sync product and its sync variants.

    Parameters:
    - product_id: Sync product id, or external id prefixed with "@"
    - fields: Additional sync_product fields beyond defaults, or ["*"] for all

    Default returns: sync_product {id, external_id, name}, sync_variants {id, name, retail_price}
    """
    logger.debug("Tool call: printful_get_sync_product(product_id=%s)", product_id)
    client = PrintfulClient.from_env()
    raw = await client.products.get_sync_product(product_id)

    result = {
        "sync_product": project_dict(
            raw["sync_product"], fields, base_fields={"id", "external_id", "name"}
        ),
        "sync_variants": project_items(
            raw["sync_variants"], fields, base_fields={"id", "name", "retail_price"}
        ),
        "error": raw["error"],
    }
    logger.debug("Tool result: printful_get_sync_product -> %s", truncate(str(result)))
    return result


async def printful_create_sync_product(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Create a sync product with its sync variants.

    Read printful://templates/sync_product first for the payload structure.
    The payload must hold "sync_product" (name, thumbnail, ...) and
    "sync_variants" (each with variant_id, retail_price and files).

    Docs: https://developers.printful.com/docs/#operation/createSyncProduct
    """
    logger.debug("Tool call: printful_create_sync_product(payload=%s)", truncate(str(payload)))
    client = PrintfulClient.from_env()
    result = await client.products.create_sync_product(
        payload.get("sync_product", {}),
        payload.get("sync_variants", []),
    )
    logger.debug("Tool result: printful_create_sync_product -> %s", truncate(str(result)))
    return result


async def printful_update_sync_product(product_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Modify a sync product and its sync variants.

    Only changed fields need to be sent. IMPORTANT: when "sync_variants" is
    given it must list the ids of ALL existing variants to keep; omitted
    variants are deleted by Printful.

    Rate limit: 10 requests per 60 seconds.
    """
    logger.debug(
        "Tool call: printful_update_sync_product(product_id=%s, payload=%s)",
        product_id, truncate(str(payload)),
    )
    client = PrintfulClient.from_env()
    result = await client.products.modify_sync_product(
        product_id,
        payload.get("sync_product", {}),
        payload.get("sync_variants", []),
    )
    logger.debug("Tool result: printful_update_sync_product -> %s", truncate(str(result)))
    return result


async def printful_update_sync_variant(variant_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Modify a single sync variant (retail_price, files, options, ...)."""
    logger.debug(
        "Tool call: printful_update_sync_variant(variant_id=%s, payload=%s)",
        variant_id, truncate(str(payload)),
    )
    client = PrintfulClient.from_env()
    result = await client.products.modify_sync_variant(variant_id, payload)
    logger.debug("Tool result: printful_update_sync_variant -> %s", truncate(str(result)))
    return result
