"""Product template tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..printful_client import PrintfulClient
from ..utils.logging import truncate
from ..utils.projection import next_cursor, offset_from_cursor, project_dict, project_items

logger = logging.getLogger("printful_server.resources.product_templates")


async def printful_product_templates(
    limit: int = 20,
    cursor: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List product templates with pagination.

    Available fields: id, product_id, external_product_id, title,
        available_variant_ids, mockup_file_url, created_at, updated_at
        Default returns: id, title, product_id
    """
    logger.debug("Tool call: printful_product_templates(limit=%s, cursor=%s)", limit, cursor)
    offset = offset_from_cursor(cursor)
    client = PrintfulClient.from_env()
    raw = await client.templates.get_product_templates(offset=offset, limit=limit)

    items = project_items(raw["templates"], fields, base_fields={"id", "title", "product_id"})
    cursor_out = next_cursor(offset, limit, raw["paging"], len(items))
    result = {
        "results": items,
        "has_more": cursor_out is not None,
        "cursor": cursor_out,
        "total_returned": len(items),
        "error": raw["error"],
    }
    logger.debug("Tool result: printful_product_templates -> %s", truncate(str(result)))
    return result


async def printful_get_product_template(
    template_id: str,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """Get a product template by id, or by external product id prefixed with "@"."""
    logger.debug("Tool call: printful_get_product_template(template_id=%s)", template_id)
    client = PrintfulClient.from_env()
    raw = await client.templates.get_product_template(template_id)
    result = {
        "template": project_dict(raw["template"], fields, base_fields={"id", "title", "product_id"}),
        "error": raw["error"],
    }
    logger.debug("Tool result: printful_get_product_template -> %s", truncate(str(result)))
    return result
