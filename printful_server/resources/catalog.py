"""Catalog tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..printful_client import PrintfulClient
from ..utils.logging import truncate
from ..utils.projection import project_items

logger = logging.getLogger("printful_server.resources.catalog")


async def printful_catalog_products(
    category_id: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List Printful catalog (blank) products.

    Available fields: id, main_category_id, type, type_name, title, brand,
        model, image, variant_count, currency, techniques, is_discontinued
        Default returns: id, title, type_name
    """
    logger.debug("Tool call: printful_catalog_products(category_id=%s)", category_id)
    client = PrintfulClient.from_env()
    raw = await client.catalog.get_products(category_id=category_id)
    items = project_items(raw["products"], fields, base_fields={"id", "title", "type_name"})
    result = {"results": items, "total_returned": len(items), "error": raw["error"]}
    logger.debug("Tool result: printful_catalog_products -> %s", truncate(str(result)))
    return result


async def printful_catalog_product(
    product_id: int,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """Get a catalog product with its variants (id, name, size, color, price)."""
    logger.debug("Tool call: printful_catalog_product(product_id=%s)", product_id)
    client = PrintfulClient.from_env()
    raw = await client.catalog.get_product(product_id)
    result = {
        "product": raw["product"],
        "variants": project_items(
            raw["variants"], fields, base_fields={"id", "name", "size", "color", "price"}
        ),
        "error": raw["error"],
    }
    logger.debug("Tool result: printful_catalog_product -> %s", truncate(str(result)))
    return result
