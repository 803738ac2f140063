"""Mockup generator tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..printful_client import PrintfulClient
from ..utils.logging import truncate

logger = logging.getLogger("printful_server.resources.mockups")


async def printful_create_mockup_task(product_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Start mockup generation for a catalog product.

    Read printful://templates/mockup_task for the payload structure, then poll
    printful_mockup_task_result with the returned task_key.

    Rate limit: 10 requests per 60 seconds (2 for new stores).
    """
    logger.debug(
        "Tool call: printful_create_mockup_task(product_id=%s, payload=%s)",
        product_id, truncate(str(payload)),
    )
    client = PrintfulClient.from_env()
    result = await client.mockups.create_mockup_task(product_id, payload)
    logger.debug("Tool result: printful_create_mockup_task -> %s", truncate(str(result)))
    return result


async def printful_mockup_task_result(task_key: str) -> Dict[str, Any]:
    """Get status ("pending", "completed", "failed") and mockups of a task."""
    logger.debug("Tool call: printful_mockup_task_result(task_key=%s)", task_key)
    client = PrintfulClient.from_env()
    result = await client.mockups.get_mockup_task_result(task_key)
    logger.debug("Tool result: printful_mockup_task_result -> %s", truncate(str(result)))
    return result


async def printful_print_files(
    product_id: int,
    orientation: str | None = None,
    technique: str | None = None,
) -> Dict[str, Any]:
    """Printfile sizes per placement for the variants of a catalog product.

    Parameters:
    - orientation: "horizontal" or "vertical" (wall art only)
    - technique: e.g. "DTG" or "EMBROIDERY" for multi-technique products
    """
    logger.debug(
        "Tool call: printful_print_files(product_id=%s, orientation=%s, technique=%s)",
        product_id, orientation, technique,
    )
    client = PrintfulClient.from_env()
    result = await client.mockups.get_product_variant_print_files(
        product_id, orientation=orientation, technique=technique
    )
    logger.debug("Tool result: printful_print_files -> %s", truncate(str(result)))
    return result
