"""Authentication and status tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..printful_client import PrintfulClient
from ..utils.logging import truncate

logger = logging.getLogger("printful_server.resources.auth")


async def printful_status() -> Dict[str, Any]:
    """Verify the Printful token by listing the scopes it grants."""
    logger.debug("Tool call: printful_status()")
    client = PrintfulClient.from_env()
    raw = await client.oauth.get_scopes()
    result = {
        "ok": not raw["error"],
        "scopes": raw["scopes"],
        "error": raw["error"],
        "base_url": client.base_url,
    }
    logger.debug("Tool result: printful_status() -> %s", truncate(str(result)))
    return result
