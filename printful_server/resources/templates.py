"""MCP resource handlers for payload templates."""

from __future__ import annotations

import json
import logging

from ..printful_client import PrintfulClient
from ..utils.logging import truncate

logger = logging.getLogger("printful_server.resources.templates")


# ----------------------------- Order Template -----------------------------

async def resource_order_template() -> str:
    """Blank order payload for printful_create_order.

    Each item needs either sync_variant_id or variant_id with files.
    """
    template = {
        "external_id": "",
        "shipping": "STANDARD",
        "recipient": {
            "name": "",
            "company": "",
            "address1": "",
            "address2": "",
            "city": "",
            "state_code": "",
            "country_code": "",
            "zip": "",
            "phone": "",
            "email": "",
        },
        "items": [
            {
                "sync_variant_id": None,
                "variant_id": None,
                "quantity": 1,
                "retail_price": "",
                "files": [{"type": "default", "url": ""}],
            }
        ],
        "retail_costs": {"currency": "USD"},
    }
    return json.dumps(template, indent=2)


# ----------------------------- Sync Product Templates -----------------------------

async def resource_sync_product_template() -> str:
    """Blank payload for printful_create_sync_product."""
    template = {
        "sync_product": {
            "external_id": "",
            "name": "",
            "thumbnail": "",
            "is_ignored": False,
        },
        "sync_variants": [
            {
                "external_id": "",
                "variant_id": None,
                "retail_price": "",
                "is_ignored": False,
                "files": [{"type": "default", "url": ""}],
                "options": [],
            }
        ],
    }
    return json.dumps(template, indent=2)


async def resource_sync_product_by_id(product_id: str) -> str:
    """Get an existing sync product as template for updates."""
    logger.debug("Resource call: resource_sync_product_by_id(product_id=%s)", product_id)
    client = PrintfulClient.from_env()
    raw = await client.products.get_sync_product(product_id)
    template = {"sync_product": raw["sync_product"], "sync_variants": raw["sync_variants"]}
    if raw["error"]:
        template["error"] = raw["error"]
    logger.debug("Resource result: resource_sync_product_by_id -> %s", truncate(str(template)))
    return json.dumps(template, indent=2)


# ----------------------------- Mockup Task Template -----------------------------

async def resource_mockup_task_template() -> str:
    """Blank payload for printful_create_mockup_task."""
    template = {
        "variant_ids": [],
        "format": "jpg",
        "files": [
            {
                "placement": "front",
                "image_url": "",
                "position": {
                    "area_width": 1800,
                    "area_height": 2400,
                    "width": 1800,
                    "height": 1800,
                    "top": 300,
                    "left": 0,
                },
            }
        ],
    }
    return json.dumps(template, indent=2)
