"""Sync product mock envelopes."""

SYNC_PRODUCT = {
    "id": 13,
    "external_id": "4235234213",
    "name": "T-shirt",
    "variants": 10,
    "synced": 10,
    "thumbnail_url": "https://files.cdn.printful.com/files/thumb.png",
    "is_ignored": False,
}

SYNC_VARIANT = {
    "id": 10,
    "external_id": "12312414",
    "sync_product_id": 13,
    "name": "T-shirt / Red / M",
    "synced": True,
    "variant_id": 3001,
    "retail_price": "29.99",
    "currency": "USD",
    "is_ignored": False,
    "files": [{"type": "default", "url": "https://example.com/design.png"}],
    "options": [],
}

SYNC_PRODUCT_LIST_ENVELOPE = {
    "code": 200,
    "result": [
        SYNC_PRODUCT,
        {"id": 14, "external_id": "4235234214", "name": "Mug", "variants": 1, "synced": 1},
    ],
    "paging": {"offset": 0, "limit": 20, "total": 2},
}

SYNC_PRODUCT_ENVELOPE = {
    "code": 200,
    "result": {
        "sync_product": SYNC_PRODUCT,
        "sync_variants": [SYNC_VARIANT],
    },
}

SYNC_PRODUCT_CREATED_ENVELOPE = {
    "code": 200,
    "result": {"id": 13, "external_id": "4235234213", "name": "T-shirt", "variants": 1, "synced": 1},
}

SYNC_VARIANT_ENVELOPE = {
    "code": 200,
    "result": SYNC_VARIANT,
}

DELETE_ENVELOPE = {
    "code": 200,
    "result": {"sync_product": SYNC_PRODUCT, "sync_variants": [SYNC_VARIANT]},
}
