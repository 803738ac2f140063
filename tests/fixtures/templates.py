"""Product template mock envelopes."""

PRODUCT_TEMPLATE = {
    "id": 3,
    "product_id": 71,
    "external_product_id": "template-123",
    "title": "Unisex Staple T-Shirt",
    "available_variant_ids": [4011, 4012],
    "mockup_file_url": "https://files.cdn.printful.com/mockup.png",
    "created_at": 1602607640,
    "updated_at": 1602607640,
}

PRODUCT_TEMPLATE_LIST_ENVELOPE = {
    "code": 200,
    "result": {"items": [PRODUCT_TEMPLATE]},
    "paging": {"offset": 0, "limit": 20, "total": 1},
}

PRODUCT_TEMPLATE_ENVELOPE = {
    "code": 200,
    "result": PRODUCT_TEMPLATE,
}

PRODUCT_TEMPLATE_DELETED_ENVELOPE = {
    "code": 200,
    "result": {"success": True},
}
