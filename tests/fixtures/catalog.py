"""Catalog mock envelopes."""

CATALOG_PRODUCT = {
    "id": 71,
    "main_category_id": 24,
    "type": "T-SHIRT",
    "type_name": "T-Shirt",
    "title": "Unisex Staple T-Shirt | Bella + Canvas 3001",
    "brand": "Bella + Canvas",
    "model": "3001",
    "variant_count": 2,
    "currency": "USD",
    "is_discontinued": False,
}

CATALOG_VARIANT = {
    "id": 4011,
    "product_id": 71,
    "name": "Bella + Canvas 3001 (White / S)",
    "size": "S",
    "color": "White",
    "color_code": "#ffffff",
    "price": "9.25",
    "in_stock": True,
}

CATEGORY = {"id": 24, "parent_id": 6, "title": "T-Shirts", "size": "small"}

CATEGORIES_ENVELOPE = {"code": 200, "result": {"categories": [CATEGORY]}}

CATEGORY_ENVELOPE = {"code": 200, "result": {"category": CATEGORY}}

CATALOG_PRODUCTS_ENVELOPE = {"code": 200, "result": [CATALOG_PRODUCT]}

CATALOG_PRODUCT_ENVELOPE = {
    "code": 200,
    "result": {"product": CATALOG_PRODUCT, "variants": [CATALOG_VARIANT]},
}

CATALOG_VARIANT_ENVELOPE = {
    "code": 200,
    "result": {"variant": CATALOG_VARIANT, "product": CATALOG_PRODUCT},
}

SIZES_ENVELOPE = {
    "code": 200,
    "result": {
        "product_id": 71,
        "available_sizes": ["S", "M"],
        "size_tables": [{"type": "measure_yourself", "unit": "inches"}],
    },
}
