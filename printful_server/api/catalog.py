"""Catalog API: Printful's blank products, variants and categories."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from ..executor import RequestExecutor

SizeUnit = Literal["inches", "cm"]


class CatalogAPI:
    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_categories(self) -> Dict[str, Any]:
        envelope = await self._executor.execute("get", "categories")
        if envelope.failed:
            return {"categories": [], "error": envelope.failure_error()}
        result = envelope.result or {}
        return {"categories": result.get("categories"), "error": {}}

    async def get_category(self, id: int) -> Dict[str, Any]:
        envelope = await self._executor.execute("get", f"categories/{id}")
        if envelope.failed:
            return {"category": {}, "error": envelope.failure_error()}
        result = envelope.result or {}
        return {"category": result.get("category"), "error": {}}

    async def get_products(self, category_id: Optional[str] = None) -> Dict[str, Any]:
        """List catalog products; category_id is a comma-separated id list."""
        envelope = await self._executor.execute(
            "get", "products", params={"category_id": category_id}
        )
        products, error = envelope.unwrap([])
        return {"products": products, "error": error}

    async def get_product(self, id: int) -> Dict[str, Any]:
        """Returns ``{product, variants, error}``."""
        envelope = await self._executor.execute("get", f"products/{id}")
        if envelope.failed:
            return {"product": {}, "variants": [], "error": envelope.failure_error()}
        result = envelope.result or {}
        return {
            "product": result.get("product"),
            "variants": result.get("variants"),
            "error": {},
        }

    async def get_variant(self, id: int) -> Dict[str, Any]:
        """Returns ``{variant, product, error}``."""
        envelope = await self._executor.execute("get", f"products/variant/{id}")
        if envelope.failed:
            return {"variant": {}, "product": {}, "error": envelope.failure_error()}
        result = envelope.result or {}
        return {
            "variant": result.get("variant"),
            "product": result.get("product"),
            "error": {},
        }

    async def get_product_sizes(self, id: int, unit: Optional[SizeUnit] = None) -> Dict[str, Any]:
        envelope = await self._executor.execute(
            "get", f"products/{id}/sizes", params={"unit": unit}
        )
        sizes, error = envelope.unwrap({})
        return {"sizes": sizes, "error": error}
