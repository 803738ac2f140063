"""Products API: sync products and sync variants of the store."""

from __future__ import annotations

from typing import Any, Dict, List, Union

from ..executor import RequestExecutor

Id = Union[int, str]


class ProductsAPI:
    """Sync product endpoints under ``store/products`` and ``store/variants``.

    Ids are Printful integer ids or external ids prefixed with ``@``; both are
    placed in the path verbatim.
    """

    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_sync_products(
        self,
        offset: int = 0,
        limit: int = 20,
        category_id: str = "",
    ) -> Dict[str, Any]:
        """List sync products.

        category_id is an optional comma-separated list of category ids.
        Returns ``{products, paging, error}``.
        """
        params: Dict[str, Any] = {"offset": offset, "limit": limit}
        if category_id:
            params["category_id"] = category_id
        envelope = await self._executor.execute("get", "store/products", params=params)
        if envelope.failed:
            return {
                "products": [],
                "paging": {"offset": offset, "limit": limit},
                "error": envelope.failure_error(),
            }
        return {"products": envelope.result, "paging": envelope.paging, "error": {}}

    async def create_sync_product(
        self,
        sync_product: Dict[str, Any],
        sync_variants: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Create a sync product together with its sync variants."""
        body = {"sync_product": sync_product, "sync_variants": sync_variants}
        envelope = await self._executor.execute("post", "store/products", json=body)
        product, error = envelope.unwrap({})
        return {"product": product, "error": error}

    async def get_sync_product(self, id: Id) -> Dict[str, Any]:
        """Returns ``{sync_product, sync_variants, error}``."""
        envelope = await self._executor.execute("get", f"store/products/{id}")
        if envelope.failed:
            return {"sync_product": {}, "sync_variants": [], "error": envelope.failure_error()}
        result = envelope.result or {}
        return {
            "sync_product": result.get("sync_product"),
            "sync_variants": result.get("sync_variants"),
            "error": {},
        }

    async def delete_sync_product(self, id: Id) -> Dict[str, Any]:
        """Delete a sync product with all of its sync variants."""
        envelope = await self._executor.execute("delete", f"store/products/{id}")
        result, error = envelope.unwrap([])
        return {"result": result, "error": error}

    async def modify_sync_product(
        self,
        id: Id,
        sync_product: Dict[str, Any],
        sync_variants: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Modify an existing sync product and its sync variants.

        Only changed fields need to be sent. Existing variants omitted from
        sync_variants are deleted by Printful; variants without an id are
        created. Printful allows 10 requests per 60 seconds here.
        """
        body = {"sync_product": sync_product, "sync_variants": sync_variants}
        envelope = await self._executor.execute("put", f"store/products/{id}", json=body)
        product, error = envelope.unwrap({})
        return {"product": product, "error": error}

    async def get_sync_variant(self, id: Id) -> Dict[str, Any]:
        envelope = await self._executor.execute("get", f"store/variants/{id}")
        variant, error = envelope.unwrap({})
        return {"variant": variant, "error": error}

    async def delete_sync_variant(self, id: Id) -> Dict[str, Any]:
        envelope = await self._executor.execute("delete", f"store/variants/{id}")
        result, error = envelope.unwrap([])
        return {"result": result, "error": error}

    async def modify_sync_variant(self, id: Id, sync_variant: Dict[str, Any]) -> Dict[str, Any]:
        """Modify a sync variant; only changed fields need to be sent."""
        envelope = await self._executor.execute("put", f"store/variants/{id}", json=sync_variant)
        variant, error = envelope.unwrap({})
        return {"variant": variant, "error": error}

    async def create_sync_variant(self, id: Id, sync_variant: Dict[str, Any]) -> Dict[str, Any]:
        """Create a sync variant for the sync product ``id``."""
        envelope = await self._executor.execute(
            "post", f"store/products/{id}/variants", json=sync_variant
        )
        variant, error = envelope.unwrap({})
        return {"variant": variant, "error": error}
