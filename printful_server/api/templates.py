"""Product Templates API."""

from __future__ import annotations

from typing import Any, Dict

from ..executor import RequestExecutor
from .products import Id


class ProductTemplatesAPI:
    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_product_templates(self, offset: int = 0, limit: int = 20) -> Dict[str, Any]:
        """List product templates (limit max 100).

        Returns ``{templates, paging, error}`` where templates is ``result.items``.
        """
        envelope = await self._executor.execute(
            "get", "product-templates", params={"offset": offset, "limit": limit}
        )
        if envelope.failed:
            return {
                "templates": [],
                "paging": {"offset": offset, "limit": limit},
                "error": envelope.failure_error(),
            }
        result = envelope.result or {}
        return {"templates": result.get("items"), "paging": envelope.paging, "error": {}}

    async def get_product_template(self, id: Id) -> Dict[str, Any]:
        """Get one template by template id or ``@``-prefixed external product id."""
        envelope = await self._executor.execute("get", f"product-templates/{id}")
        template, error = envelope.unwrap({})
        return {"template": template, "error": error}

    async def delete_product_template(self, id: Id) -> Dict[str, Any]:
        """Returns ``{success, error}``; success is False on failure."""
        envelope = await self._executor.execute("delete", f"product-templates/{id}")
        if envelope.failed:
            return {"success": False, "error": envelope.failure_error()}
        result = envelope.result or {}
        return {"success": result.get("success"), "error": {}}
