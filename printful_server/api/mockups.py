"""Mockup Generator API.

Unlike the other areas these endpoints report ``None`` (not ``{}``) for both
the payload on failure and the error on success.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from ..executor import RequestExecutor

Orientation = Literal["horizontal", "vertical"]


class MockupGeneratorAPI:
    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def create_mockup_task(self, id: int, mockup_task: Dict[str, Any]) -> Dict[str, Any]:
        """Start an asynchronous mockup generation task for catalog product ``id``.

        Poll the result with get_mockup_task_result. Printful allows 10
        requests per 60 seconds (2 for new stores) and 20,000 generated files
        per account per day.
        """
        envelope = await self._executor.execute(
            "post", f"mockup-generator/create-task/{id}", json=mockup_task
        )
        task, error = envelope.unwrap(None, success_error=None)
        return {"task": task, "error": error}

    async def get_product_variant_print_files(
        self,
        id: int,
        orientation: Optional[Orientation] = None,
        technique: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Printfiles available for the variants of catalog product ``id``."""
        params = {"orientation": orientation, "technique": technique}
        envelope = await self._executor.execute(
            "get", f"mockup-generator/printfiles/{id}", params=params
        )
        files, error = envelope.unwrap(None, success_error=None)
        return {"files": files, "error": error}

    async def get_mockup_task_result(self, task_key: str) -> Dict[str, Any]:
        envelope = await self._executor.execute(
            "get", "mockup-generator/task", params={"task_key": task_key}
        )
        task, error = envelope.unwrap(None, success_error=None)
        return {"task": task, "error": error}

    async def get_layout_templates(
        self,
        id: int,
        orientation: Optional[Orientation] = None,
        technique: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Templates for client-side positioning of designs on product ``id``."""
        params = {"orientation": orientation, "technique": technique}
        envelope = await self._executor.execute(
            "get", f"mockup-generator/templates/{id}", params=params
        )
        templates, error = envelope.unwrap(None, success_error=None)
        return {"templates": templates, "error": error}
