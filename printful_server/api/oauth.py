"""OAuth API. Token exchange is not supported; only scope inspection."""

from __future__ import annotations

from typing import Any, Dict

from ..executor import RequestExecutor


class OAuthAPI:
    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_scopes(self) -> Dict[str, Any]:
        """List the scopes granted to the current token."""
        envelope = await self._executor.execute("get", "oauth/scopes")
        if envelope.failed:
            return {"scopes": [], "error": envelope.failure_error()}
        result = envelope.result or {}
        return {"scopes": result.get("scopes"), "error": {}}
