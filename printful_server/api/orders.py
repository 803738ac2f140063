"""Orders API."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from ..executor import RequestExecutor

OrderStatus = Literal[
    "draft",
    "pending",
    "failed",
    "canceled",
    "inprocess",
    "onhold",
    "partial",
    "fulfilled",
]


class OrdersAPI:
    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_orders(
        self,
        offset: int = 0,
        limit: int = 20,
        status: Optional[OrderStatus] = None,
    ) -> Dict[str, Any]:
        """List store orders, optionally filtered by status.

        Returns ``{orders, paging, error}``.
        """
        params: Dict[str, Any] = {"offset": offset, "limit": limit, "status": status}
        envelope = await self._executor.execute("get", "orders", params=params)
        if envelope.failed:
            return {
                "orders": [],
                "paging": {"offset": offset, "limit": limit},
                "error": envelope.failure_error(),
            }
        return {"orders": envelope.result, "paging": envelope.paging, "error": {}}

    async def create_order(
        self,
        order: Dict[str, Any],
        confirm: bool = False,
        update_existing: bool = False,
    ) -> Dict[str, Any]:
        """Create an order and optionally submit it for fulfillment.

        confirm skips the draft phase; update_existing updates the order with
        the same external_id if one exists.
        """
        params = {"confirm": bool(confirm), "update_existing": bool(update_existing)}
        envelope = await self._executor.execute("post", "orders", params=params, json=order)
        created, error = envelope.unwrap({}, success_error=envelope.error)
        return {"order": created, "error": error}
