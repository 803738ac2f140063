"""Tests for the orders API."""

from __future__ import annotations

import json

from tests.fixtures.common import ERROR_UNAUTHORIZED_401
from tests.fixtures.orders import (
    NEW_ORDER,
    ORDER,
    ORDER_CREATED_ENVELOPE,
    ORDER_LIST_ENVELOPE,
)


class TestGetOrders:
    async def test_success(self, mock_client, mock_response):
        mock_client.executor._request.return_value = mock_response(200, ORDER_LIST_ENVELOPE)

        result = await mock_client.orders.get_orders()

        assert result == {
            "orders": ORDER_LIST_ENVELOPE["result"],
            "paging": ORDER_LIST_ENVELOPE["paging"],
            "error": {},
        }

    async def test_status_omitted_when_not_given(self, mock_client, mock_response):
        mock_client.executor._request.return_value = mock_response(200, ORDER_LIST_ENVELOPE)

        await mock_client.orders.get_orders(20, 10)

        mock_client.executor._request.assert_called_once_with(
            "get", "orders", params={"offset": 20, "limit": 10}
        )

    async def test_status_filter(self, mock_client, mock_response):
        mock_client.executor._request.return_value = mock_response(200, ORDER_LIST_ENVELOPE)

        await mock_client.orders.get_orders(status="fulfilled")

        params = mock_client.executor._request.call_args.kwargs["params"]
        assert params["status"] == "fulfilled"

    async def test_failure(self, mock_client, mock_response):
        mock_client.executor._request.return_value = mock_response(401, ERROR_UNAUTHORIZED_401)

        result = await mock_client.orders.get_orders(0, 50)

        assert result == {
            "orders": [],
            "paging": {"offset": 0, "limit": 50},
            "error": ERROR_UNAUTHORIZED_401["error"],
        }


class TestCreateOrder:
    async def test_success(self, mock_client, mock_response):
        mock_client.executor._request.return_value = mock_response(200, ORDER_CREATED_ENVELOPE)

        result = await mock_client.orders.create_order(NEW_ORDER)

        assert result["order"] == ORDER
        assert not result["error"]
        mock_client.executor._request.assert_called_once_with(
            "post",
            "orders",
            params={"confirm": "false", "update_existing": "false"},
            json=NEW_ORDER,
        )

    async def test_success_error_is_envelope_error(self, mock_client, mock_response):
        mock_client.executor._request.return_value = mock_response(200, ORDER_CREATED_ENVELOPE)

        result = await mock_client.orders.create_order(NEW_ORDER)

        assert result["error"] is None

    async def test_failure(self, mock_client, mock_response):
        body = {"code": 400, "result": "Invalid address", "error": {"message": "Invalid address"}}
        mock_client.executor._request.return_value = mock_response(400, body)

        result = await mock_client.orders.create_order(NEW_ORDER, confirm=True)

        assert result == {"order": {}, "error": {"message": "Invalid address"}}

    async def test_wire_url_and_body(self, wire):
        client, sent = wire(ORDER_CREATED_ENVELOPE)

        await client.orders.create_order(NEW_ORDER, True, False)

        request = sent[0]
        assert request.method == "POST"
        assert "confirm=true&update_existing=false" in str(request.url)
        assert request.url.path == "/orders"
        assert json.loads(request.content) == NEW_ORDER
