"""Shared test fixtures for Printful MCP tests."""

import json

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from printful_server.executor import RequestExecutor
from printful_server.printful_client import PrintfulClient


@pytest.fixture
def mock_response():
    """Factory for creating mock HTTP responses.

    Usage:
        resp = mock_response(200, {"code": 200, "result": {...}})
        resp = mock_response(502, text="<html>Bad Gateway</html>")
    """
    def _make(status_code=200, json_data=None, text=None, headers=None):
        response = MagicMock()
        response.status_code = status_code
        if json_data is not None:
            response.json.return_value = json_data
            response.text = text or str(json_data)
        else:
            response.json.side_effect = ValueError("No JSON")
            response.text = text or ""
        response.headers = headers or {}
        return response
    return _make


@pytest.fixture
def mock_client():
    """Create a PrintfulClient whose executor has a mocked _request method.

    RequestExecutor is frozen, so _request is patched on the class; the mock is
    reachable as ``mock_client.executor._request``.
    """
    with patch.object(RequestExecutor, "_request", new=AsyncMock()):
        yield PrintfulClient("test_token")


@pytest.fixture
def wire():
    """Build a client backed by httpx.MockTransport and record sent requests.

    Usage:
        client, sent = wire({"code": 200, "result": []})
        await client.orders.get_orders()
        sent[0].url ...
    """
    def _make(body=None, status_code=200, token="test_token", content=None):
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, content=json.dumps(body).encode())

        client = PrintfulClient(token, transport=httpx.MockTransport(handler))
        return client, sent
    return _make


# All resource modules that import PrintfulClient
_RESOURCE_MODULES = [
    "printful_server.resources.auth",
    "printful_server.resources.products",
    "printful_server.resources.product_templates",
    "printful_server.resources.orders",
    "printful_server.resources.catalog",
    "printful_server.resources.mockups",
    "printful_server.resources.templates",
]


@pytest.fixture
def mock_printful_class():
    """Patch PrintfulClient in all resource modules, yield (mock_class, mock_instance).

    Usage:
        def test_something(mock_printful_class):
            mock_class, mock_instance = mock_printful_class
            mock_instance.products.get_sync_products = AsyncMock(return_value={...})
            # call the tool function...
    """
    mock_instance = MagicMock()
    mock_instance.base_url = "https://api.printful.com/"
    mock_class = MagicMock()
    mock_class.from_env.return_value = mock_instance

    patchers = [patch(f"{mod}.PrintfulClient", mock_class) for mod in _RESOURCE_MODULES]
    for p in patchers:
        p.start()
    yield mock_class, mock_instance
    for p in patchers:
        p.stop()
