from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .api.catalog import CatalogAPI
from .api.mockups import MockupGeneratorAPI
from .api.oauth import OAuthAPI
from .api.orders import OrdersAPI
from .api.products import ProductsAPI
from .api.templates import ProductTemplatesAPI
from .executor import DEFAULT_BASE_URL, PrintfulClientError, RequestExecutor


@dataclass(frozen=True)
class PrintfulClient:
    """Async client for the Printful API.

    One RequestExecutor carrying the base URL and auth headers is shared by
    every resource area (products, templates, orders, mockups, catalog, oauth).
    """

    token: Optional[str] = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    store_id: Optional[str] = None
    timeout: Optional[float] = None
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, repr=False, compare=False)

    executor: RequestExecutor = field(init=False, repr=False, compare=False)
    products: ProductsAPI = field(init=False, repr=False, compare=False)
    templates: ProductTemplatesAPI = field(init=False, repr=False, compare=False)
    orders: OrdersAPI = field(init=False, repr=False, compare=False)
    mockups: MockupGeneratorAPI = field(init=False, repr=False, compare=False)
    catalog: CatalogAPI = field(init=False, repr=False, compare=False)
    oauth: OAuthAPI = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        base_url = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        executor = RequestExecutor(
            base_url=base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self.transport,
        )
        # frozen dataclass: derived attributes are set once here
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "executor", executor)
        object.__setattr__(self, "products", ProductsAPI(executor))
        object.__setattr__(self, "templates", ProductTemplatesAPI(executor))
        object.__setattr__(self, "orders", OrdersAPI(executor))
        object.__setattr__(self, "mockups", MockupGeneratorAPI(executor))
        object.__setattr__(self, "catalog", CatalogAPI(executor))
        object.__setattr__(self, "oauth", OAuthAPI(executor))

    @classmethod
    def from_env(cls) -> "PrintfulClient":
        """Create a client using environment variables loaded via dotenv.

        Required env vars:
        - PRINTFUL_API_TOKEN
        Optional:
        - PRINTFUL_BASE_URL (defaults to https://api.printful.com/)
        - PRINTFUL_STORE_ID (sent as X-PF-Store-ID)
        - PRINTFUL_TIMEOUT (seconds; httpx default when unset)
        """
        token = os.getenv("PRINTFUL_API_TOKEN")
        if not token:
            raise PrintfulClientError("Missing PRINTFUL_API_TOKEN in environment.")

        base_url = os.getenv("PRINTFUL_BASE_URL", DEFAULT_BASE_URL)
        store_id = os.getenv("PRINTFUL_STORE_ID") or None

        timeout: Optional[float] = None
        raw_timeout = os.getenv("PRINTFUL_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise PrintfulClientError(
                    f"PRINTFUL_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from e

        return cls(token=token, base_url=base_url, store_id=store_id, timeout=timeout)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            # h11 rejects header values with trailing whitespace
            "Authorization": ("Bearer " + (self.token or "")).rstrip(),
        }
        if self.store_id:
            headers["X-PF-Store-ID"] = str(self.store_id)
        return headers


def create_printful_client(token: Optional[str] = None) -> PrintfulClient:
    return PrintfulClient(token)
