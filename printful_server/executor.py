from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx


logger = logging.getLogger("printful_server.http")

DEFAULT_BASE_URL = "https://api.printful.com/"

_UNSET = object()


def _redact_headers(headers: Mapping[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in headers.items():
        lk = str(k).lower()
        if lk in {"authorization", "x-pf-store-id"}:
            redacted[k] = "[REDACTED]"
        else:
            redacted[k] = v
    return redacted


def _truncate(text: str, max_len: int = 1000) -> str:
    if text is None:
        return ""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "... [truncated]"


def build_query(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop unset parameters and encode booleans the way the API expects.

    ``None`` and ``""`` are omitted; ``0`` and ``False`` are kept.
    """
    query: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[key] = value
    return query


class PrintfulClientError(Exception):
    """Represents an error when communicating with the Printful API."""


class PrintfulResponseError(PrintfulClientError):
    """The response body could not be read as a Printful envelope."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class Envelope:
    """The ``{code, result, error, paging}`` wrapper every endpoint returns."""

    code: int
    result: Any = None
    error: Any = None
    paging: Optional[Dict[str, Any]] = None

    @property
    def failed(self) -> bool:
        return self.code >= 400

    def failure_error(self) -> Any:
        if self.error:
            return self.error
        return {"code": self.code, "message": f"Printful request failed with code {self.code}"}

    def unwrap(self, empty: Any, success_error: Any = _UNSET) -> Tuple[Any, Any]:
        """Return ``(payload, error)`` for this envelope.

        ``empty`` is returned as payload on failure; pass a fresh value per call
        since callers may mutate it. ``success_error`` defaults to ``{}``.
        """
        if self.failed:
            return empty, self.failure_error()
        return self.result, ({} if success_error is _UNSET else success_error)


@dataclass(frozen=True)
class RequestExecutor:
    """Issues one request per call and parses the Printful envelope.

    Uses a per-request httpx.AsyncClient. No retries: rate limits and
    transient failures are left to the caller.
    """

    base_url: str
    headers: Mapping[str, str] = field(default_factory=dict, repr=False)
    timeout: Optional[float] = None
    transport: Optional[httpx.AsyncBaseTransport] = None

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "base_url": self.base_url,
            "headers": dict(self.headers),
        }
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return kwargs

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Execute a single HTTP request with a per-request client."""
        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            start = time.perf_counter()
            response = await client.request(method.upper(), path, **kwargs)
            elapsed_ms = (time.perf_counter() - start) * 1000.0

            logger.debug(
                "HTTP %s %s status=%s elapsed_ms=%.2f headers=%s",
                method.upper(),
                path,
                response.status_code,
                elapsed_ms,
                _redact_headers(self.headers),
            )
            return response

    async def execute(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Envelope:
        """Send the request and return the parsed envelope.

        Transport errors from httpx propagate unchanged. A body that is not a
        JSON object raises PrintfulResponseError.
        """
        kwargs: Dict[str, Any] = {}
        query = build_query(params)
        if query:
            kwargs["params"] = query
        if json is not None:
            kwargs["json"] = json

        response = await self._request(method, path, **kwargs)
        try:
            data = response.json()
        except ValueError as e:
            raise PrintfulResponseError(
                f"Invalid JSON from {method.upper()} {path}: {response.status_code} "
                f"{_truncate(response.text or '', 200)}",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise PrintfulResponseError(
                f"Unexpected response body from {method.upper()} {path}: "
                f"{_truncate(str(data), 200)}",
                status_code=response.status_code,
            )

        code = data.get("code")
        if not isinstance(code, int) or isinstance(code, bool):
            code = response.status_code

        envelope = Envelope(
            code=code,
            result=data.get("result"),
            error=data.get("error"),
            paging=data.get("paging"),
        )
        if envelope.failed:
            logger.debug(
                "Printful error %s %s code=%s error=%s",
                method.upper(),
                path,
                code,
                _truncate(str(envelope.error)),
            )
        return envelope
