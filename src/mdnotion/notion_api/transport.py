"""Sync and async HTTP transports for the Notion API.

Every request makes exactly one attempt:

1. Send the request with auth, version, and content-type headers.
2. On ``2xx`` -- return the parsed JSON body (``{}`` when empty).
3. On any other status -- raise :class:`NotionAPIError` carrying the status
   code and the response body verbatim.
4. On a timeout or connection failure -- raise
   :class:`MdNotionNetworkError`.

Nothing is retried: a failed append leaves the page partially filled and
the caller decides what to do about it.
"""

from __future__ import annotations

import json as _json
import sys
import time
from typing import Any

import httpx

from mdnotion.config import MdNotionConfig
from mdnotion.errors import MdNotionNetworkError, NotionAPIError
from mdnotion.observability import NoopMetricsHook, get_logger

log = get_logger("mdnotion.transport")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _default_headers(config: MdNotionConfig) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {config.token}",
        "Notion-Version": config.notion_version,
        "Content-Type": "application/json",
    }


def _network_error(method: str, path: str, exc: Exception) -> MdNotionNetworkError:
    log.warning(
        "Request network error",
        extra={
            "extra_fields": {
                "op": "request",
                "method": method,
                "path": path,
                "error": str(exc),
            }
        },
    )
    return MdNotionNetworkError(
        message=f"Network error on {method} {path}: {exc}",
        context={"method": method, "path": path},
        cause=exc,
    )


def _dump_payload(
    config: MdNotionConfig,
    method: str,
    path: str,
    payload: Any | None,
    response: httpx.Response,
) -> None:
    """Write a redacted request/response dump to stderr."""
    from mdnotion.utils.redact import redact

    try:
        resp_body: Any = response.json()
    except ValueError:
        resp_body = response.text[:1000]
    dump: dict[str, Any] = {
        "method": method,
        "path": path,
        "request_body": payload,
        "response_status": response.status_code,
        "response_body": resp_body,
    }
    print(
        _json.dumps(redact(dump, config.token), indent=2, default=str),
        file=sys.stderr,
    )


def _handle_response(
    config: MdNotionConfig,
    metrics: Any,
    method: str,
    path: str,
    payload: Any | None,
    response: httpx.Response,
    elapsed_ms: float,
) -> dict:
    """Record metrics for *response* and return its JSON or raise."""
    tags = {"method": method, "path": path, "status": str(response.status_code)}
    metrics.increment("mdnotion.requests_total", tags=tags)
    metrics.timing("mdnotion.request_duration_ms", elapsed_ms, tags=tags)

    if config.debug_dump_payload:
        _dump_payload(config, method, path, payload, response)

    if 200 <= response.status_code < 300:
        # Some endpoints answer 204 with no body.
        if response.status_code == 204 or not response.content:
            return {}
        result: dict = response.json()
        return result

    log.error(
        "Notion API error",
        extra={
            "extra_fields": {
                "op": "request",
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "body": response.text[:500],
            }
        },
    )
    raise NotionAPIError(
        status_code=response.status_code,
        body=response.text,
        method=method,
        path=path,
    )


# ---------------------------------------------------------------------------
# Sync transport
# ---------------------------------------------------------------------------

class NotionTransport:
    """Synchronous HTTP transport.

    Parameters
    ----------
    config:
        Supplies token, API version, base URL, timeout, proxy, metrics.
    client:
        Optional pre-built :class:`httpx.Client`; mainly for tests using
        :class:`httpx.MockTransport`.  It must already carry the base URL
        and headers.
    """

    def __init__(self, config: MdNotionConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._client = client or httpx.Client(
            base_url=config.base_url,
            headers=_default_headers(config),
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=config.http_proxy,
        )

    def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the Notion API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ``PATCH``, ...).
        path:
            API path relative to ``base_url`` (e.g. ``/pages``).
        **kwargs:
            Forwarded to :meth:`httpx.Client.request`, typically ``json=``.

        Returns
        -------
        dict
            Parsed JSON response body.

        Raises
        ------
        NotionAPIError
            On any non-2xx response.
        MdNotionNetworkError
            On timeouts and connection failures.
        """
        t0 = time.monotonic()
        try:
            response = self._client.request(method, path, **kwargs)
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            raise _network_error(method, path, exc) from exc
        elapsed_ms = (time.monotonic() - t0) * 1000
        return _handle_response(
            self._config, self._metrics, method, path,
            kwargs.get("json"), response, elapsed_ms,
        )

    def close(self) -> None:
        """Close the underlying HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> NotionTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AsyncNotionTransport:
    """Asynchronous HTTP transport.

    Mirrors :class:`NotionTransport` on top of :class:`httpx.AsyncClient`.
    """

    def __init__(
        self, config: MdNotionConfig, client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
        self._client = client or httpx.AsyncClient(
            base_url=config.base_url,
            headers=_default_headers(config),
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=config.http_proxy,
        )

    async def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the Notion API (async).

        See :meth:`NotionTransport.request`.
        """
        t0 = time.monotonic()
        try:
            response = await self._client.request(method, path, **kwargs)
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            raise _network_error(method, path, exc) from exc
        elapsed_ms = (time.monotonic() - t0) * 1000
        return _handle_response(
            self._config, self._metrics, method, path,
            kwargs.get("json"), response, elapsed_ms,
        )

    async def close(self) -> None:
        """Close the underlying async HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncNotionTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
