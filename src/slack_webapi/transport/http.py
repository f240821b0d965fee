"""
HTTP transport using httpx for async requests.

HttpTransport is the single owner of the connection pool and the only
place where bytes go over the wire. It never looks at status codes.
"""

from __future__ import annotations

import importlib.util
from typing import TYPE_CHECKING, Any

import httpx

from slack_webapi.errors import TransportError
from slack_webapi.telemetry.logger import get_logger
from slack_webapi.transport.pool import (
    PoolConfig,
    PoolStats,
    resolve_proxy,
    trust_env_enabled,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

_UA_VERSION: str | None = None


def _http2_enabled() -> bool:
    """Enable HTTP/2 only when optional dependency is present."""
    return importlib.util.find_spec("h2") is not None


def _get_ua_version() -> str:
    """Get package version for User-Agent (cached)."""
    global _UA_VERSION
    if _UA_VERSION is None:
        try:
            from importlib.metadata import version

            _UA_VERSION = version("slack-webapi")
        except Exception:
            _UA_VERSION = "0.1.0"
    return _UA_VERSION


class HttpTransport:
    """Connection pool owner for Web API calls.

    The underlying httpx.AsyncClient is created on first use, so
    constructing a transport never touches the network. It is safe to share
    between concurrently running tasks.

    Example:
        >>> transport = HttpTransport()
        >>> request = transport.build_request("GET", "https://slack.com/api/api.test")
        >>> response = await transport.send(request)
        >>> await transport.close()
    """

    def __init__(
        self,
        pool_config: PoolConfig | None = None,
        *,
        proxy: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            pool_config: Connection limits and timeouts
            proxy: Proxy URL
            transport: Custom httpx transport (e.g. httpx.MockTransport)
        """
        self._config = pool_config or PoolConfig.from_env()
        self._proxy = resolve_proxy(proxy)
        self._transport = transport
        self._stats = PoolStats()

        # Client instance (lazy initialization)
        self._client: httpx.AsyncClient | None = None
        self._closed = False

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._closed:
            raise TransportError("HTTP transport is closed")
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Accept": "application/json",
                    "User-Agent": f"slack-webapi/{_get_ua_version()}",
                },
                limits=self._config.to_httpx_limits(),
                timeout=self._config.to_httpx_timeout(),
                proxy=self._proxy,
                transport=self._transport,
                http2=_http2_enabled(),
                trust_env=trust_env_enabled(),
            )
        return self._client

    def build_request(
        self,
        method: str,
        url: httpx.URL | str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build a fully-formed request carrying the pool's default headers.

        Args:
            method: HTTP method
            url: Absolute request URL
            headers: Additional headers
            content: Raw request body
            timeout: Per-request timeout in seconds (pool default if None)

        Returns:
            Request ready for send()
        """
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        return self._get_client().build_request(
            method,
            url,
            headers=dict(headers) if headers else None,
            content=content,
            **kwargs,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and buffer the whole response body.

        Args:
            request: Fully-formed request

        Returns:
            HTTP response with its body already read

        Raises:
            TransportError: On network/connection errors or a closed transport
        """
        url = str(request.url)
        client = self._get_client()
        logger.debug("Sending request", method=request.method, url=url)

        try:
            response = await client.send(request)
        except httpx.ConnectError as e:
            self._stats.record(success=False)
            raise TransportError(
                f"Connection failed: {e}", url=url, method=request.method, cause=e
            ) from e
        except httpx.TimeoutException as e:
            self._stats.record(success=False)
            raise TransportError(
                f"Request timed out: {e}", url=url, method=request.method, cause=e
            ) from e
        except httpx.HTTPError as e:
            self._stats.record(success=False)
            raise TransportError(
                f"HTTP error: {e}", url=url, method=request.method, cause=e
            ) from e

        self._stats.record(success=True)
        logger.debug(
            "Received response",
            method=request.method,
            url=url,
            status_code=response.status_code,
            bytes=len(response.content),
        )
        return response

    @property
    def config(self) -> PoolConfig:
        """Get pool configuration."""
        return self._config

    @property
    def stats(self) -> PoolStats:
        """Get request counters."""
        return self._stats

    @property
    def is_closed(self) -> bool:
        """Check if transport is closed."""
        return self._closed

    async def close(self) -> None:
        """Close the HTTP client; later sends raise TransportError."""
        self._closed = True
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpTransport:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
