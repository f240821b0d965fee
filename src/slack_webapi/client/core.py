"""
Core SlackClient implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from slack_webapi.client.codec import decode_response_body
from slack_webapi.client.session import SlackClientSession
from slack_webapi.transport.auth import resolve_api_token
from slack_webapi.transport.http import HttpTransport
from slack_webapi.transport.pool import resolve_base_url
from slack_webapi.transport.url import build_method_url_with_params

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

    from slack_webapi.transport.pool import PoolConfig
    from slack_webapi.types.token import SlackApiToken

T = TypeVar("T")


class SlackClient:
    """Long-lived Web API client owning the connection pool.

    Create one per process (or per scope) and open cheap sessions from it
    for each token.

    Example:
        >>> async with SlackClient() as client:
        ...     session = client.open_session(SlackApiToken(value="xoxb-..."))
        ...     resp = await session.post(
        ...         "chat.postMessage",
        ...         {"channel": "C123", "text": "hi"},
        ...     )
        ...     print(resp["ok"])
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        pool_config: PoolConfig | None = None,
        proxy: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client. Performs no network I/O.

        Args:
            base_url: API base URL (SLACK_API_URL env var, else https://slack.com/api)
            pool_config: Connection limits and timeouts
            proxy: Proxy URL
            transport: Custom httpx transport, mostly for tests
        """
        self._base_url = resolve_base_url(base_url)
        self._http = HttpTransport(pool_config, proxy=proxy, transport=transport)

    @property
    def base_url(self) -> str:
        """Base URL methods are resolved against."""
        return self._base_url

    @property
    def http(self) -> HttpTransport:
        """Underlying transport."""
        return self._http

    @property
    def is_closed(self) -> bool:
        """Check if the client is closed."""
        return self._http.is_closed

    async def send_webapi_request(
        self,
        request: httpx.Request,
        response_type: type[T] | Any = Any,
    ) -> T:
        """Send a fully-formed request and decode its JSON body.

        The status code is not inspected: a non-2xx response whose body fits
        `response_type` is returned like any other.

        Args:
            request: Request with method, URL, headers and body set
            response_type: Type to decode the body into

        Raises:
            TransportError: On network failures
            DecodeError: If the body is not JSON or does not fit the type
        """
        response = await self._http.send(request)
        return decode_response_body(
            response.content,
            response_type,
            url=str(request.url),
            status_code=response.status_code,
        )

    def build_get_request(
        self,
        method_name: str,
        params: Iterable[tuple[Any, Any | None]] | None = None,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build a body-less GET for a method."""
        url = build_method_url_with_params(self._base_url, method_name, params)
        return self._http.build_request("GET", url, headers=headers, timeout=timeout)

    async def get(
        self,
        method_name: str,
        params: Iterable[tuple[Any, Any | None]] | None = None,
        response_type: type[T] | Any = Any,
        *,
        timeout: float | None = None,
    ) -> T:
        """Call a method that needs no token.

        Args:
            method_name: Method path, e.g. "api.test"
            params: Query (key, value) pairs; None values are skipped
            response_type: Type to decode the body into
            timeout: Per-request timeout in seconds

        Returns:
            Decoded response
        """
        request = self.build_get_request(method_name, params, timeout=timeout)
        return await self.send_webapi_request(request, response_type)

    def open_session(self, token: SlackApiToken | str | None = None) -> SlackClientSession:
        """Open an authenticated session.

        Args:
            token: Token to bind; resolved from the environment when omitted

        Raises:
            ValueError: If no token is given and none is set in the environment
        """
        resolved = resolve_api_token(token)
        if resolved is None:
            raise ValueError(
                "No Slack token given and none found in SLACK_API_TOKEN/SLACK_BOT_TOKEN"
            )
        return SlackClientSession(self, resolved)

    async def close(self) -> None:
        """Close the connection pool. Sessions opened from it stop working."""
        await self._http.close()

    async def __aenter__(self) -> SlackClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
