"""
Authenticated sessions bound to one token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from slack_webapi.client.codec import encode_request_body
from slack_webapi.telemetry.logger import get_logger
from slack_webapi.transport.auth import bearer_auth_header
from slack_webapi.transport.url import build_method_url, build_method_url_with_params
from slack_webapi.types.chat import ChatPostMessageRequest, ChatPostMessageResponse

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

    from slack_webapi.client.core import SlackClient
    from slack_webapi.types.token import SlackApiToken

logger = get_logger(__name__)

T = TypeVar("T")


class SlackClientSession:
    """Pairs a SlackClient with one token.

    Sessions are cheap: open one per token and scope. They keep no mutable
    state, so any number of sessions over the same client may run
    concurrently. A session must not outlive its client; calls made after
    the client is closed raise TransportError.

    Example:
        >>> session = client.open_session(SlackApiToken(value="xoxb-..."))
        >>> info = await session.get("conversations.info", [("channel", "C123")])
    """

    def __init__(self, client: SlackClient, token: SlackApiToken) -> None:
        self._client = client
        # private copy, independent of the caller's instance
        self._token = token.model_copy()

    @property
    def client(self) -> SlackClient:
        """Client this session dispatches through."""
        return self._client

    @property
    def token(self) -> SlackApiToken:
        """Token attached to every request."""
        return self._token

    def _auth_headers(self) -> dict[str, str]:
        return bearer_auth_header(self._token)

    def build_get_request(
        self,
        method_name: str,
        params: Iterable[tuple[Any, Any | None]] | None = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build the authenticated GET request for a method without sending it."""
        url = build_method_url_with_params(self._client.base_url, method_name, params)
        return self._client.http.build_request(
            "GET", url, headers=self._auth_headers(), timeout=timeout
        )

    def build_post_request(
        self,
        method_name: str,
        request_body: Any,
        *,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build the authenticated JSON POST request for a method without sending it.

        Raises:
            SerializeError: If `request_body` cannot be encoded as JSON
        """
        content = encode_request_body(request_body)
        url = build_method_url(self._client.base_url, method_name)
        headers = {
            **self._auth_headers(),
            "Content-Type": "application/json",
        }
        return self._client.http.build_request(
            "POST", url, headers=headers, content=content, timeout=timeout
        )

    async def get(
        self,
        method_name: str,
        params: Iterable[tuple[Any, Any | None]] | None = None,
        response_type: type[T] | Any = Any,
        *,
        timeout: float | None = None,
    ) -> T:
        """Call a method with query parameters.

        Args:
            method_name: Method path, e.g. "conversations.info"
            params: Query (key, value) pairs; None values are skipped
            response_type: Type to decode the body into
            timeout: Per-request timeout in seconds

        Returns:
            Decoded response

        Raises:
            TransportError: On network failures
            DecodeError: If the body is not JSON or does not fit the type
        """
        request = self.build_get_request(method_name, params, timeout=timeout)
        logger.debug("Session GET", method_name=method_name, workspace_id=self._token.workspace_id)
        return await self._client.send_webapi_request(request, response_type)

    async def post(
        self,
        method_name: str,
        request_body: Any,
        response_type: type[T] | Any = Any,
        *,
        timeout: float | None = None,
    ) -> T:
        """Call a method with a JSON body.

        Args:
            method_name: Method path, e.g. "chat.postMessage"
            request_body: Pydantic model, dataclass or mapping to send
            response_type: Type to decode the body into
            timeout: Per-request timeout in seconds

        Returns:
            Decoded response

        Raises:
            SerializeError: Before any I/O, if the body cannot be encoded
            TransportError: On network failures
            DecodeError: If the body is not JSON or does not fit the type
        """
        request = self.build_post_request(method_name, request_body, timeout=timeout)
        logger.debug("Session POST", method_name=method_name, workspace_id=self._token.workspace_id)
        return await self._client.send_webapi_request(request, response_type)

    async def chat_post_message(
        self,
        request: ChatPostMessageRequest,
        *,
        timeout: float | None = None,
    ) -> ChatPostMessageResponse:
        """Post a message to a channel (`chat.postMessage`)."""
        return await self.post(
            "chat.postMessage", request, ChatPostMessageResponse, timeout=timeout
        )
