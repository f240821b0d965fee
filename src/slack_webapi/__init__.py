"""slack-webapi: minimal async client for the Slack Web API.

Builds method URLs, binds bearer tokens to lightweight sessions and
dispatches JSON requests through one shared httpx connection pool.
"""
from __future__ import annotations

from slack_webapi.client import SlackClient, SlackClientSession
from slack_webapi.errors import (
    DecodeError,
    SerializeError,
    SlackClientError,
    TransportError,
    UrlConstructionError,
)
from slack_webapi.transport.url import (
    SLACK_API_URL,
    build_method_url,
    build_method_url_with_params,
)
from slack_webapi.types import (
    ChatPostMessageRequest,
    ChatPostMessageResponse,
    SlackApiResponse,
    SlackApiToken,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "SlackClient",
    "SlackClientSession",
    # Types
    "ChatPostMessageRequest",
    "ChatPostMessageResponse",
    "SlackApiResponse",
    "SlackApiToken",
    # URLs
    "SLACK_API_URL",
    "build_method_url",
    "build_method_url_with_params",
    # Errors
    "DecodeError",
    "SerializeError",
    "SlackClientError",
    "TransportError",
    "UrlConstructionError",
    # Version
    "__version__",
]
