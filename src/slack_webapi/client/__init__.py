"""
Client layer - User-facing API.

This module provides:
- SlackClient: Connection pool owner and unauthenticated calls
- SlackClientSession: Token-bound authenticated calls
- JSON request/response codec
"""

from slack_webapi.client.codec import decode_response_body, encode_request_body
from slack_webapi.client.core import SlackClient
from slack_webapi.client.session import SlackClientSession

__all__ = [
    "SlackClient",
    "SlackClientSession",
    "decode_response_body",
    "encode_request_body",
]
