"""
Error hierarchy for slack-webapi.
"""

from slack_webapi.errors.base import (
    DecodeError,
    ErrorContext,
    SerializeError,
    SlackClientError,
    TransportError,
    UrlConstructionError,
)

__all__ = [
    "DecodeError",
    "ErrorContext",
    "SerializeError",
    "SlackClientError",
    "TransportError",
    "UrlConstructionError",
]
