"""
Type definitions for slack-webapi.
"""

from slack_webapi.types.chat import (
    ChatPostMessageRequest,
    ChatPostMessageResponse,
    SlackApiResponse,
)
from slack_webapi.types.token import SlackApiToken

__all__ = [
    "ChatPostMessageRequest",
    "ChatPostMessageResponse",
    "SlackApiResponse",
    "SlackApiToken",
]
