"""
Shapes for the `chat.*` method family.

Slack reports API-level failures inside a 200 response body (`ok: false`),
so every response shape derives from SlackApiResponse and callers inspect
`ok`/`error` themselves.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SlackApiResponse(BaseModel):
    """Common envelope of every Web API response."""

    model_config = ConfigDict(extra="allow")

    ok: bool = Field(description="Whether the call succeeded")
    error: str | None = Field(default=None, description="Error code when ok is false")
    warning: str | None = Field(default=None, description="Comma separated warnings")


class ChatPostMessageRequest(BaseModel):
    """Body of `chat.postMessage`."""

    model_config = ConfigDict(extra="allow")

    channel: str = Field(description="Channel, private group or IM id")
    text: str | None = Field(default=None, description="Message text")
    blocks: list[dict[str, Any]] | None = Field(default=None, description="Block Kit blocks")
    thread_ts: str | None = Field(default=None, description="Parent message timestamp")
    reply_broadcast: bool | None = None
    mrkdwn: bool | None = None
    unfurl_links: bool | None = None
    unfurl_media: bool | None = None


class ChatPostMessageResponse(SlackApiResponse):
    """Response of `chat.postMessage`."""

    channel: str | None = None
    ts: str | None = None
    message: dict[str, Any] | None = None
