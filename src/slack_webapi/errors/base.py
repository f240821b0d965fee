"""
Base error classes for slack-webapi.

Provides a small layered error hierarchy:
- SlackClientError: Base class for all library errors
- UrlConstructionError: Malformed base URL, method name or parameters
- TransportError: HTTP/network errors during dispatch
- DecodeError: Response body is not valid JSON or has the wrong shape
- SerializeError: Request payload cannot be encoded as JSON
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Longest response excerpt kept on a DecodeError
_BODY_PREVIEW_LIMIT = 200


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    field_path: str | None = None
    """Path to the problematic field (e.g., 'channel')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'url', 'transport', 'decode')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class SlackClientError(Exception):
    """Base class for all slack-webapi errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> SlackClientError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class UrlConstructionError(SlackClientError, ValueError):
    """A request URL could not be built.

    Indicates a programming error (bad base URL or method name), so it is
    raised immediately from the URL builders instead of being deferred to
    dispatch time.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="url")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url


class TransportError(SlackClientError):
    """Error during HTTP transport.

    Raised when:
    - DNS or TCP connection failure
    - TLS errors
    - Timeout (when configured)
    - The owning client has already been closed
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        method: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        if method:
            ctx.details["method"] = method
        super().__init__(message, ctx)
        self.url = url
        self.method = method
        self.__cause__ = cause


class DecodeError(SlackClientError):
    """The response body could not be decoded into the requested type.

    Raised when the body is not valid JSON or does not match the expected
    response shape. HTTP status codes never raise on their own; the status
    is attached here only for diagnostics.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        status_code: int | None = None,
        body: bytes | str | None = None,
        field_path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="decode")
        if field_path:
            ctx.field_path = field_path
        if url:
            ctx.details["url"] = url
        if status_code is not None:
            ctx.details["status_code"] = status_code
        super().__init__(message, ctx)
        self.url = url
        self.status_code = status_code
        self.body_preview = _preview(body)
        self.field_path = field_path
        self.__cause__ = cause


class SerializeError(SlackClientError):
    """A request payload could not be serialized to JSON.

    Always raised before any network I/O is attempted.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        payload_type: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="serialize")
        if payload_type:
            ctx.details["payload_type"] = payload_type
        super().__init__(message, ctx)
        self.payload_type = payload_type
        self.__cause__ = cause


def _preview(body: bytes | str | None) -> str | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if len(body) > _BODY_PREVIEW_LIMIT:
        return body[:_BODY_PREVIEW_LIMIT] + "..."
    return body
