"""
Request URL construction for Web API methods.

Method names are resolved against the base URL by plain path concatenation
(never RFC 3986 relative resolution, which would drop the `/api` segment).
Malformed inputs raise UrlConstructionError straight away: they can only
come from a programming error, never from a remote condition.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode, urlsplit

import httpx

from slack_webapi.errors import UrlConstructionError

if TYPE_CHECKING:
    from collections.abc import Iterable

SLACK_API_URL = "https://slack.com/api"

# RFC 3986 path characters; query and fragment delimiters are not allowed
_METHOD_NAME_RE = re.compile(r"^[A-Za-z0-9\-._~!$&'()*+,;=:@/%]+$")


def _validate_base(base: str) -> str:
    parts = urlsplit(base)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlConstructionError(
            f"Base URL must be an absolute http(s) URL: {base!r}", url=base
        )
    if parts.query or parts.fragment:
        raise UrlConstructionError(
            f"Base URL must not carry a query or fragment: {base!r}", url=base
        )
    return base.rstrip("/")


def _validate_method_name(method_name: str) -> str:
    name = method_name.strip("/")
    if not name or not _METHOD_NAME_RE.match(name):
        raise UrlConstructionError(
            f"Invalid method name: {method_name!r}",
        ).with_hint("method names look like 'chat.postMessage'")
    # dot segments would be normalized away and escape the base path
    segments = [s.lower().replace("%2e", ".") for s in name.split("/")]
    if any(segment in (".", "..", "") for segment in segments):
        raise UrlConstructionError(
            f"Method name must not contain empty or dot path segments: {method_name!r}",
        ).with_hint("method names are resolved below the base URL")
    return name


def _to_url(url_str: str) -> httpx.URL:
    try:
        return httpx.URL(url_str)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise UrlConstructionError(f"Invalid URL: {e}", url=url_str) from e


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def method_uri_path(base: str, method_name: str) -> str:
    """Join base URL and method name with exactly one '/'.

    Args:
        base: API base URL (e.g., "https://slack.com/api")
        method_name: Relative method path (e.g., "chat.postMessage")

    Returns:
        URL string

    Raises:
        UrlConstructionError: On a malformed base or method name
    """
    return f"{_validate_base(base)}/{_validate_method_name(method_name)}"


def encode_query(params: Iterable[tuple[Any, Any | None]]) -> str:
    """Form-encode present parameters, preserving order and repeats.

    Pairs whose value is None are dropped entirely.
    """
    pairs = [
        (str(key), _param_value(value)) for key, value in params if value is not None
    ]
    return urlencode(pairs)


def build_method_url(base: str, method_name: str) -> httpx.URL:
    """Build the URL of a method without query parameters.

    Example:
        >>> str(build_method_url("https://slack.com/api", "chat.postMessage"))
        'https://slack.com/api/chat.postMessage'
    """
    return _to_url(method_uri_path(base, method_name))


def build_method_url_with_params(
    base: str,
    method_name: str,
    params: Iterable[tuple[Any, Any | None]] | None = None,
) -> httpx.URL:
    """Build the URL of a method with a query string.

    Args:
        base: API base URL
        method_name: Relative method path
        params: Ordered (key, value) pairs; None values are skipped

    Returns:
        URL; without any '?' when no parameter has a value

    Example:
        >>> str(build_method_url_with_params(
        ...     SLACK_API_URL,
        ...     "conversations.history",
        ...     [("channel", "C123"), ("cursor", None)],
        ... ))
        'https://slack.com/api/conversations.history?channel=C123'
    """
    url_str = method_uri_path(base, method_name)
    query = encode_query(params or ())
    if query:
        url_str = f"{url_str}?{query}"
    return _to_url(url_str)
