"""
Transport layer - URL building and HTTP dispatch.

Provides:
- Method URL construction with query parameters
- httpx-based transport owning the connection pool
- Token resolution and bearer headers
"""

from slack_webapi.transport.auth import bearer_auth_header, resolve_api_token
from slack_webapi.transport.http import HttpTransport
from slack_webapi.transport.pool import PoolConfig, PoolStats
from slack_webapi.transport.url import (
    SLACK_API_URL,
    build_method_url,
    build_method_url_with_params,
)

__all__ = [
    "SLACK_API_URL",
    "HttpTransport",
    "PoolConfig",
    "PoolStats",
    "bearer_auth_header",
    "build_method_url",
    "build_method_url_with_params",
    "resolve_api_token",
]
