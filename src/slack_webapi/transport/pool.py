"""
Connection pool configuration.

Limits and timeouts for the single httpx pool owned by a SlackClient, plus
the environment switches that shape it.
"""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

import httpx

from slack_webapi.transport.url import SLACK_API_URL


def trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("SLACK_HTTP_TRUST_ENV", "0") == "1"


def resolve_base_url(base_url: str | None = None) -> str:
    """Explicit base URL, else SLACK_API_URL from the environment, else slack.com."""
    return base_url or os.getenv("SLACK_API_URL") or SLACK_API_URL


def resolve_proxy(proxy: str | None = None) -> str | None:
    """Explicit proxy, else SLACK_PROXY_URL when trust_env is enabled."""
    if proxy is not None:
        return proxy
    if trust_env_enabled():
        return os.getenv("SLACK_PROXY_URL")
    return None


@dataclass
class PoolConfig:
    """Configuration for the connection pool.

    Defaults are sized for a single API host.

    Attributes:
        max_connections: Maximum total connections
        max_keepalive_connections: Maximum idle connections to keep
        keepalive_expiry: Seconds before idle connection expires
        connect_timeout: Connection timeout in seconds
        read_timeout: Read timeout in seconds
        write_timeout: Write timeout in seconds
        pool_timeout: Timeout waiting for available connection
    """

    max_connections: int = 20
    max_keepalive_connections: int = 10
    keepalive_expiry: float = 15.0
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0
    pool_timeout: float = 10.0

    @classmethod
    def default(cls) -> PoolConfig:
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(cls) -> PoolConfig:
        """Default configuration with SLACK_HTTP_TIMEOUT_SECS applied to reads and writes."""
        config = cls()
        env_timeout = os.getenv("SLACK_HTTP_TIMEOUT_SECS")
        if env_timeout:
            with suppress(ValueError):
                timeout = float(env_timeout)
                config.read_timeout = timeout
                config.write_timeout = timeout
        return config

    def to_httpx_limits(self) -> httpx.Limits:
        """Convert to httpx Limits."""
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections,
            keepalive_expiry=self.keepalive_expiry,
        )

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx Timeout."""
        return httpx.Timeout(
            connect=self.connect_timeout,
            read=self.read_timeout,
            write=self.write_timeout,
            pool=self.pool_timeout,
        )


@dataclass
class PoolStats:
    """Request counters for a pool.

    Attributes:
        requests_total: Total requests dispatched
        requests_successful: Requests that produced a response
        requests_failed: Requests that failed in transport
    """

    requests_total: int = 0
    requests_successful: int = 0
    requests_failed: int = 0

    def record(self, success: bool) -> None:
        """Record one dispatched request."""
        self.requests_total += 1
        if success:
            self.requests_successful += 1
        else:
            self.requests_failed += 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "requests_total": self.requests_total,
            "requests_successful": self.requests_successful,
            "requests_failed": self.requests_failed,
        }
