"""
Token resolution and bearer authentication headers.

Resolves tokens from:
1. Explicit value
2. Environment variables (SLACK_API_TOKEN, SLACK_BOT_TOKEN)
"""

from __future__ import annotations

from slack_webapi.types.token import SlackApiToken

AUTHORIZATION_HEADER = "Authorization"


def resolve_api_token(
    explicit_token: SlackApiToken | str | None = None,
) -> SlackApiToken | None:
    """Resolve the token to authenticate with.

    Args:
        explicit_token: Token or raw token string; wins over the environment

    Returns:
        Resolved token or None if not found
    """
    if isinstance(explicit_token, SlackApiToken):
        return explicit_token
    if explicit_token:
        return SlackApiToken(value=explicit_token)
    return SlackApiToken.from_env()


def bearer_auth_header(token: SlackApiToken) -> dict[str, str]:
    """Get the Authorization header for a token."""
    return {AUTHORIZATION_HEADER: f"Bearer {token.value}"}
