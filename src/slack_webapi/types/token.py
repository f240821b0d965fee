"""
Slack API credential.

A token is an immutable value: the helpers below always return a new
instance, so a session holding a token never observes later changes made
by the caller.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

TOKEN_ENV_VARS = ("SLACK_API_TOKEN", "SLACK_BOT_TOKEN")
WORKSPACE_ENV_VAR = "SLACK_WORKSPACE_ID"
SCOPE_ENV_VAR = "SLACK_TOKEN_SCOPE"


class SlackApiToken(BaseModel):
    """Bearer token plus optional workspace/scope metadata.

    Example:
        >>> token = SlackApiToken(value="xoxb-...").with_workspace_id("T0123")
        >>> token.workspace_id
        'T0123'
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(repr=False, min_length=1, description="Secret token value")
    workspace_id: str | None = Field(default=None, description="Workspace (team) id")
    scope: str | None = Field(default=None, description="Granted OAuth scope")

    def with_workspace_id(self, workspace_id: str | None) -> SlackApiToken:
        """Return a copy bound to another workspace."""
        return self.model_copy(update={"workspace_id": workspace_id})

    def with_scope(self, scope: str | None) -> SlackApiToken:
        """Return a copy with another scope."""
        return self.model_copy(update={"scope": scope})

    @classmethod
    def from_env(cls) -> SlackApiToken | None:
        """Build a token from environment variables.

        Reads the first non-empty of SLACK_API_TOKEN / SLACK_BOT_TOKEN, plus
        optional SLACK_WORKSPACE_ID and SLACK_TOKEN_SCOPE.

        Returns:
            Token or None if no token variable is set
        """
        for env_var in TOKEN_ENV_VARS:
            value = os.getenv(env_var)
            if value:
                return cls(
                    value=value,
                    workspace_id=os.getenv(WORKSPACE_ENV_VAR) or None,
                    scope=os.getenv(SCOPE_ENV_VAR) or None,
                )
        return None
