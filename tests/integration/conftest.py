"""
Integration test fixtures.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def api_url() -> str:
    """Base URL the mocked responses are registered under."""
    return "https://slack.com/api"
