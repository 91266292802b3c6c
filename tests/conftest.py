"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from canifly.app_data import AppData
from canifly.backend_api import FinalizeResult
from canifly.config import reset_default_values
from canifly.config.settings import PollSettings, get_backend_settings, get_poll_settings

# Set required environment variables for tests
os.environ.setdefault("CANIFLY_BACKEND_URL", "http://localhost:8713")
os.environ.setdefault("CANIFLY_OAUTH_POLL_INTERVAL_SECONDS", "5")

FAST_INTERVAL_SECONDS = 0.01


@pytest.fixture(autouse=True)
def _clear_settings_caches():
    get_backend_settings.cache_clear()
    get_poll_settings.cache_clear()
    reset_default_values()
    yield
    get_backend_settings.cache_clear()
    get_poll_settings.cache_clear()
    reset_default_values()


@pytest.fixture
def fast_poll_settings() -> PollSettings:
    return PollSettings(login_max_attempts=25, add_character_max_attempts=5, interval_seconds=FAST_INTERVAL_SECONDS)


@pytest.fixture
def fake_client():
    """Backend client double with the coroutine methods the flows use."""
    client = MagicMock()
    client.finalize_login = AsyncMock(return_value=FinalizeResult(success=True))
    client.get_app_data = AsyncMock(return_value=AppData(logged_in=False))
    client.get_app_data_no_cache = AsyncMock(return_value=AppData(logged_in=True))
    client.initiate_login = AsyncMock()
    client.add_character = AsyncMock()
    client.logout = AsyncMock(return_value={"success": True})
    return client
