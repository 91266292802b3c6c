"""Tests for BackendClient wiring."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from canifly.backend_api import BackendClient, BackendConfig


def test_rejects_non_http_base_url():
    with pytest.raises(ValueError):
        BackendClient(BackendConfig(base_url="ftp://localhost:8713"))


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("CANIFLY_BACKEND_URL", "http://127.0.0.1:9000/")
    monkeypatch.setenv("CANIFLY_REQUEST_TIMEOUT_SECONDS", "12")

    config = BackendConfig.from_env()

    assert config.base_url == "http://127.0.0.1:9000"
    assert config.request_timeout_seconds == 12.0


def test_is_connected_tracks_session():
    client = BackendClient()
    assert client.is_connected() is False

    client._session_manager._session = MagicMock(closed=False)
    assert client.is_connected() is True


@pytest.mark.asyncio
async def test_context_manager_opens_and_closes():
    client = BackendClient()
    client._session_manager.ensure_session = AsyncMock()
    client._session_manager.close = AsyncMock()

    async with client as entered:
        assert entered is client

    client._session_manager.ensure_session.assert_awaited_once()
    client._session_manager.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_app_data_no_cache_normalizes_payload():
    client = BackendClient()
    client._app_data_ops._executor = MagicMock()
    client._app_data_ops._executor.execute_request = AsyncMock(return_value={"LoggedIn": True})

    data = await client.get_app_data_no_cache()

    assert data.logged_in is True
    assert data.account_data.accounts == []
    client._app_data_ops._executor.execute_request.assert_awaited_once_with("GET", "/api/app-data-no-cache")
