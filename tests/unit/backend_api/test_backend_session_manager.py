"""Tests for backend_api session_manager."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from canifly.backend_api.client import BackendConfig
from canifly.backend_api.session_manager import SessionManager


@pytest.fixture
def session_manager():
    return SessionManager(BackendConfig(request_timeout_seconds=7, connect_timeout_seconds=2))


def test_no_session_until_requested(session_manager):
    assert session_manager.session is None


@pytest.mark.asyncio
async def test_ensure_session_reuses_open_session(session_manager):
    with patch("canifly.backend_api.session_manager.aiohttp.ClientSession") as mock_session, patch(
        "canifly.backend_api.session_manager.aiohttp.CookieJar"
    ) as mock_jar:
        mock_session.return_value = MagicMock(closed=False)

        first = await session_manager.ensure_session()
        second = await session_manager.ensure_session()

        assert first is second is mock_session.return_value
        mock_session.assert_called_once()
        mock_jar.assert_called_once_with(unsafe=True)
        timeout = mock_session.call_args.kwargs["timeout"]
        assert (timeout.total, timeout.connect) == (7, 2)


@pytest.mark.asyncio
async def test_ensure_session_replaces_closed_session(session_manager):
    stale = MagicMock(closed=True)
    session_manager._session = stale

    with patch("canifly.backend_api.session_manager.aiohttp.ClientSession") as mock_session:
        mock_session.return_value = MagicMock(closed=False)

        assert await session_manager.ensure_session() is mock_session.return_value


@pytest.mark.asyncio
async def test_close_closes_session(session_manager):
    mock_session = AsyncMock()
    session_manager._session = mock_session

    await session_manager.close()
    await session_manager.close()

    mock_session.close.assert_awaited_once()
    assert session_manager.session is None
