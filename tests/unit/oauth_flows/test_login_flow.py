"""Tests for the login call site."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from canifly.app_data import AppData
from canifly.app_state import AppState
from canifly.backend_api import BackendClientError, FinalizeResult, LoginRedirect
from canifly.config.settings import PollSettings
from canifly.oauth_flows import LoginFlow
from canifly.oauth_poller import PollOutcome


@pytest.fixture
def app_state(fake_client):
    return AppState(fake_client)


@pytest.fixture
def flow(fake_client, app_state, fast_poll_settings):
    return LoginFlow(fake_client, app_state, fast_poll_settings)


def test_uses_login_budget(flow):
    assert flow.poller.max_attempts == 25
    assert flow.poller.interval_seconds == 0.01


def test_default_budget_comes_from_environment(fake_client, monkeypatch):
    monkeypatch.delenv("CANIFLY_LOGIN_POLL_MAX_ATTEMPTS", raising=False)
    monkeypatch.setenv("CANIFLY_OAUTH_POLL_INTERVAL_SECONDS", "5")

    flow = LoginFlow(fake_client, AppState(fake_client))

    assert flow.poller.max_attempts == 25
    assert flow.poller.interval_seconds == 5.0


@pytest.mark.asyncio
async def test_successful_login_marks_authenticated(flow, fake_client, app_state):
    app_state.logged_out = True

    flow.start("state-1")
    assert app_state.logged_out is False
    outcome = await flow.wait()

    assert outcome is PollOutcome.SUCCEEDED
    fake_client.finalize_login.assert_awaited_once_with("state-1")
    fake_client.get_app_data_no_cache.assert_awaited_once()
    assert app_state.is_authenticated is True
    assert app_state.app_data == AppData(logged_in=True)


@pytest.mark.asyncio
async def test_authenticated_even_when_snapshot_lags(flow, fake_client, app_state):
    fake_client.get_app_data_no_cache.return_value = AppData(logged_in=False)

    flow.start("state-1")
    await flow.wait()

    assert app_state.is_authenticated is True


@pytest.mark.asyncio
async def test_refresh_retried_until_data_arrives(flow, fake_client, app_state):
    fake_client.get_app_data_no_cache.side_effect = [
        BackendClientError("down"),
        None,
        AppData(logged_in=True),
    ]

    flow.start("state-1")
    outcome = await flow.wait()

    assert outcome is PollOutcome.SUCCEEDED
    fake_client.finalize_login.assert_awaited_once()
    assert fake_client.get_app_data_no_cache.await_count == 3
    assert app_state.is_authenticated is True


@pytest.mark.asyncio
async def test_gives_up_when_callback_never_completes(fake_client, app_state):
    fake_client.finalize_login.return_value = FinalizeResult(success=False, error="call back not yet completed")
    fake_client.get_app_data_no_cache.return_value = None
    settings = PollSettings(login_max_attempts=3, add_character_max_attempts=5, interval_seconds=0.01)
    flow = LoginFlow(fake_client, app_state, settings)

    flow.start("state-1")
    outcome = await flow.wait()

    assert outcome is PollOutcome.EXHAUSTED
    assert fake_client.finalize_login.await_count == 3
    fake_client.get_app_data_no_cache.assert_awaited_once()
    assert app_state.is_authenticated is False


@pytest.mark.asyncio
async def test_begin_starts_poll_and_opens_browser(flow, fake_client):
    fake_client.initiate_login.return_value = LoginRedirect(redirect_url="https://sso/authorize?state=s1", state="s1")
    open_url = MagicMock()

    redirect = await flow.begin("Main Account", open_url=open_url)
    outcome = await flow.wait()

    assert redirect.state == "s1"
    fake_client.initiate_login.assert_awaited_once_with("Main Account")
    open_url.assert_called_once_with("https://sso/authorize?state=s1")
    assert outcome is PollOutcome.SUCCEEDED
    fake_client.finalize_login.assert_awaited_once_with("s1")


@pytest.mark.asyncio
async def test_begin_accepts_async_opener(flow, fake_client):
    fake_client.initiate_login.return_value = LoginRedirect(redirect_url="https://sso/authorize?state=s1", state="s1")
    open_url = AsyncMock()

    await flow.begin("Main Account", open_url=open_url)
    flow.cancel()

    open_url.assert_awaited_once_with("https://sso/authorize?state=s1")


@pytest.mark.asyncio
async def test_begin_does_not_poll_when_redirect_fails(flow, fake_client):
    fake_client.initiate_login.side_effect = BackendClientError("Failed to initiate login.")

    with pytest.raises(BackendClientError):
        await flow.begin("Main Account")

    assert not flow.poller.polling_active
