"""Shared plumbing for the OAuth call sites."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from canifly.backend_api import FinalizeResult, LoginRedirect
from canifly.config.settings import PollSettings, get_poll_settings
from canifly.oauth_poller import OAuthFinalizationPoller, PollOutcome

if TYPE_CHECKING:
    from canifly.app_state import AppState
    from canifly.backend_api import BackendClient

logger = logging.getLogger(__name__)

OpenUrl = Callable[[str], Any]


class OAuthFlow:
    """A poller wired to the backend's finalize endpoint and an app refresh."""

    name = "oauth"

    def __init__(
        self,
        client: BackendClient,
        app_state: AppState,
        poll_settings: Optional[PollSettings] = None,
    ) -> None:
        self._client = client
        self._app_state = app_state
        settings = poll_settings if poll_settings else get_poll_settings()
        self._poller = OAuthFinalizationPoller(
            self._finalize,
            self._after_finalize,
            max_attempts=self._max_attempts(settings),
            interval_seconds=settings.interval_seconds,
            name=self.name,
        )

    @property
    def poller(self) -> OAuthFinalizationPoller:
        return self._poller

    def _max_attempts(self, settings: PollSettings) -> int:
        raise NotImplementedError

    async def _request_redirect(self, account: str) -> LoginRedirect:
        raise NotImplementedError

    async def _after_finalize(self) -> bool:
        raise NotImplementedError

    async def _finalize(self, state: str) -> FinalizeResult:
        logger.debug("%s: calling finalize-login for state=%s", self.name, state)
        return await self._client.finalize_login(state)

    def start(self, state: str) -> None:
        self._poller.start_poll(state)

    async def begin(self, account: str, open_url: Optional[OpenUrl] = None) -> LoginRedirect:
        """Request an SSO redirect, start polling its state, then hand the URL to *open_url*."""
        redirect = await self._request_redirect(account)
        self.start(redirect.state)
        if open_url is None:
            logger.info("%s: complete the login in your browser: %s", self.name, redirect.redirect_url)
        else:
            result = open_url(redirect.redirect_url)
            if inspect.isawaitable(result):
                await result
        return redirect

    def cancel(self) -> None:
        self._poller.cancel()

    async def wait(self) -> Optional[PollOutcome]:
        return await self._poller.wait()
