"""Initial login: finalize, refresh, then mark the session authenticated."""

import logging

from canifly.backend_api import LoginRedirect
from canifly.config.settings import PollSettings

from .base import OAuthFlow

logger = logging.getLogger(__name__)


class LoginFlow(OAuthFlow):
    name = "login"

    def _max_attempts(self, settings: PollSettings) -> int:
        return settings.login_max_attempts

    async def _request_redirect(self, account: str) -> LoginRedirect:
        return await self._client.initiate_login(account)

    def start(self, state: str) -> None:
        self._app_state.logged_out = False
        super().start(state)

    async def _after_finalize(self) -> bool:
        success = await self._app_state.login_refresh()
        logger.debug("login_refresh returned: %s", success)
        if success:
            logger.info("Login finalized and data fetched; session authenticated")
            self._app_state.is_authenticated = True
        return success
