"""Add another character to an account through the same SSO handshake."""

import logging

from canifly.backend_api import LoginRedirect
from canifly.config.settings import PollSettings

from .base import OAuthFlow

logger = logging.getLogger(__name__)


class AddCharacterFlow(OAuthFlow):
    name = "add-character"

    def _max_attempts(self, settings: PollSettings) -> int:
        return settings.add_character_max_attempts

    async def _request_redirect(self, account: str) -> LoginRedirect:
        return await self._client.add_character(account)

    async def _after_finalize(self) -> bool:
        logger.debug("Finalization complete; fetching updated data")
        return await self._app_state.login_refresh()
