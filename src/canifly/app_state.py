"""In-memory application session state backed by the CanIFly backend."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from .app_data import AppData
from .backend_api.errors import BackendClientError

if TYPE_CHECKING:
    from .backend_api import BackendClient

logger = logging.getLogger(__name__)


class AppState:
    """
    Latest application snapshot plus the authentication flags derived from it.

    ``login_refresh`` is the refresh used by the OAuth flows: it reports
    success by value and never raises for backend failures.
    """

    def __init__(self, client: BackendClient) -> None:
        self._client = client
        self.is_authenticated = False
        self.logged_out = False
        self.is_loading = False
        self.is_refreshing = False
        self.app_data: Optional[AppData] = None

    def _adopt(self, data: AppData) -> None:
        self.is_authenticated = data.logged_in
        self.app_data = data

    async def fetch_data(self) -> Optional[AppData]:
        """Load the cached snapshot."""
        logger.debug("fetch_data called")
        self.is_loading = True
        try:
            data = await self._client.get_app_data()
        except (BackendClientError, asyncio.TimeoutError) as exc:
            logger.error("Failed to load app data: %s", exc)
            return None
        finally:
            self.is_loading = False

        if data is not None:
            self._adopt(data)
        return data

    async def login_refresh(self) -> bool:
        """Load an uncached snapshot; True when one was received."""
        logger.debug("login_refresh called")
        self.is_loading = True
        try:
            data = await self._client.get_app_data_no_cache()
        except (BackendClientError, asyncio.TimeoutError) as exc:
            logger.info("login_refresh could not load data yet: %s", exc)
            return False
        finally:
            self.is_loading = False

        if data is None:
            return False
        self._adopt(data)
        return True

    async def silent_refresh(self) -> Optional[AppData]:
        """Refresh in the background while a user is logged in."""
        if not self.is_authenticated or self.logged_out:
            return None
        self.is_refreshing = True
        try:
            data = await self._client.get_app_data_no_cache()
        except (BackendClientError, asyncio.TimeoutError) as exc:
            logger.warning("Silent refresh failed: %s", exc)
            return None
        finally:
            self.is_refreshing = False

        if data is not None:
            self._adopt(data)
        return data

    async def logout(self) -> None:
        """Log out on the backend and forget the local snapshot."""
        await self._client.logout()
        self.is_authenticated = False
        self.logged_out = True
        self.app_data = None
