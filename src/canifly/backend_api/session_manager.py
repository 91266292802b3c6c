"""Shared aiohttp session for backend calls."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

import aiohttp

from canifly.http_utils import is_aiohttp_session_open

if TYPE_CHECKING:
    from .client import BackendConfig


class SessionManager:
    """Lazily opens one ``ClientSession`` and hands it to every request."""

    def __init__(self, config: BackendConfig) -> None:
        self._timeout = aiohttp.ClientTimeout(
            total=config.request_timeout_seconds,
            connect=config.connect_timeout_seconds,
        )
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    async def ensure_session(self) -> aiohttp.ClientSession:
        """Return the open session, creating a new one after a close."""
        async with self._lock:
            if not is_aiohttp_session_open(self._session):
                # Login cookie is set for localhost, which the default jar refuses
                self._session = aiohttp.ClientSession(
                    timeout=self._timeout,
                    cookie_jar=aiohttp.CookieJar(unsafe=True),
                )
            return self._session

    async def close(self) -> None:
        async with self._lock:
            session, self._session = self._session, None
            if session is not None:
                await session.close()

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        return self._session
