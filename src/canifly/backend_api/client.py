"""Async REST client for the CanIFly backend."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from canifly.app_data import AppData
from canifly.config.settings import get_backend_settings
from canifly.constants.network import (
    DEFAULT_BACKEND_URL,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from canifly.http_utils import AioHTTPSessionConnectionMixin, ensure_http_url

from .app_data_operations import AppDataOperations
from .auth_operations import AuthOperations
from .models import FinalizeResult, LoginRedirect
from .request_executor import RequestExecutor
from .session_manager import SessionManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendConfig:
    """Configuration for the backend client."""

    base_url: str = DEFAULT_BACKEND_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> BackendConfig:
        settings = get_backend_settings()
        return cls(
            base_url=settings.base_url,
            request_timeout_seconds=settings.request_timeout_seconds,
            connect_timeout_seconds=settings.connect_timeout_seconds,
        )


class BackendClient(AioHTTPSessionConnectionMixin):
    """Client for the backend endpoints used by the login and add-character flows."""

    def __init__(self, config: Optional[BackendConfig] = None) -> None:
        self._config = config if config else BackendConfig()
        ensure_http_url(self._config.base_url)
        self._session_manager = SessionManager(self._config)
        executor = RequestExecutor(self._session_manager, self._config.base_url)
        self._auth_ops = AuthOperations(executor)
        self._app_data_ops = AppDataOperations(executor)

    @property
    def config(self) -> BackendConfig:
        return self._config

    @property
    def session(self):
        return self._session_manager.session

    async def initialize(self) -> None:
        await self._session_manager.ensure_session()

    async def close(self) -> None:
        await self._session_manager.close()

    async def __aenter__(self) -> BackendClient:
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def initiate_login(self, account: str) -> LoginRedirect:
        return await self._auth_ops.initiate_login(account)

    async def add_character(self, account: str) -> LoginRedirect:
        return await self._auth_ops.add_character(account)

    async def finalize_login(self, state: str) -> FinalizeResult:
        return await self._auth_ops.finalize_login(state)

    async def logout(self) -> Dict[str, Any]:
        return await self._auth_ops.logout()

    async def get_app_data(self) -> Optional[AppData]:
        return await self._app_data_ops.get_app_data()

    async def get_app_data_no_cache(self) -> Optional[AppData]:
        return await self._app_data_ops.get_app_data_no_cache()
