"""Login, add-character, finalize and logout operations."""

import asyncio
import logging
from typing import Any, Dict

from .errors import BackendClientError, BackendUnauthorizedError
from .models import FinalizeResult, LoginRedirect

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _require_account(account: str) -> str:
    if not isinstance(account, str) or not account.strip():
        raise ValueError("account must be provided")
    return account.strip()


class AuthOperations:
    """Authentication endpoints of the backend."""

    def __init__(self, request_executor) -> None:
        self._executor = request_executor

    async def initiate_login(self, account: str) -> LoginRedirect:
        """Ask the backend for an SSO redirect for *account*."""
        path = "/api/login"
        payload = await self._executor.execute_request(
            "POST", path, json={"account": _require_account(account)}, headers=_JSON_HEADERS
        )
        return LoginRedirect.from_payload(payload, path=path)

    async def add_character(self, account: str) -> LoginRedirect:
        """Ask the backend for an SSO redirect that adds a character to *account*."""
        path = "/api/add-character"
        payload = await self._executor.execute_request(
            "POST", path, json={"account": _require_account(account)}, headers=_JSON_HEADERS
        )
        return LoginRedirect.from_payload(payload, path=path)

    async def finalize_login(self, state: str) -> FinalizeResult:
        """
        Exchange a completed OAuth callback for a logged-in backend session.

        Safe to call repeatedly for the same state. Never raises for transport
        or HTTP failures; those come back as ``FinalizeResult(success=False)``.
        """
        try:
            payload = await self._executor.execute_request(
                "POST", "/api/finalize-login", params={"state": state}, headers=_JSON_HEADERS
            )
        except BackendUnauthorizedError as exc:
            logger.debug("finalize-login not ready for state=%s: %s", state, exc)
            return FinalizeResult(success=False, error=str(exc))
        except (BackendClientError, asyncio.TimeoutError) as exc:
            logger.warning("finalize-login failed for state=%s: %s", state, exc)
            return FinalizeResult(success=False, error=str(exc))

        success = isinstance(payload, dict) and bool(payload.get("success"))
        return FinalizeResult(success=success)

    async def logout(self) -> Dict[str, Any]:
        payload = await self._executor.execute_request("POST", "/api/logout")
        return payload if isinstance(payload, dict) else {}
