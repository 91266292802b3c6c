"""Request execution logic for the CanIFly backend."""

import asyncio
import logging
from typing import Any

import aiohttp

from canifly.constants.network import HTTP_UNAUTHORIZED

from .errors import BackendClientError, BackendUnauthorizedError

logger = logging.getLogger(__name__)

_SUCCESS_STATUSES = range(200, 300)


class RequestExecutor:
    """Execute HTTP requests against the backend and decode their bodies."""

    def __init__(self, session_manager, base_url: str):
        self._session_manager = session_manager
        self._base_url = base_url.rstrip("/")

    def build_url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def execute_request(self, method: str, path: str, **request_kwargs: Any) -> Any:
        """Send the request and return the decoded JSON (or text) body."""
        session = await self._session_manager.ensure_session()
        url = self.build_url(path)
        try:
            async with session.request(method.upper(), url, **request_kwargs) as response:
                body = await self._read_body(response)
                return self._check_status(response.status, body, path=path)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            reason = str(exc) or type(exc).__name__
            logger.error("Backend request %s %s failed: %s", method.upper(), path, reason)
            raise BackendClientError(f"Backend request {path} failed: {reason}", path=path) from exc

    async def _read_body(self, response: aiohttp.ClientResponse) -> Any:
        content_type = response.headers.get("Content-Type", "")
        if "application/json" in content_type:
            try:
                payload = await response.json()
            except (aiohttp.ContentTypeError, ValueError) as exc:
                raise BackendClientError(f"Backend sent malformed JSON for {response.url}") from exc
            logger.debug("Backend JSON response: %s", payload)
            return payload
        return await response.text()

    def _check_status(self, status: int, body: Any, *, path: str) -> Any:
        if status in _SUCCESS_STATUSES:
            return body

        message = _error_message(body)
        if status == HTTP_UNAUTHORIZED:
            logger.debug("Backend request %s unauthorized: %s", path, message)
            raise BackendUnauthorizedError(f"Backend request {path} returned {status}: {message}", status=status, path=path)

        logger.warning("Backend request %s returned %d: %s", path, status, message)
        raise BackendClientError(f"Backend request {path} returned {status}: {message}", status=status, path=path)


def _error_message(body: Any) -> str:
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    if isinstance(body, str) and body.strip():
        return body.strip()
    return "An unexpected error occurred."


__all__ = ["RequestExecutor"]
