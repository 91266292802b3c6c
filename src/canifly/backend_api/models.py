"""Response models for the authentication endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from canifly.http_utils import query_param

from .errors import BackendClientError


@dataclass(frozen=True)
class FinalizeResult:
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class LoginRedirect:
    """Browser URL to complete the OAuth handshake, plus its state token."""

    redirect_url: str
    state: str

    @classmethod
    def from_payload(cls, payload: Any, *, path: str) -> LoginRedirect:
        if not isinstance(payload, dict):
            raise BackendClientError(f"Response for {path} was not a JSON object", path=path)

        redirect_url = payload.get("redirectURL")
        if not isinstance(redirect_url, str) or not redirect_url:
            raise BackendClientError(f"No redirect URL received from {path}", path=path)

        # The add-character endpoint only returns the URL; the state rides in its query string
        state = payload.get("state")
        if not isinstance(state, str) or not state:
            state = query_param(redirect_url, "state")
        if not state:
            raise BackendClientError(f"No OAuth state received from {path}", path=path)

        return cls(redirect_url=redirect_url, state=state)


__all__ = ["FinalizeResult", "LoginRedirect"]
