from __future__ import annotations

"""Settings dataclasses for the backend client and the OAuth pollers."""


from dataclasses import dataclass
from functools import lru_cache

from canifly.constants.network import (
    DEFAULT_BACKEND_URL,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from canifly.constants.oauth import (
    ADD_CHARACTER_POLL_MAX_ATTEMPTS,
    LOGIN_POLL_MAX_ATTEMPTS,
    OAUTH_POLL_INTERVAL_SECONDS,
)
from canifly.http_utils import ensure_http_url

from .errors import ConfigurationError
from .runtime import env_float, env_int, env_str


@dataclass(frozen=True)
class BackendSettings:
    base_url: str
    request_timeout_seconds: float
    connect_timeout_seconds: float


@dataclass(frozen=True)
class PollSettings:
    login_max_attempts: int
    add_character_max_attempts: int
    interval_seconds: float


@lru_cache(maxsize=1)
def get_backend_settings() -> BackendSettings:
    base_url = env_str("CANIFLY_BACKEND_URL", DEFAULT_BACKEND_URL)
    try:
        ensure_http_url(base_url)
    except ValueError as exc:
        raise ConfigurationError.invalid_value("CANIFLY_BACKEND_URL", base_url, str(exc)) from exc

    request_timeout = env_float("CANIFLY_REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS)
    connect_timeout = env_float("CANIFLY_CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS)
    _require_positive("CANIFLY_REQUEST_TIMEOUT_SECONDS", request_timeout)
    _require_positive("CANIFLY_CONNECT_TIMEOUT_SECONDS", connect_timeout)

    return BackendSettings(
        base_url=base_url.rstrip("/"),
        request_timeout_seconds=float(request_timeout),
        connect_timeout_seconds=float(connect_timeout),
    )


@lru_cache(maxsize=1)
def get_poll_settings() -> PollSettings:
    login_attempts = env_int("CANIFLY_LOGIN_POLL_MAX_ATTEMPTS", LOGIN_POLL_MAX_ATTEMPTS)
    add_character_attempts = env_int(
        "CANIFLY_ADD_CHARACTER_POLL_MAX_ATTEMPTS", ADD_CHARACTER_POLL_MAX_ATTEMPTS
    )
    interval = env_float("CANIFLY_OAUTH_POLL_INTERVAL_SECONDS", OAUTH_POLL_INTERVAL_SECONDS)

    _require_positive("CANIFLY_LOGIN_POLL_MAX_ATTEMPTS", login_attempts)
    _require_positive("CANIFLY_ADD_CHARACTER_POLL_MAX_ATTEMPTS", add_character_attempts)
    _require_positive("CANIFLY_OAUTH_POLL_INTERVAL_SECONDS", interval)

    return PollSettings(
        login_max_attempts=int(login_attempts),
        add_character_max_attempts=int(add_character_attempts),
        interval_seconds=float(interval),
    )


def _require_positive(name: str, value) -> None:
    if value is None or value <= 0:
        raise ConfigurationError.invalid_value(name, value, "Must be greater than zero")


__all__ = ["BackendSettings", "PollSettings", "get_backend_settings", "get_poll_settings"]
