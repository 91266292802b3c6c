"""Constants shared across the CanIFly client."""

from .network import (
    DEFAULT_BACKEND_URL,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    HTTP_UNAUTHORIZED,
)
from .oauth import (
    ADD_CHARACTER_POLL_MAX_ATTEMPTS,
    LOGIN_POLL_MAX_ATTEMPTS,
    OAUTH_POLL_INTERVAL_SECONDS,
)

__all__ = [
    "ADD_CHARACTER_POLL_MAX_ATTEMPTS",
    "DEFAULT_BACKEND_URL",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "HTTP_UNAUTHORIZED",
    "LOGIN_POLL_MAX_ATTEMPTS",
    "OAUTH_POLL_INTERVAL_SECONDS",
]
