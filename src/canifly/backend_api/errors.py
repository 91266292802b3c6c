"""Error types raised by the backend client."""

from typing import Any


class BackendClientError(RuntimeError):
    """Raised when a CanIFly backend request fails; keyword fields become attributes."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class BackendUnauthorizedError(BackendClientError):
    """Backend answered 401, e.g. the OAuth callback has not completed yet."""


__all__ = ["BackendClientError", "BackendUnauthorizedError"]
