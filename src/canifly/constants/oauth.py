"""OAuth finalization polling budgets."""

LOGIN_POLL_MAX_ATTEMPTS = 25
ADD_CHARACTER_POLL_MAX_ATTEMPTS = 5
OAUTH_POLL_INTERVAL_SECONDS = 5.0

__all__ = [
    "LOGIN_POLL_MAX_ATTEMPTS",
    "ADD_CHARACTER_POLL_MAX_ATTEMPTS",
    "OAUTH_POLL_INTERVAL_SECONDS",
]
