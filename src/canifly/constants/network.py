"""Network and HTTP constants.

These constants define HTTP status codes and connection defaults
used when talking to the CanIFly backend.
"""

# HTTP status codes
HTTP_UNAUTHORIZED = 401

# Backend defaults
DEFAULT_BACKEND_URL = "http://localhost:8713"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10

__all__ = [
    "HTTP_UNAUTHORIZED",
    "DEFAULT_BACKEND_URL",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
]
