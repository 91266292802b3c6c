"""CanIFly backend client.

Internal modules:
- session_manager: aiohttp session and cookie jar lifecycle
- request_executor: request dispatch, body decoding, status mapping
- auth_operations: login, add-character, finalize, logout
- app_data_operations: application snapshot queries
"""

from .client import BackendClient, BackendConfig
from .errors import BackendClientError, BackendUnauthorizedError
from .models import FinalizeResult, LoginRedirect

__all__ = [
    "BackendClient",
    "BackendClientError",
    "BackendConfig",
    "BackendUnauthorizedError",
    "FinalizeResult",
    "LoginRedirect",
]
