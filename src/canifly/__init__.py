"""Python client for the CanIFly companion backend."""

from .app_state import AppState
from .backend_api import BackendClient, BackendConfig
from .oauth_flows import AddCharacterFlow, LoginFlow
from .oauth_poller import OAuthFinalizationPoller, PollOutcome, PollState

__all__ = [
    "AddCharacterFlow",
    "AppState",
    "BackendClient",
    "BackendConfig",
    "LoginFlow",
    "OAuthFinalizationPoller",
    "PollOutcome",
    "PollState",
]
