"""Call sites of the OAuth finalization poller."""

from .add_character import AddCharacterFlow
from .base import OAuthFlow
from .login import LoginFlow

__all__ = ["AddCharacterFlow", "LoginFlow", "OAuthFlow"]
