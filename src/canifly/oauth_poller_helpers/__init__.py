"""Helpers for OAuthFinalizationPoller."""

from .collaborator_calls import call_after_finalize, call_finalize, is_finalize_success
from .poll_session import PollOutcome, PollSession, PollState

__all__ = [
    "PollOutcome",
    "PollSession",
    "PollState",
    "call_after_finalize",
    "call_finalize",
    "is_finalize_success",
]
