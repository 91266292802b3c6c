"""Poll session state for the OAuth finalization poller."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PollState(Enum):
    """Observable states of a poller."""

    IDLE = "idle"
    POLLING_UNFINALIZED = "polling_unfinalized"
    POLLING_FINALIZED = "polling_finalized"
    DONE = "done"


class PollOutcome(Enum):
    """How a poll session ended."""

    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"
    SUPERSEDED = "superseded"


@dataclass
class PollSession:
    """
    One run of the bounded finalize/refresh loop.

    ``finalized`` only ever moves from False to True, and a finished session
    never becomes active again.
    """

    token: str
    generation: int
    attempt_count: int = 0
    finalized: bool = False
    active: bool = True
    outcome: Optional[PollOutcome] = None

    @property
    def state(self) -> PollState:
        if not self.active:
            return PollState.DONE
        if self.finalized:
            return PollState.POLLING_FINALIZED
        return PollState.POLLING_UNFINALIZED

    def mark_finalized(self) -> None:
        self.finalized = True

    def finish(self, outcome: PollOutcome) -> None:
        if not self.active:
            return
        self.active = False
        self.outcome = outcome
