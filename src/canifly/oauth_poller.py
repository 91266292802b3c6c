"""
OAuth finalization poller.

Drives a bounded two-phase retry loop for an external-browser OAuth handshake:
first finalize the pending authorization identified by a session token, then
keep refreshing application data until the refresh reports success. Both
phases share one attempt budget and one fixed tick interval.
"""

import asyncio
import logging
from typing import Optional

from .oauth_poller_helpers import (
    PollOutcome,
    PollSession,
    PollState,
    call_after_finalize,
    call_finalize,
)
from .oauth_poller_helpers.collaborator_calls import AfterFinalizeFn, FinalizeFn

logger = logging.getLogger(__name__)


class OAuthFinalizationPoller:
    """
    Bounded, cancellable finalize-then-refresh poller.

    Each ``start_poll`` creates a fresh session (attempt counter at zero,
    not finalized) and supersedes whatever session was running before. Ticks
    run sequentially on the event loop: the next interval only starts after
    the current tick's awaits have resolved, so a slow backend never causes
    overlapping calls.
    """

    def __init__(
        self,
        finalize_fn: FinalizeFn,
        after_finalize: AfterFinalizeFn,
        max_attempts: int = 5,
        interval_seconds: float = 5.0,
        *,
        name: str = "oauth-poll",
    ):
        """
        Initialize the poller.

        Args:
            finalize_fn: Coroutine function taking the session token; its result
                is a success when it is truthy ``success`` (mapping key or attribute)
            after_finalize: Coroutine function returning True once the refreshed
                data reflects the completed login
            max_attempts: Maximum number of ticks per session
            interval_seconds: Delay before each tick
            name: Label used in log messages
        """
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive (got {max_attempts})")
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive (got {interval_seconds})")

        self._finalize_fn = finalize_fn
        self._after_finalize = after_finalize
        self._max_attempts = max_attempts
        self._interval_seconds = interval_seconds
        self._name = name

        self._session: Optional[PollSession] = None
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def polling_active(self) -> bool:
        return self._session is not None and self._session.active

    @property
    def polling_state(self) -> Optional[str]:
        """Token of the most recent session, if any."""
        return self._session.token if self._session is not None else None

    @property
    def state(self) -> PollState:
        if self._session is None:
            return PollState.IDLE
        return self._session.state

    @property
    def attempts(self) -> int:
        return self._session.attempt_count if self._session is not None else 0

    @property
    def finalized(self) -> bool:
        return self._session is not None and self._session.finalized

    @property
    def outcome(self) -> Optional[PollOutcome]:
        return self._session.outcome if self._session is not None else None

    def start_poll(self, token: str) -> None:
        """
        Begin a new polling session for *token*.

        Must be called while an asyncio event loop is running.
        """
        logger.info("%s: start_poll called for state=%s", self._name, token)
        loop = asyncio.get_running_loop()
        self._invalidate(PollOutcome.SUPERSEDED)

        self._generation += 1
        session = PollSession(token=token, generation=self._generation)
        self._session = session
        self._task = loop.create_task(self._run(session), name=f"{self._name}-{session.generation}")

    def cancel(self) -> None:
        """Stop the current session, if any, without a final refresh."""
        if self.polling_active:
            logger.info("%s: polling cancelled for state=%s", self._name, self.polling_state)
        self._invalidate(PollOutcome.CANCELLED)

    async def wait(self) -> Optional[PollOutcome]:
        """Wait for the current session to end and return its outcome."""
        task = self._task
        session = self._session
        if task is not None and not task.done():
            # asyncio.wait never cancels the task when the waiter is cancelled
            await asyncio.wait({task})
        return session.outcome if session is not None else None

    def _invalidate(self, outcome: PollOutcome) -> None:
        session, task = self._session, self._task
        self._task = None
        if session is not None:
            session.finish(outcome)
        if task is not None and not task.done():
            task.cancel()

    def _is_current(self, session: PollSession) -> bool:
        return session is self._session and session.active

    async def _run(self, session: PollSession) -> None:
        logger.debug("%s: session %d started", self._name, session.generation)
        try:
            while self._is_current(session):
                await asyncio.sleep(self._interval_seconds)
                if not self._is_current(session):
                    return
                if await self._tick(session):
                    return
        except asyncio.CancelledError:
            session.finish(PollOutcome.CANCELLED)
            raise

    async def _tick(self, session: PollSession) -> bool:
        """Run one attempt; return True when the session has ended."""
        session.attempt_count += 1
        logger.debug(
            "%s: polling attempt #%d, finalized=%s",
            self._name,
            session.attempt_count,
            session.finalized,
        )

        if not session.finalized:
            finalized = await call_finalize(self._finalize_fn, session.token, self._name)
            if not self._is_current(session):
                return True
            if finalized:
                session.mark_finalized()
                logger.info("%s: finalization success, running after_finalize", self._name)
                if await self._refresh(session):
                    return True
            else:
                logger.debug("%s: not ready yet, continuing to poll finalize", self._name)
        else:
            logger.debug("%s: already finalized, retrying after_finalize", self._name)
            if await self._refresh(session):
                return True

        if not self._is_current(session):
            return True
        if session.attempt_count >= self._max_attempts:
            # Runs right away, so a failed refresh on this tick is followed by a second one
            await self._give_up(session)
            return True
        return False

    async def _refresh(self, session: PollSession) -> bool:
        refreshed = await call_after_finalize(self._after_finalize, self._name)
        if not self._is_current(session):
            return True
        if refreshed:
            logger.info("%s: after_finalize succeeded after %d attempt(s)", self._name, session.attempt_count)
            session.finish(PollOutcome.SUCCEEDED)
            return True
        logger.debug("%s: after_finalize not ready, will retry", self._name)
        return False

    async def _give_up(self, session: PollSession) -> None:
        logger.warning(
            "%s: gave up after %d attempts (finalized=%s); running one last after_finalize",
            self._name,
            session.attempt_count,
            session.finalized,
        )
        # The character or session may have arrived even though finalize never confirmed
        await call_after_finalize(self._after_finalize, self._name)
        session.finish(PollOutcome.EXHAUSTED)


__all__ = ["OAuthFinalizationPoller", "PollOutcome", "PollState"]
