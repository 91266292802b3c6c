"""Guarded invocation of the poller's injected collaborators.

Collaborators are expected to report failure by value. Anything they raise
(other than cancellation) is logged and counted as "not ready yet".
"""

import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

FinalizeFn = Callable[[str], Awaitable[Any]]
AfterFinalizeFn = Callable[[], Awaitable[Any]]


def is_finalize_success(response: Any) -> bool:
    """Interpret a finalize response (mapping, bool, or object with ``success``)."""
    if response is None:
        return False
    if isinstance(response, bool):
        return response
    if isinstance(response, Mapping):
        return bool(response.get("success"))
    return bool(getattr(response, "success", False))


async def call_finalize(finalize_fn: FinalizeFn, token: str, poller_name: str) -> bool:
    try:
        response = await finalize_fn(token)
    except Exception:
        logger.warning("%s: finalize raised; treating as not ready", poller_name, exc_info=True)
        return False
    return is_finalize_success(response)


async def call_after_finalize(after_finalize: AfterFinalizeFn, poller_name: str) -> bool:
    try:
        result = await after_finalize()
    except Exception:
        logger.warning("%s: after_finalize raised; treating as not ready", poller_name, exc_info=True)
        return False
    return bool(result)
