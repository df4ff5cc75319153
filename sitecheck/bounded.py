# File: sitecheck/bounded.py
"""Bounded operations: await a step for at most ``budget`` seconds.

Unlike :func:`asyncio.wait_for`, an expired step is *abandoned* rather than
cancelled. It keeps running as a background task until it settles on its own;
its late result or exception is consumed and logged at DEBUG level only.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Set, TypeVar

from sitecheck.errors import StepTimeout
from sitecheck.logger import logger

__all__ = ("bounded", "abandoned_count")

T = TypeVar("T")

# abandoned tasks stay referenced until they settle
_abandoned: Set[asyncio.Future] = set()


def _reap(task: asyncio.Future) -> None:
    _abandoned.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Abandoned step settled late with %s: %s", type(exc).__name__, exc)


async def bounded(action: Awaitable[T], budget: float) -> T:
    """Await *action* under *budget* seconds, raising :class:`StepTimeout` on expiry."""
    task = asyncio.ensure_future(action)
    try:
        done, _ = await asyncio.wait({task}, timeout=budget)
    except asyncio.CancelledError:
        # the caller itself was cancelled: take the step down with it
        task.cancel()
        raise
    if task in done:
        return task.result()
    _abandoned.add(task)
    task.add_done_callback(_reap)
    raise StepTimeout()


def abandoned_count() -> int:
    """Number of abandoned steps that are still running."""
    return len(_abandoned)
