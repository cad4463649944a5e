"""Timer backends for the passive waits inside a dispatch.

The Dispatcher never sleeps directly.  Backoff and settle waits go through
a ``Timer`` so callers decide whether the wait is real (``AsyncioTimer``)
or only recorded (``RecordingTimer``).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Timer(Protocol):
    """Protocol for the suspension primitive used between attempts."""

    async def sleep(self, seconds: float) -> None:
        """Suspend the current dispatch for *seconds*."""
        ...


class AsyncioTimer:
    """Suspends with ``asyncio.sleep``; other tasks keep running."""

    async def sleep(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)


class RecordingTimer:
    """Records every requested delay and returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def sleep(self, seconds: float) -> None:
        logger.debug("RecordingTimer: skipped %.2fs wait", seconds)
        self.delays.append(seconds)

    @property
    def total_seconds(self) -> float:
        """Sum of all recorded delays."""
        return sum(self.delays)
