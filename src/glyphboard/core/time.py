"""Clock abstraction used to pace the frame loop.

The controller only needs a monotonic clock and an awaitable sleep, so
tests can substitute a source that never actually waits.
"""

from __future__ import annotations

import asyncio
import time
from typing import Protocol

__all__ = [
    "TimeSource",
    "RealTimeSource",
]


class TimeSource(Protocol):
    def monotonic(self) -> float:
        """Return monotonic time in seconds (suitable for measuring durations)."""
        ...

    async def sleep(self, seconds: float) -> None:
        ...


class RealTimeSource:
    """System monotonic clock with asyncio.sleep."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
