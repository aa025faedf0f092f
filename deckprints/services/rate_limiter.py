"""
Courtesy rate limiting for outbound Scryfall requests.

Scryfall asks clients to keep 50-100 ms between requests. The throttle is an
interval gate: each `wait()` suspends until at least `interval` seconds have
passed since the previous `wait()` returned. The first call never waits.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable

from deckprints.config import settings


class RequestThrottle:
    """
    Awaitable minimum-interval gate.

    Not a queue: callers are expected to be sequential, so there is no
    fairness or backpressure handling.
    """

    def __init__(
        self,
        interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize the throttle.

        Args:
            interval: Minimum seconds between consecutive requests
            clock: Monotonic time source
            sleep: Async sleep used to wait out the interval
        """
        if interval < 0:
            raise ValueError(f"Throttle interval must be non-negative, got {interval}")
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last: float | None = None

    @classmethod
    def from_settings(cls) -> "RequestThrottle":
        """Build a throttle using settings.request_interval_ms."""
        return cls(settings.request_interval_ms / 1000.0)

    async def wait(self) -> None:
        """Suspend until the interval since the previous request has elapsed."""
        if self._last is not None:
            remaining = self._last + self.interval - self._clock()
            if remaining > 0:
                await self._sleep(remaining)
        self._last = self._clock()
