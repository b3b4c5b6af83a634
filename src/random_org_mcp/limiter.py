# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token bucket rate limiter for outbound API requests.

Refill is computed lazily on each acquisition attempt, so the limiter needs
no background task: its whole state is the current token count and the time
of the last refill.
"""

import asyncio
import logging
import math
import time
from collections.abc import Awaitable, Callable

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TokenBucketRateLimiter:
    """
    Async token bucket gating outbound requests.

    The bucket starts full. Each ``acquire()`` consumes one token, waiting in
    steps of ``1 / rate`` seconds while none is available. After every wait
    the refill-and-check is repeated, so concurrent waiters all re-evaluate
    the shared count instead of being granted a token blindly.

    Concurrency:
        The refill-and-decrement sequence runs under an ``asyncio.Lock``;
        the wait happens outside it. Tokens are therefore never consumed
        below zero by interleaved tasks on the same event loop.

    Attributes:
        rate: Tokens added per second.
        capacity: Maximum number of tokens the bucket holds.

    Example:
        >>> limiter = TokenBucketRateLimiter(rate=1, capacity=5)
        >>> await limiter.acquire()
        >>> limiter.available_tokens
        4
    """

    def __init__(
        self,
        rate: float,
        capacity: int,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize the limiter with a full bucket.

        Args:
            rate: Refill rate in tokens per second. Must be positive.
            capacity: Burst size. Must be at least 1.
            clock: Monotonic time source in seconds.
            sleep: Coroutine used to wait between attempts.

        Raises:
            ConfigurationError: If rate or capacity is out of range.
        """
        if rate <= 0:
            raise ConfigurationError("rate must be positive")
        if capacity < 1:
            raise ConfigurationError("capacity must be at least 1")

        self.rate = float(rate)
        self.capacity = capacity
        self._clock = clock
        self._sleep = sleep

        self._tokens = float(capacity)
        self._last_refill = clock()
        self._lock = asyncio.Lock()

        # Diagnostics
        self.total_acquired = 0
        self.total_waits = 0

    @property
    def wait_interval(self) -> float:
        """Seconds to wait before re-checking an empty bucket."""
        return 1.0 / self.rate

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self.capacity), self._tokens + elapsed * self.rate)
        self._last_refill = now

    def _try_consume(self) -> bool:
        self._refill()
        if self._tokens >= 1:
            self._tokens -= 1
            self.total_acquired += 1
            return True
        return False

    async def try_acquire(self) -> bool:
        """Consume a token if one is available right now, without waiting."""
        async with self._lock:
            return self._try_consume()

    async def acquire(self) -> None:
        """
        Wait until a token is available, then consume it.

        Never raises and applies no timeout; the wait is bounded only by
        the refill rate and contention from other callers.
        """
        while not await self.try_acquire():
            self.total_waits += 1
            logger.debug(
                f"Rate limit reached, waiting {self.wait_interval:.3f}s for a token"
            )
            await self._sleep(self.wait_interval)

    @property
    def available_tokens(self) -> int:
        """Whole tokens available now, after refilling."""
        self._refill()
        return math.floor(self._tokens)


__all__ = ["TokenBucketRateLimiter"]
