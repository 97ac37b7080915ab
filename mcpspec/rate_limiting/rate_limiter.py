# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Rate limiter for outbound tool calls.

One limiter instance is shared by every test of a run, so admission is
serialised through asyncio primitives: a semaphore bounds the number of calls
in flight and a lock spaces call starts by the configured minimum interval.
Both primitives hand out access in arrival order.
"""

import asyncio
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, TypeVar

from mcpspec.errors import ConfigurationError, RateLimiterStoppedError
from mcpspec.utils.logging import get_logger

logger = get_logger("rate_limiter")

T = TypeVar("T")


@dataclass(frozen=True)
class RateLimitConfig:
    """Throughput limits for tool calls."""

    max_calls_per_second: float = 10
    max_concurrent: int = 5


class RateLimiter:
    """Throttles and queues coroutine calls."""

    def __init__(self, config: RateLimitConfig = None):
        """
        Initialize the rate limiter.

        Args:
            config: Limits to enforce, defaults to 10 calls/s and 5 in flight
        """
        self._config = config or RateLimitConfig()
        if self._config.max_calls_per_second <= 0:
            raise ConfigurationError("max_calls_per_second must be positive")
        if self._config.max_concurrent < 1:
            raise ConfigurationError("max_concurrent must be at least 1")

        self._min_interval = 1.0 / self._config.max_calls_per_second
        self._semaphore = asyncio.Semaphore(self._config.max_concurrent)
        self._spacing_lock = asyncio.Lock()
        self._next_start = 0.0
        self._in_flight = 0
        self._idle = asyncio.Event()
        self._idle.set()
        self._stopped = False

    async def schedule(self, fn: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``fn()`` once the limits allow it.

        Args:
            fn: Zero-argument coroutine function to invoke

        Returns:
            Whatever ``fn()`` returns

        Raises:
            RateLimiterStoppedError: If the limiter was stopped
        """
        if self._stopped:
            raise RateLimiterStoppedError()

        async with self._semaphore:
            await self._wait_for_slot()
            self._in_flight += 1
            self._idle.clear()
            try:
                return await fn()
            finally:
                self._in_flight -= 1
                if self._in_flight == 0:
                    self._idle.set()

    async def _wait_for_slot(self) -> None:
        async with self._spacing_lock:
            loop = asyncio.get_running_loop()
            now = loop.time()
            delay = self._next_start - now
            if delay > 0:
                logger.debug(f"Throttling tool call for {delay * 1000:.0f}ms")
                await asyncio.sleep(delay)
                now = loop.time()
            self._next_start = now + self._min_interval

    def get_config(self) -> RateLimitConfig:
        """Return a copy of the active limits."""
        return replace(self._config)

    @property
    def in_flight(self) -> int:
        """Number of calls currently running."""
        return self._in_flight

    async def stop(self) -> None:
        """Reject new calls and wait for the running ones to finish."""
        self._stopped = True
        await self._idle.wait()
