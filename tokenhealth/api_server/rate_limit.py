"""
Token-bucket rate limiting.

Each client gets a TokenBucket holding up to `capacity` requests that refills
continuously at capacity / window_seconds tokens per second. Buckets live in
a RateLimiter owned by the app (app.state.rate_limiter), never in module
globals. The clock is injectable so tests can drive time.
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from tokenhealth.core.exceptions import RateLimitExceeded
from tokenhealth.tokenhealth_logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of one consume() call."""

    allowed: bool
    remaining: int
    limit: int
    retry_after: int | None = None
    """Seconds until one token is available; None when allowed."""


class TokenBucket:
    """Continuously refilling bucket; not thread-safe on its own (RateLimiter locks)."""

    def __init__(self, capacity: int, window_seconds: float, clock: Clock = time.monotonic) -> None:
        if capacity < 1 or window_seconds <= 0:
            raise ValueError("capacity must be >= 1 and window_seconds > 0")
        self.capacity = capacity
        self.window_seconds = window_seconds
        self._clock = clock
        self._tokens = float(capacity)
        self._updated_at = clock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._updated_at)
        self._tokens = min(float(self.capacity), self._tokens + elapsed * self.capacity / self.window_seconds)
        self._updated_at = now

    def idle_for(self, now: float) -> float:
        """Seconds since the last consume; a bucket idle for a full window is full."""
        return now - self._updated_at

    def consume(self, tokens: int = 1) -> RateLimitResult:
        self._refill()
        if self._tokens >= tokens:
            self._tokens -= tokens
            return RateLimitResult(allowed=True, remaining=int(self._tokens), limit=self.capacity)
        deficit = tokens - self._tokens
        retry_after = max(1, math.ceil(deficit * self.window_seconds / self.capacity))
        return RateLimitResult(
            allowed=False,
            remaining=0,
            limit=self.capacity,
            retry_after=retry_after,
        )


class RateLimiter:
    """
    Registry of per-identifier buckets.

    Buckets idle for a full window are refilled to capacity, so they are
    dropped (at most one sweep per window) and recreated on the next request.
    """

    def __init__(self, max_requests: int, window_seconds: float, clock: Clock = time.monotonic) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._buckets: dict[str, TokenBucket] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    @property
    def tracked_clients(self) -> int:
        return len(self._buckets)

    def _evict_idle(self) -> None:
        now = self._clock()
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        idle = [key for key, bucket in self._buckets.items() if bucket.idle_for(now) >= self.window_seconds]
        for key in idle:
            del self._buckets[key]
        if idle:
            logger.debug("rate_limit_buckets_evicted", evicted=len(idle), remaining=len(self._buckets))

    def check(self, identifier: str) -> RateLimitResult:
        with self._lock:
            self._evict_idle()
            bucket = self._buckets.get(identifier)
            if bucket is None:
                bucket = TokenBucket(self.max_requests, self.window_seconds, self._clock)
                self._buckets[identifier] = bucket
            return bucket.consume()

    def enforce(self, identifier: str) -> RateLimitResult:
        """Consume one token or raise RateLimitExceeded."""
        result = self.check(identifier)
        if not result.allowed:
            logger.warning(
                "rate_limit_blocked",
                identifier=identifier,
                limit=result.limit,
                retry_after=result.retry_after,
            )
            raise RateLimitExceeded(identifier, result.retry_after or 1)
        return result
