"""
Token bucket rate limiter for classification requests.

Classification can be triggered by external end-user actions, so every
LLM call that goes through the limiter consumes one token. When the bucket
is empty the call is skipped rather than queued; nothing else in the
system is affected.

With the default settings the long-run average is one classification every
2 seconds (5 tokens per 10 seconds), with bursts of up to 100 after the
bucket has been idle for a few minutes.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class RateLimiterStatistics:
    """Point-in-time snapshot of limiter counters."""

    available_tokens: int
    total_successful_leases: int
    total_failed_leases: int


class TokenBucketRateLimiter:
    """
    Non-blocking token bucket shared by all callers in the process.

    Refill is computed lazily from elapsed whole periods on every access, so
    no background timer is needed. All state changes happen under a single
    lock, which is never held across an await.
    """

    def __init__(
        self,
        token_limit: int = 100,
        tokens_per_period: int = 5,
        replenishment_period: float = 10.0,
        auto_replenishment: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        if token_limit <= 0:
            raise ValueError(f"token_limit must be positive, got {token_limit}")
        if tokens_per_period <= 0:
            raise ValueError(f"tokens_per_period must be positive, got {tokens_per_period}")
        if replenishment_period <= 0:
            raise ValueError(
                f"replenishment_period must be positive, got {replenishment_period}"
            )

        self.token_limit = token_limit
        self.tokens_per_period = tokens_per_period
        self.replenishment_period = replenishment_period
        self.auto_replenishment = auto_replenishment

        self._clock = clock
        self._lock = threading.Lock()
        self._tokens = token_limit
        self._last_replenished_at = clock()
        self._successful_leases = 0
        self._failed_leases = 0

    @classmethod
    def from_settings(cls, settings) -> "TokenBucketRateLimiter":
        return cls(
            token_limit=settings.rate_limit_token_limit,
            tokens_per_period=settings.rate_limit_tokens_per_period,
            replenishment_period=settings.rate_limit_replenishment_period_seconds,
            auto_replenishment=settings.rate_limit_auto_replenishment,
        )

    def try_acquire(self) -> bool:
        """
        Take one token if available.

        Returns:
            True if the caller may proceed, False if the attempt should be skipped.
        """
        with self._lock:
            self._replenish_locked()
            if self._tokens >= 1:
                self._tokens -= 1
                self._successful_leases += 1
                return True
            self._failed_leases += 1
            return False

    def replenish(self) -> bool:
        """
        Manually add one period's worth of tokens.

        Only meaningful when auto-replenishment is disabled; returns False
        (and does nothing) otherwise.
        """
        if self.auto_replenishment:
            return False
        with self._lock:
            self._tokens = min(self.token_limit, self._tokens + self.tokens_per_period)
        return True

    @property
    def available_tokens(self) -> int:
        with self._lock:
            self._replenish_locked()
            return self._tokens

    def statistics(self) -> RateLimiterStatistics:
        with self._lock:
            self._replenish_locked()
            return RateLimiterStatistics(
                available_tokens=self._tokens,
                total_successful_leases=self._successful_leases,
                total_failed_leases=self._failed_leases,
            )

    def _replenish_locked(self) -> None:
        if not self.auto_replenishment:
            return

        now = self._clock()
        periods = int((now - self._last_replenished_at) // self.replenishment_period)
        if periods <= 0:
            return

        # Advance by whole periods only so a partial period carries over
        self._last_replenished_at += periods * self.replenishment_period
        self._tokens = min(self.token_limit, self._tokens + periods * self.tokens_per_period)
