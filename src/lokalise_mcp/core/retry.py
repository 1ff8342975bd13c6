"""
Bounded retry loop for Lokalise API calls.

Retries are an explicit loop with an attempt counter and a sleep between
attempts. Only the bulk translation update uses it; every other request path
fails on the first error.
"""

import asyncio
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryStrategy(Enum):
    """Retry strategy types."""
    FIXED_DELAY = "fixed_delay"
    LINEAR_BACKOFF = "linear_backoff"
    EXPONENTIAL_BACKOFF = "exponential_backoff"


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""
    max_attempts: int = 3
    initial_delay_ms: int = 1000
    max_delay_ms: int = 30000
    strategy: RetryStrategy = RetryStrategy.FIXED_DELAY
    jitter: bool = False
    jitter_range: float = 0.1  # ±10% jitter
    backoff_multiplier: float = 2.0

    # Return False to stop retrying a given error
    should_retry_func: Optional[Callable[[Exception], bool]] = None


@dataclass
class AttemptOutcome(Generic[T]):
    """Final outcome of a retried call."""
    success: bool
    attempts: int
    result: Optional[T] = None
    error: Optional[Exception] = None


class RetryStats:
    """Statistics about retry attempts."""

    def __init__(self):
        self.total_attempts = 0
        self.successful_attempts = 0
        self.failed_attempts = 0
        self.total_delay_ms = 0
        self.error_counts: Dict[str, int] = {}
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def record_attempt(self, error: Optional[Exception] = None):
        """Record an attempt."""
        if self.start_time is None:
            self.start_time = time.monotonic()

        self.total_attempts += 1
        if error:
            self.failed_attempts += 1
            error_type = type(error).__name__
            self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1
        else:
            self.successful_attempts += 1
        self.end_time = time.monotonic()

    def record_delay(self, delay_ms: int):
        self.total_delay_ms += delay_ms

    @property
    def total_duration_ms(self) -> float:
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_attempts": self.total_attempts,
            "successful_attempts": self.successful_attempts,
            "failed_attempts": self.failed_attempts,
            "total_delay_ms": self.total_delay_ms,
            "total_duration_ms": self.total_duration_ms,
            "error_counts": self.error_counts.copy(),
        }


class RetryManager:
    """Runs an async callable up to ``max_attempts`` times."""

    def __init__(self, config: Optional[RetryConfig] = None):
        self.config = config or RetryConfig()
        self.stats = RetryStats()

    async def run(
        self,
        func: Callable[[], Awaitable[T]],
        *,
        label: str = "operation",
    ) -> AttemptOutcome[T]:
        """
        Call ``func`` until it succeeds or attempts run out.

        Args:
            func: Async callable to attempt
            label: Name used in log messages

        Returns:
            AttemptOutcome with the result or the last error; never raises
            for errors raised by ``func``
        """
        last_error: Optional[Exception] = None
        max_attempts = max(1, self.config.max_attempts)

        for attempt in range(1, max_attempts + 1):
            try:
                result = await func()
                self.stats.record_attempt()
                if attempt > 1:
                    logger.info(f"{label} succeeded after {attempt} attempts")
                return AttemptOutcome(success=True, attempts=attempt, result=result)
            except Exception as e:
                last_error = e
                self.stats.record_attempt(e)
                logger.warning(f"{label}: attempt {attempt}/{max_attempts} failed: {e}")

                if attempt >= max_attempts or not self._should_retry(e):
                    return AttemptOutcome(success=False, attempts=attempt, error=e)

                delay_ms = self._calculate_delay(attempt)
                if delay_ms > 0:
                    self.stats.record_delay(delay_ms)
                    await asyncio.sleep(delay_ms / 1000.0)

        return AttemptOutcome(success=False, attempts=max_attempts, error=last_error)

    def _should_retry(self, error: Exception) -> bool:
        if self.config.should_retry_func is None:
            return True
        return self.config.should_retry_func(error)

    def _calculate_delay(self, attempt: int) -> int:
        """Delay before the attempt following ``attempt`` (1-based)."""
        if self.config.strategy == RetryStrategy.FIXED_DELAY:
            delay = self.config.initial_delay_ms
        elif self.config.strategy == RetryStrategy.LINEAR_BACKOFF:
            delay = self.config.initial_delay_ms * attempt
        else:
            delay = int(self.config.initial_delay_ms * self.config.backoff_multiplier ** (attempt - 1))

        if self.config.jitter:
            jitter_amount = delay * self.config.jitter_range
            delay = int(delay + random.uniform(-jitter_amount, jitter_amount))

        return max(0, min(delay, self.config.max_delay_ms))
