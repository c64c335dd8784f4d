"""
Resilience patterns for external API calls.

This module provides:
1. Circuit Breaker - Fail fast after consecutive failed fetches
2. Retry - Exponential backoff with jitter
3. ResilientExecutor - Both combined around one call

Usage:
    from stocks_importer.services.data_providers.resilience import (
        CircuitBreaker,
        ResilientExecutor,
        retry_async,
    )

    executor = ResilientExecutor(name="yahooquery", max_retries=3)
    document = await executor.execute(lambda: fetch_document("AAPL"))
"""

from __future__ import annotations

import asyncio
import random
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from stocks_importer.core.logging import get_logger


logger = get_logger("resilience")

T = TypeVar("T")


# =============================================================================
# Exceptions
# =============================================================================


class CircuitOpenError(Exception):
    """Raised when circuit breaker is open and blocking calls."""

    def __init__(self, name: str, message: str = "Circuit breaker is open"):
        self.name = name
        self.message = message
        super().__init__(f"{name}: {message}")


class RetryExhaustedError(Exception):
    """Raised when all retry attempts are exhausted."""

    def __init__(self, attempts: int, last_error: Exception | None = None):
        self.attempts = attempts
        self.last_error = last_error
        message = f"All {attempts} retry attempts exhausted"
        if last_error:
            message += f": {last_error}"
        super().__init__(message)


# =============================================================================
# Circuit Breaker
# =============================================================================


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation
    OPEN = "open"  # Failing fast, blocking calls
    HALF_OPEN = "half_open"  # Testing if service recovered


@dataclass
class CircuitBreaker:
    """
    Circuit breaker pattern for fail-fast protection.

    States:
    - CLOSED: Normal operation, counting failures
    - OPEN: After threshold failures, block all calls
    - HALF_OPEN: After recovery timeout, allow test request

    Args:
        failure_threshold: Number of consecutive failures before opening
        recovery_timeout: Seconds to wait before testing (half-open)
        name: Identifier for logging
        excluded_exceptions: Exception types that shouldn't trigger circuit
    """

    failure_threshold: int = 5
    recovery_timeout: float = 30.0
    name: str = "circuit"
    excluded_exceptions: tuple[type, ...] = ()

    _state: CircuitState = field(default=CircuitState.CLOSED, init=False)
    _failure_count: int = field(default=0, init=False)
    _last_failure_time: float | None = field(default=None, init=False)

    @property
    def state(self) -> CircuitState:
        """Current circuit state (may transition from OPEN to HALF_OPEN)."""
        if self._state == CircuitState.OPEN and self._last_failure_time:
            if time.monotonic() - self._last_failure_time >= self.recovery_timeout:
                return CircuitState.HALF_OPEN
        return self._state

    @property
    def is_closed(self) -> bool:
        return self.state == CircuitState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state == CircuitState.OPEN

    async def guard(self) -> None:
        """Raise CircuitOpenError if open; call before the protected operation."""
        state = self.state

        if state == CircuitState.OPEN:
            raise CircuitOpenError(
                self.name,
                f"Circuit open after {self._failure_count} failures, "
                f"retry in {self.recovery_timeout - (time.monotonic() - (self._last_failure_time or 0)):.1f}s",
            )

        if state == CircuitState.HALF_OPEN:
            logger.info(f"[{self.name}] Circuit half-open, allowing test request")

    def record_success(self) -> None:
        """Record a successful call, reset failure count."""
        if self._state != CircuitState.CLOSED:
            logger.info(f"[{self.name}] Circuit closed after successful recovery")

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._last_failure_time = None

    def record_failure(self, error: Exception | None = None) -> None:
        """Record a failed call. Opens circuit after threshold failures."""
        if error and isinstance(error, self.excluded_exceptions):
            return

        self._failure_count += 1
        self._last_failure_time = time.monotonic()

        if self._failure_count >= self.failure_threshold:
            if self._state != CircuitState.OPEN:
                logger.warning(
                    f"[{self.name}] Circuit OPEN after {self._failure_count} failures"
                )
            self._state = CircuitState.OPEN
        else:
            logger.debug(
                f"[{self.name}] Failure {self._failure_count}/{self.failure_threshold}"
            )

    def reset(self) -> None:
        """Force reset to closed state."""
        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._last_failure_time = None

    def get_stats(self) -> dict[str, Any]:
        """Get circuit breaker statistics."""
        return {
            "name": self.name,
            "state": self.state.value,
            "failure_count": self._failure_count,
            "failure_threshold": self.failure_threshold,
            "recovery_timeout": self.recovery_timeout,
            "last_failure_age": (
                time.monotonic() - self._last_failure_time
                if self._last_failure_time
                else None
            ),
        }


# =============================================================================
# Retry with Exponential Backoff
# =============================================================================

# Transport failures worth another attempt; requests and curl_cffi errors are OSErrors
DEFAULT_RETRY_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
    asyncio.TimeoutError,
    OSError,
)


def backoff_delay(
    attempt: int,
    base_delay: float = 1.0,
    max_delay: float = 10.0,
    exponential_base: float = 2.0,
    jitter: float = 0.5,
) -> float:
    """Delay before retry ``attempt`` (1-based), capped, with ±jitter."""
    delay = min(base_delay * (exponential_base ** (attempt - 1)), max_delay)
    if jitter > 0:
        delay *= 1 + (random.random() - 0.5) * 2 * jitter
    return delay


async def retry_async(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 10.0,
    exponential_base: float = 2.0,
    jitter: float = 0.5,
    retry_on: tuple[type[Exception], ...] = DEFAULT_RETRY_EXCEPTIONS,
    on_retry: Callable[[int, Exception], None] | None = None,
) -> T:
    """
    Retry an async function with exponential backoff.

    Args:
        func: Async callable to retry
        max_attempts: Maximum attempts (including the first)
        base_delay: Initial delay
        max_delay: Max delay cap
        exponential_base: Exponential growth base
        jitter: Jitter factor (0.5 = ±50% of delay)
        retry_on: Exceptions to retry on
        on_retry: Callback(attempt_number, exception) before each retry

    Returns:
        Result from successful func call

    Raises:
        RetryExhaustedError: If all attempts fail
    """
    last_error: Exception | None = None

    for attempt in range(1, max_attempts + 1):
        try:
            return await func()
        except retry_on as e:
            last_error = e

            if attempt >= max_attempts:
                logger.warning(f"Retry exhausted after {max_attempts} attempts: {e}")
                raise RetryExhaustedError(max_attempts, last_error) from e

            delay = backoff_delay(attempt, base_delay, max_delay, exponential_base, jitter)
            logger.debug(f"Retry {attempt}/{max_attempts} after {delay:.2f}s: {e}")

            if on_retry:
                on_retry(attempt, e)

            await asyncio.sleep(delay)

    raise RetryExhaustedError(max_attempts, last_error)


# =============================================================================
# Combined Resilient Executor
# =============================================================================


class ResilientExecutor:
    """
    Circuit breaker around retry: a call that exhausts its retries counts as
    one circuit failure, so a dead upstream stops costing full retry cycles.

    Usage:
        executor = ResilientExecutor(name="yahooquery")
        result = await executor.execute(lambda: fetch("AAPL"))
    """

    def __init__(
        self,
        name: str = "resilient",
        failure_threshold: int = 5,
        recovery_timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        retry_on: tuple[type[Exception], ...] = DEFAULT_RETRY_EXCEPTIONS,
    ):
        self.name = name
        self.circuit = CircuitBreaker(
            failure_threshold=failure_threshold,
            recovery_timeout=recovery_timeout,
            name=name,
        )
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._retry_on = retry_on

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """Order: Circuit Breaker → Retry."""
        await self.circuit.guard()

        try:
            result = await retry_async(
                func,
                max_attempts=self._max_retries,
                base_delay=self._retry_delay,
                retry_on=self._retry_on,
            )
        except Exception as e:
            self.circuit.record_failure(e)
            raise

        self.circuit.record_success()
        return result

    def get_stats(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "circuit": self.circuit.get_stats(),
        }
