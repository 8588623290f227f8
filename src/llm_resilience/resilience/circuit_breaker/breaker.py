"""Resilience – CircuitBreaker implementation."""
from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Awaitable, Callable, TypeVar

from llm_resilience.kernel.time import Clock, SystemClock
from llm_resilience.observability.logging import AttemptFailedHook, get_logger
from llm_resilience.resilience.circuit_breaker.errors import CircuitOpenError
from llm_resilience.resilience.circuit_breaker.policy import CircuitBreakerConfig
from llm_resilience.resilience.circuit_breaker.state import CircuitBreakerState, CircuitState
from llm_resilience.resilience.retry import (
    Classifier,
    FatalOperationError,
    ResilientExecutor,
    RetryExhaustedError,
    RetryPolicy,
)

T = TypeVar("T")
logger = get_logger(__name__)

_SINGLE_ATTEMPT = RetryPolicy(max_attempts=1)


class CircuitBreaker:
    """asyncio-safe circuit breaker wrapping a :class:`ResilientExecutor`.

    The breaker decides whether a call may run at all; the executor decides
    how many attempts an admitted call gets. A logical call that fails after
    its retries counts as one failure. Construct one breaker per dependency
    and share the instance with every call site that talks to it.

    Bookkeeping (admission, success, failure) is serialised by an
    :class:`asyncio.Lock`; the operations themselves run concurrently.
    """

    def __init__(
        self,
        name: str,
        config: CircuitBreakerConfig | None = None,
        *,
        executor: ResilientExecutor | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self._config = config or CircuitBreakerConfig()
        self._executor = executor or ResilientExecutor()
        self._clock = clock or SystemClock()
        self._state = CircuitBreakerState.CLOSED
        self._consecutive_failures = 0
        self._opened_at: datetime | None = None
        self._opened_monotonic: float | None = None
        self._probe_in_flight = False
        self._lock = asyncio.Lock()

    @property
    def config(self) -> CircuitBreakerConfig:
        return self._config

    @property
    def state(self) -> CircuitBreakerState:
        return self._state

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    def snapshot(self) -> CircuitState:
        return CircuitState(
            state=self._state,
            consecutive_failures=self._consecutive_failures,
            opened_at=self._opened_at,
            probe_in_flight=self._probe_in_flight,
        )

    async def reset(self) -> None:
        """Force the circuit CLOSED (operator override)."""
        async with self._lock:
            self._close()

    async def call(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run *operation* once behind the breaker, without retries."""
        return await self.execute_with_breaker(operation, _SINGLE_ATTEMPT)

    async def execute_with_breaker(
        self,
        operation: Callable[[], Awaitable[T]],
        retry_policy: RetryPolicy,
        classify: Classifier | None = None,
        on_attempt_failed: AttemptFailedHook | None = None,
    ) -> T:
        is_probe = await self._admit()
        recorded = False
        try:
            try:
                result = await self._executor.execute(operation, retry_policy, classify, on_attempt_failed)
            except Exception as exc:
                async with self._lock:
                    if self._is_excluded(exc):
                        self._release_probe(is_probe)
                    else:
                        self._on_failure(is_probe, exc)
                    recorded = True
                raise
            async with self._lock:
                self._on_success(is_probe)
                recorded = True
            return result
        finally:
            # Cancelled during the operation or while waiting for the lock.
            if not recorded:
                self._release_probe(is_probe)

    async def _admit(self) -> bool:
        """Return ``True`` when the caller is the half-open probe; raise if rejected."""
        async with self._lock:
            if self._state == CircuitBreakerState.OPEN:
                if self._remaining_cooldown() > 0:
                    raise self._rejection()
                logger.info("circuit_breaker.half_open", name=self.name)
                self._state = CircuitBreakerState.HALF_OPEN
                self._probe_in_flight = False
            if self._state == CircuitBreakerState.HALF_OPEN:
                if self._probe_in_flight:
                    raise self._rejection()
                self._probe_in_flight = True
                return True
            return False

    def _remaining_cooldown(self) -> float:
        if self._opened_monotonic is None:
            return 0.0
        elapsed = self._clock.monotonic() - self._opened_monotonic
        return max(0.0, self._config.reset_timeout_seconds - elapsed)

    def _rejection(self) -> CircuitOpenError:
        logger.warning("circuit_breaker.rejected", name=self.name, state=self._state.value)
        return CircuitOpenError(
            self.name,
            opened_at=self._opened_at,
            reset_timeout_ms=self._config.reset_timeout_ms,
            retry_after_seconds=self._remaining_cooldown(),
        )

    def _is_excluded(self, exc: Exception) -> bool:
        excluded = self._config.excluded_exceptions
        if not excluded:
            return False
        underlying: BaseException = exc
        if isinstance(exc, RetryExhaustedError):
            underlying = exc.last_error
        elif isinstance(exc, FatalOperationError):
            underlying = exc.error
        return isinstance(underlying, excluded)

    def _on_success(self, is_probe: bool) -> None:
        if is_probe:
            logger.info("circuit_breaker.closed", name=self.name)
            self._close()
        elif self._state == CircuitBreakerState.CLOSED:
            self._consecutive_failures = 0

    def _on_failure(self, is_probe: bool, exc: Exception) -> None:
        if is_probe:
            self._consecutive_failures += 1
            self._open(reason="probe_failed", exc=exc)
            return
        if self._state != CircuitBreakerState.CLOSED:
            return
        self._consecutive_failures += 1
        logger.warning(
            "circuit_breaker.failure",
            name=self.name,
            count=self._consecutive_failures,
            threshold=self._config.failure_threshold,
        )
        if self._consecutive_failures >= self._config.failure_threshold:
            self._open(reason="threshold_reached", exc=exc)

    def _release_probe(self, is_probe: bool) -> None:
        """Give the probe slot back; the circuit stays open with its original ``opened_at``."""
        if is_probe and self._state == CircuitBreakerState.HALF_OPEN:
            self._probe_in_flight = False
            self._state = CircuitBreakerState.OPEN

    def _open(self, *, reason: str, exc: Exception) -> None:
        logger.error(
            "circuit_breaker.opened",
            name=self.name,
            reason=reason,
            failures=self._consecutive_failures,
            error=repr(exc),
        )
        self._state = CircuitBreakerState.OPEN
        self._opened_at = self._clock.now()
        self._opened_monotonic = self._clock.monotonic()
        self._probe_in_flight = False

    def _close(self) -> None:
        self._state = CircuitBreakerState.CLOSED
        self._consecutive_failures = 0
        self._opened_at = None
        self._opened_monotonic = None
        self._probe_in_flight = False


__all__ = ["CircuitBreaker"]
