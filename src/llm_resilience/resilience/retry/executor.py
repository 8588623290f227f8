"""Resilience – ResilientExecutor: retry with exponential backoff and jitter."""
from __future__ import annotations

import asyncio
import functools
from typing import Any, Awaitable, Callable, TypeVar

from llm_resilience.kernel.time import Clock, SystemClock
from llm_resilience.observability.logging import AttemptFailedHook, LoggingAttemptHook, get_logger
from llm_resilience.resilience.retry.classifier import Classifier, RetryClass, default_classifier
from llm_resilience.resilience.retry.errors import FatalOperationError, RetryExhaustedError
from llm_resilience.resilience.retry.jitter import JitterStrategy
from llm_resilience.resilience.retry.outcome import (
    AttemptOutcome,
    Cancelled,
    FatalFailure,
    RetryableFailure,
    Success,
    classify_outcome,
)
from llm_resilience.resilience.retry.policy import RetryPolicy
from llm_resilience.resilience.timeouts import AttemptTimeoutError, TimeoutPolicy

T = TypeVar("T")
logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


class ResilientExecutor:
    """Run an async operation up to ``policy.max_attempts`` times.

    Attempts are strictly sequential. Between attempts the executor awaits
    ``sleep`` (``asyncio.sleep`` by default), so no thread is blocked while
    backing off. Cancelling the calling task stops the loop immediately and
    re-raises :class:`asyncio.CancelledError`.

    Parameters
    ----------
    classify:
        Default classifier, overridable per call.
    on_attempt_failed:
        Default hook invoked before each backoff sleep with
        ``(attempt_number, error, delay_before_next_ms)``.
    sleep:
        Awaitable sleep used for backoff; injectable for tests.
    clock:
        Source of monotonic time for elapsed-time diagnostics.
    jitter:
        Overrides the jitter strategy derived from the policy.
    """

    def __init__(
        self,
        classify: Classifier | None = None,
        on_attempt_failed: AttemptFailedHook | None = None,
        *,
        sleep: Sleep | None = None,
        clock: Clock | None = None,
        jitter: JitterStrategy | None = None,
    ) -> None:
        self._classify = classify or default_classifier
        self._on_attempt_failed = on_attempt_failed or LoggingAttemptHook()
        self._sleep = sleep or asyncio.sleep
        self._clock = clock or SystemClock()
        self._jitter = jitter

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy,
        classify: Classifier | None = None,
        on_attempt_failed: AttemptFailedHook | None = None,
    ) -> T:
        classifier = classify or self._classify
        hook = on_attempt_failed or self._on_attempt_failed
        timeout = TimeoutPolicy.from_ms(policy.attempt_timeout_ms)
        started = self._clock.monotonic()
        attempt = 1

        try:
            while True:
                outcome = await self._attempt(operation, policy, timeout, classifier)

                if isinstance(outcome, Success):
                    if attempt > 1:
                        logger.info(
                            "retry.recovered",
                            attempt=attempt,
                            duration_ms=round((self._clock.monotonic() - started) * 1000, 1),
                        )
                    return outcome.value

                if isinstance(outcome, Cancelled):
                    raise outcome.error

                elapsed = self._clock.monotonic() - started
                if isinstance(outcome, FatalFailure):
                    logger.error("retry.fatal", attempt=attempt, error=repr(outcome.error))
                    raise FatalOperationError(outcome.error, attempt, elapsed) from outcome.error

                if attempt >= policy.max_attempts:
                    logger.error(
                        "retry.exhausted",
                        attempts=attempt,
                        elapsed_ms=round(elapsed * 1000, 1),
                        error=repr(outcome.error),
                    )
                    raise RetryExhaustedError(attempt, outcome.error, elapsed) from outcome.error

                delay_ms = policy.delay_for(attempt, error=outcome.error, jitter=self._jitter)
                self._notify(hook, attempt, outcome.error, delay_ms)
                await self._sleep(delay_ms / 1000)
                attempt += 1
        except asyncio.CancelledError:
            logger.info("retry.cancelled", attempt=attempt)
            raise

    async def _attempt(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: RetryPolicy,
        timeout: TimeoutPolicy | None,
        classify: Classifier,
    ) -> AttemptOutcome:
        try:
            if timeout is not None:
                value = await timeout.execute(operation)
            else:
                value = await operation()
        except asyncio.CancelledError as exc:
            return Cancelled(exc)
        except AttemptTimeoutError as exc:
            if policy.timeout_is_retryable:
                return RetryableFailure(exc)
            return FatalFailure(exc)
        except Exception as exc:
            return classify_outcome(exc, classify)
        return Success(value)

    @staticmethod
    def _notify(hook: AttemptFailedHook, attempt: int, error: Exception, delay_ms: float) -> None:
        try:
            hook(attempt, error, delay_ms)
        except Exception:
            logger.exception("retry.hook_failed", attempt=attempt)


def with_retry(
    policy: RetryPolicy,
    classify: Classifier | None = None,
    executor: ResilientExecutor | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate an ``async def`` so every call runs through :class:`ResilientExecutor`.

    Example
    -------
    ::

        @with_retry(RetryPolicy(max_attempts=5, base_delay_ms=200))
        async def complete(prompt: str) -> str:
            ...
    """
    runner = executor or ResilientExecutor()

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await runner.execute(lambda: func(*args, **kwargs), policy, classify)

        return wrapper

    return decorator


__all__ = ["ResilientExecutor", "with_retry"]
