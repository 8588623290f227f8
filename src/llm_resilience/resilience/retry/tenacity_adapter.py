"""Resilience – TenacityRetryPolicy adapter.

Runs a :class:`RetryPolicy` on top of ``tenacity.AsyncRetrying`` for code
bases that already standardise on tenacity. The wait sequence, classifier
and attempt hook behave as in :class:`ResilientExecutor`; the difference is
that the last error is re-raised as-is instead of being wrapped in
``RetryExhaustedError`` / ``FatalOperationError``.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

import tenacity

from llm_resilience.observability.logging import AttemptFailedHook, LoggingAttemptHook
from llm_resilience.resilience.retry.classifier import Classifier, RetryClass, default_classifier
from llm_resilience.resilience.retry.policy import RetryPolicy

T = TypeVar("T")


class TenacityRetryPolicy:
    """Retry policy backed by the ``tenacity`` library.

    Parameters
    ----------
    policy:
        Attempt budget and backoff shape.
    classify:
        Decides which errors are retried. Defaults to
        :func:`~llm_resilience.resilience.retry.classifier.default_classifier`.
    on_attempt_failed:
        Hook fired from tenacity's ``before_sleep`` callback.
    kwargs:
        Additional keyword arguments forwarded to :class:`tenacity.AsyncRetrying`
        (e.g. ``sleep`` for tests).

    Example
    -------
    ::

        policy = TenacityRetryPolicy(RetryPolicy(max_attempts=5, base_delay_ms=500))
        result = await policy.execute_async(my_async_fn)
    """

    def __init__(
        self,
        policy: RetryPolicy,
        classify: Classifier | None = None,
        on_attempt_failed: AttemptFailedHook | None = None,
        **kwargs: Any,
    ) -> None:
        self._policy = policy
        self._classify = classify or default_classifier
        self._on_attempt_failed = on_attempt_failed or LoggingAttemptHook()
        self._jitter = policy.jitter_strategy()
        self._extra_kwargs = kwargs

    def _wait(self, retry_state: tenacity.RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        return self._policy.delay_for(retry_state.attempt_number, error=error, jitter=self._jitter) / 1000

    def _should_retry(self, error: BaseException) -> bool:
        return isinstance(error, Exception) and self._classify(error) is RetryClass.RETRYABLE

    def _before_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        if error is not None:
            self._on_attempt_failed(retry_state.attempt_number, error, delay * 1000)

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._policy.max_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_exception(self._should_retry),
            before_sleep=self._before_sleep,
            reraise=True,
            **self._extra_kwargs,
        )

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute *func* asynchronously with tenacity retry."""
        async for attempt in self._build_async_retrying():
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


__all__ = ["TenacityRetryPolicy"]
