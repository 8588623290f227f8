"""Resilience – RetryPolicy."""
from __future__ import annotations

import dataclasses

from llm_resilience.config.validation import InvalidSettingValueError
from llm_resilience.resilience.retry.backoff import ExponentialBackoff
from llm_resilience.resilience.retry.jitter import JitterStrategy, NoJitter, PositiveJitter


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration for one class of operation.

    ``attempt_timeout_ms`` bounds each individual attempt; a timed-out attempt
    is retried unless ``timeout_is_retryable`` is ``False``. When
    ``respect_retry_after`` is set, a server ``Retry-After`` hint carried by
    the error (``retry_after_seconds``) raises the delay floor.
    """

    max_attempts: int = 3
    base_delay_ms: int = 1000
    max_delay_ms: int = 30000
    backoff_factor: float = 2.0
    jitter: bool = True
    attempt_timeout_ms: int | None = None
    timeout_is_retryable: bool = True
    respect_retry_after: bool = True

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be >= 1")
        if self.base_delay_ms <= 0:
            raise InvalidSettingValueError("base_delay_ms", self.base_delay_ms, "must be > 0")
        if self.max_delay_ms < self.base_delay_ms:
            raise InvalidSettingValueError(
                "max_delay_ms", self.max_delay_ms, f"must be >= base_delay_ms ({self.base_delay_ms})"
            )
        if self.backoff_factor <= 1:
            raise InvalidSettingValueError("backoff_factor", self.backoff_factor, "must be > 1")
        if self.attempt_timeout_ms is not None and self.attempt_timeout_ms <= 0:
            raise InvalidSettingValueError("attempt_timeout_ms", self.attempt_timeout_ms, "must be > 0")

    @property
    def backoff(self) -> ExponentialBackoff:
        return ExponentialBackoff(self.base_delay_ms, self.backoff_factor, self.max_delay_ms)

    def jitter_strategy(self) -> JitterStrategy:
        return PositiveJitter() if self.jitter else NoJitter()

    def delay_for(
        self,
        attempt: int,
        error: BaseException | None = None,
        jitter: JitterStrategy | None = None,
    ) -> float:
        """Milliseconds to wait after the *attempt*-th failure."""
        delay = (jitter or self.jitter_strategy()).apply(self.backoff.compute(attempt))
        if self.respect_retry_after and error is not None:
            retry_after = getattr(error, "retry_after_seconds", None)
            if isinstance(retry_after, (int, float)) and retry_after > 0:
                delay = max(delay, retry_after * 1000)
        return delay

    def delays(self) -> list[float]:
        """The backoff sequence between attempts, without jitter or hints."""
        return [self.backoff.compute(attempt) for attempt in range(1, self.max_attempts)]


__all__ = ["RetryPolicy"]
