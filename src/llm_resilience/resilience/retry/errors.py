"""Resilience – errors surfaced by :class:`ResilientExecutor`."""
from __future__ import annotations

from typing import Any

from llm_resilience.resilience.errors import ResilienceError


class RetryExhaustedError(ResilienceError):
    """Every permitted attempt failed with a retryable error.

    Attributes
    ----------
    attempts:
        Number of times the operation was invoked.
    last_error:
        The error raised by the final attempt.
    elapsed_seconds:
        Wall time from the first attempt to giving up, including backoff sleeps.
    """

    default_code = "retry_exhausted"

    def __init__(self, attempts: int, last_error: BaseException, elapsed_seconds: float) -> None:
        super().__init__(
            f"Operation failed after {attempts} attempt(s): {last_error!r}",
            detail={"attempts": attempts, "elapsed_seconds": round(elapsed_seconds, 3)},
            cause=last_error,
        )
        self.attempts = attempts
        self.last_error = last_error
        self.elapsed_seconds = elapsed_seconds


class FatalOperationError(ResilienceError):
    """The operation failed with an error classified as permanent."""

    default_code = "fatal_operation_error"

    def __init__(self, error: BaseException, attempts: int, elapsed_seconds: float) -> None:
        super().__init__(
            f"Operation failed with non-retryable error on attempt {attempts}: {error!r}",
            detail={"attempts": attempts, "elapsed_seconds": round(elapsed_seconds, 3)},
            cause=error,
        )
        self.error = error
        self.attempts = attempts
        self.elapsed_seconds = elapsed_seconds

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["error_type"] = type(self.error).__name__
        return base


__all__ = ["FatalOperationError", "RetryExhaustedError"]
