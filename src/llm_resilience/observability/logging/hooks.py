"""Observability – attempt-failure hooks for the retry loop."""
from __future__ import annotations

from typing import Any, Protocol

from llm_resilience.observability.logging.processors import get_logger


class AttemptFailedHook(Protocol):
    """Called synchronously before each backoff sleep.

    Implementations must return quickly; they run on the retry loop.
    """

    def __call__(self, attempt_number: int, error: BaseException, delay_before_next_ms: float) -> None: ...


class LoggingAttemptHook:
    """Default hook: one ``retry.attempt_failed`` warning per failed attempt."""

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger or get_logger("llm_resilience.retry")

    def __call__(self, attempt_number: int, error: BaseException, delay_before_next_ms: float) -> None:
        self._logger.warning(
            "retry.attempt_failed",
            attempt=attempt_number,
            error=repr(error),
            error_type=type(error).__name__,
            delay_ms=round(delay_before_next_ms, 1),
        )


class RecordingAttemptHook:
    """Collect hook invocations in memory; handy for tests and metrics bridges."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, BaseException, float]] = []

    def __call__(self, attempt_number: int, error: BaseException, delay_before_next_ms: float) -> None:
        self.calls.append((attempt_number, error, delay_before_next_ms))

    @property
    def delays_ms(self) -> list[float]:
        return [delay for _, _, delay in self.calls]


__all__ = ["AttemptFailedHook", "LoggingAttemptHook", "RecordingAttemptHook"]
