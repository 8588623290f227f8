"""Resilience – CircuitBreakerConfig."""
from __future__ import annotations

import dataclasses

from llm_resilience.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CircuitBreakerConfig:
    """Configuration for a circuit breaker.

    ``excluded_exceptions`` lists error types that say nothing about the
    dependency's health (e.g. a rejected prompt); they neither trip nor
    close the circuit.
    """
    failure_threshold: int = 5
    reset_timeout_ms: int = 30000
    excluded_exceptions: tuple[type[BaseException], ...] = ()

    def __post_init__(self) -> None:
        if self.failure_threshold < 1:
            raise InvalidSettingValueError("failure_threshold", self.failure_threshold, "must be >= 1")
        if self.reset_timeout_ms <= 0:
            raise InvalidSettingValueError("reset_timeout_ms", self.reset_timeout_ms, "must be > 0")

    @property
    def reset_timeout_seconds(self) -> float:
        return self.reset_timeout_ms / 1000


__all__ = ["CircuitBreakerConfig"]
