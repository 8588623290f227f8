"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute the wait (milliseconds) after the *attempt*-th failure (1-based)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """Delay grows geometrically: ``base_delay_ms * factor^(attempt - 1)``, capped."""

    def __init__(self, base_delay_ms: float = 1000, factor: float = 2.0, max_delay_ms: float = 30000) -> None:
        self._base = base_delay_ms
        self._factor = factor
        self._max = max_delay_ms

    def compute(self, attempt: int) -> float:
        try:
            raw = self._base * (self._factor ** (attempt - 1))
        except OverflowError:
            return float(self._max)
        return float(min(raw, self._max))


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
