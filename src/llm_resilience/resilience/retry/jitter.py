"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Apply randomness to a backoff delay to spread thundering-herd."""

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...


class NoJitter(JitterStrategy):
    def apply(self, delay: float) -> float:
        return delay


class PositiveJitter(JitterStrategy):
    """Uniform random in ``[delay, delay * (1 + spread)]``.

    Never shortens the computed delay, only stretches it.
    """

    def __init__(self, spread: float = 0.1, rng: random.Random | None = None) -> None:
        if spread < 0:
            raise ValueError("spread must be non-negative")
        self._spread = spread
        self._rng = rng or random.Random()

    def apply(self, delay: float) -> float:
        return delay * self._rng.uniform(1.0, 1.0 + self._spread)


__all__ = ["JitterStrategy", "NoJitter", "PositiveJitter"]
