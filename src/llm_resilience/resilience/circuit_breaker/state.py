"""Resilience – CircuitBreakerState enum and CircuitState snapshot."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum


class CircuitBreakerState(str, Enum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF_OPEN"


@dataclasses.dataclass(frozen=True)
class CircuitState:
    """Point-in-time view of a breaker's bookkeeping."""

    state: CircuitBreakerState
    consecutive_failures: int
    opened_at: datetime | None
    probe_in_flight: bool = False


__all__ = ["CircuitBreakerState", "CircuitState"]
