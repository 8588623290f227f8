"""Resilience – circuit-breaker specific errors."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from llm_resilience.resilience.errors import ResilienceError


class CircuitOpenError(ResilienceError):
    """Raised when a :class:`CircuitBreaker` rejects a call without running it.

    Attributes
    ----------
    circuit_name:
        Name of the circuit breaker that rejected the call.
    opened_at:
        When the circuit last opened.
    reset_timeout_ms:
        Cooldown before a probe is admitted.
    retry_after_seconds:
        Remaining cooldown; ``0`` while a half-open probe is in flight.
    """

    default_code = "circuit_open"

    def __init__(
        self,
        circuit_name: str,
        opened_at: datetime | None,
        reset_timeout_ms: int,
        retry_after_seconds: float = 0.0,
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"Circuit breaker '{circuit_name}' is OPEN")
        self.circuit_name = circuit_name
        self.opened_at = opened_at
        self.reset_timeout_ms = reset_timeout_ms
        self.retry_after_seconds = retry_after_seconds

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["circuit_name"] = self.circuit_name
        base["opened_at"] = self.opened_at.isoformat() if self.opened_at else None
        base["reset_timeout_ms"] = self.reset_timeout_ms
        base["retry_after_seconds"] = self.retry_after_seconds
        return base


__all__ = ["CircuitOpenError"]
