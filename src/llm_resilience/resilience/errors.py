"""Resilience – base error for failures raised by the retry / breaker machinery."""
from __future__ import annotations

from llm_resilience.kernel.errors import InfrastructureError


class ResilienceError(InfrastructureError):
    """Root of errors raised by executors and breakers (not by the wrapped operation)."""

    default_code = "resilience_error"


__all__ = ["ResilienceError"]
