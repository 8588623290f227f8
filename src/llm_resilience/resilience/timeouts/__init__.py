"""Resilience – per-attempt timeouts."""
from llm_resilience.resilience.timeouts.policy import AttemptTimeoutError, TimeoutPolicy

__all__ = ["AttemptTimeoutError", "TimeoutPolicy"]
