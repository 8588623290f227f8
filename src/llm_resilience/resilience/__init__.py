"""Resilience – retry, circuit breaker and per-attempt timeouts."""

from llm_resilience.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerState,
    CircuitOpenError,
    CircuitState,
)
from llm_resilience.resilience.errors import ResilienceError
from llm_resilience.resilience.retry import (
    FatalOperationError,
    ResilientExecutor,
    RetryClass,
    RetryExhaustedError,
    RetryPolicy,
    TenacityRetryPolicy,
    default_classifier,
    with_retry,
)
from llm_resilience.resilience.timeouts import AttemptTimeoutError, TimeoutPolicy

__all__ = [
    "AttemptTimeoutError",
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitBreakerState",
    "CircuitOpenError",
    "CircuitState",
    "FatalOperationError",
    "ResilienceError",
    "ResilientExecutor",
    "RetryClass",
    "RetryExhaustedError",
    "RetryPolicy",
    "TenacityRetryPolicy",
    "TimeoutPolicy",
    "default_classifier",
    "with_retry",
]
