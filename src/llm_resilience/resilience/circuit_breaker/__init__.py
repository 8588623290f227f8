"""Resilience – Circuit Breaker pattern."""
from llm_resilience.resilience.circuit_breaker.errors import CircuitOpenError
from llm_resilience.resilience.circuit_breaker.state import CircuitBreakerState, CircuitState
from llm_resilience.resilience.circuit_breaker.policy import CircuitBreakerConfig
from llm_resilience.resilience.circuit_breaker.breaker import CircuitBreaker

__all__ = ["CircuitBreaker", "CircuitBreakerConfig", "CircuitBreakerState", "CircuitOpenError", "CircuitState"]
