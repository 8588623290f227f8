"""
llm_resilience – reliable calls to hosted language-model APIs.

Import path convention::

    from llm_resilience.resilience.retry import ResilientExecutor, RetryPolicy
    from llm_resilience.resilience.circuit_breaker import CircuitBreaker, CircuitBreakerConfig
    from llm_resilience.adapters.http import ResilientHttpClient
    from llm_resilience.config import ResilienceSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
