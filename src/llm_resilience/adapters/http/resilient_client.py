"""HTTP adapter – ResilientHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from llm_resilience.adapters.http.client import HttpxHttpClient
from llm_resilience.config import ResilienceSettings
from llm_resilience.resilience.circuit_breaker import CircuitBreaker
from llm_resilience.resilience.retry import Classifier, ResilientExecutor, RetryPolicy


class ResilientHttpClient(HttpxHttpClient):
    """HTTP client whose requests run through retry and, optionally, a circuit breaker.

    Pass the same ``breaker`` to every client that talks to one model
    endpoint so they share its state. A breaker runs calls on its own
    executor, so ``executor`` is used only when ``breaker`` is ``None``;
    :meth:`from_settings` hands it to the breaker it builds.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        *,
        retry_policy: RetryPolicy | None = None,
        breaker: CircuitBreaker | None = None,
        executor: ResilientExecutor | None = None,
        classify: Classifier | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, timeout, **kwargs)
        self._retry_policy = retry_policy or RetryPolicy()
        self._breaker = breaker
        self._executor = executor or ResilientExecutor()
        self._classify = classify

    @classmethod
    def from_settings(
        cls,
        settings: ResilienceSettings,
        base_url: str = "",
        *,
        breaker_name: str = "llm",
        executor: ResilientExecutor | None = None,
        **kwargs: Any,
    ) -> ResilientHttpClient:
        breaker = CircuitBreaker(breaker_name, settings.to_breaker_config(), executor=executor)
        return cls(base_url, retry_policy=settings.to_retry_policy(), breaker=breaker, **kwargs)

    @property
    def breaker(self) -> CircuitBreaker | None:
        return self._breaker

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        async def send() -> httpx.Response:
            return await self._send(method, url, **kwargs)

        if self._breaker is not None:
            return await self._breaker.execute_with_breaker(send, self._retry_policy, self._classify)
        return await self._executor.execute(send, self._retry_policy, self._classify)


__all__ = ["ResilientHttpClient"]
