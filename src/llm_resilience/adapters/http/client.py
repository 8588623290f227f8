"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

import time
from typing import Any

import httpx

from llm_resilience.adapters.http.errors import normalize_http_error
from llm_resilience.observability.logging import get_logger

logger = get_logger(__name__)


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Every non-2xx response and transport failure is raised as a kernel
    error (see :func:`normalize_http_error`), so it can be classified
    without knowing about httpx.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> HttpxHttpClient:
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request(method.upper(), url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self._send(method, url, **kwargs)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        started = time.perf_counter()
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = normalize_http_error(exc, method, url)
            logger.warning(
                "http.request",
                method=method,
                url=url,
                success=False,
                error_code=error.code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            raise error from exc
        logger.info(
            "http.request",
            method=method,
            url=url,
            success=True,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return response


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
