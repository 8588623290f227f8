"""Errors about the caller's standing with the service: credentials, quota, deadline."""

from __future__ import annotations

from typing import Any

from llm_resilience.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The API key was missing or rejected (HTTP 401)."""

    default_code = "unauthorized"
    status_code = 401


class ForbiddenError(ApplicationError):
    """The key is valid but may not use this deployment (HTTP 403)."""

    default_code = "forbidden"
    status_code = 403


class RateLimitError(ApplicationError):
    """The service throttled the caller (HTTP 429).

    ``retry_after_seconds`` is the parsed ``Retry-After`` header, when the
    service sent one; the executor waits at least that long before retrying.
    """

    default_code = "rate_limit_exceeded"
    status_code = 429

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after_seconds = retry_after_seconds

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["retry_after_seconds"] = self.retry_after_seconds
        return base


class TimeoutError(ApplicationError):  # noqa: A001
    """A caller-side deadline for the whole logical call elapsed."""

    default_code = "timeout"


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "RateLimitError",
    "TimeoutError",
    "UnauthorizedError",
]
