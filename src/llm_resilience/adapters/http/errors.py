"""HTTP adapter – map httpx failures onto the kernel error hierarchy."""
from __future__ import annotations

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

from llm_resilience.kernel.errors import (
    BaseError,
    ConnectionError,
    ExternalServiceError,
    ForbiddenError,
    InfrastructureTimeoutError,
    NotFoundError,
    RateLimitError,
    UnauthorizedError,
    ValidationError,
)


def parse_retry_after(value: str | None, now: datetime | None = None) -> float | None:
    """Parse a ``Retry-After`` header (delta-seconds or HTTP-date) into seconds."""
    if not value:
        return None
    value = value.strip()
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    return max(0.0, (when - (now or datetime.now(UTC))).total_seconds())


def _error_message(response: httpx.Response) -> str:
    """Vendor APIs nest the message as ``{"error": {"message": ...}}``."""
    try:
        body: Any = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str):
            return error
    return response.reason_phrase


def normalize_http_error(exc: httpx.HTTPError, method: str, url: str) -> BaseError:
    """Translate an httpx error into the error taxonomy the classifier understands."""
    if isinstance(exc, httpx.TimeoutException):
        return InfrastructureTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc)
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        status = response.status_code
        message = _error_message(response)
        detail = {"method": method, "url": url, "status_code": status}
        if status == 429:
            return RateLimitError(
                message,
                retry_after_seconds=parse_retry_after(response.headers.get("retry-after")),
                detail=detail,
                cause=exc,
            )
        if status == 401:
            return UnauthorizedError("Authentication failed", detail=detail, cause=exc)
        if status == 403:
            return ForbiddenError(message, detail=detail, cause=exc)
        if status == 404:
            return NotFoundError(url, detail=detail, cause=exc)
        if status in (400, 422):
            return ValidationError(message, status_code=status, detail=detail, cause=exc)
        return ExternalServiceError(
            service=url,
            message=f"HTTP {status} from {method} {url}: {message}",
            status_code=status,
            detail=detail,
            cause=exc,
        )
    if isinstance(exc, httpx.TransportError):
        return ConnectionError(url, f"Transport error on {method} {url}: {exc}", cause=exc)
    return ExternalServiceError(service=url, message=str(exc), cause=exc)


__all__ = ["normalize_http_error", "parse_retry_after"]
