"""Resilience – classify errors as retryable or fatal.

The executor never inspects errors itself; it asks a classifier. The default
one understands the kernel error hierarchy, builtin network errors and
``httpx`` transport / status errors. Pass your own callable to
``ResilientExecutor.execute`` to use a different taxonomy.
"""
from __future__ import annotations

import asyncio
import builtins
from enum import Enum
from typing import Any, Callable

import httpx

from llm_resilience.kernel.errors import (
    ConnectionError,
    InfrastructureTimeoutError,
    RateLimitError,
    TimeoutError,
)

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({408, 425, 429, 500, 502, 503, 504})


class RetryClass(str, Enum):
    RETRYABLE = "RETRYABLE"
    FATAL = "FATAL"


Classifier = Callable[[BaseException], RetryClass]

_TRANSIENT_TYPES: tuple[type[BaseException], ...] = (
    builtins.TimeoutError,
    builtins.ConnectionError,
    httpx.TransportError,
    ConnectionError,
    TimeoutError,
    InfrastructureTimeoutError,
    RateLimitError,
)


def status_code_of(error: BaseException) -> int | None:
    """Extract an HTTP-like status code from *error*, if it carries one."""
    status = getattr(error, "status_code", None)
    if status is None:
        response: Any = getattr(error, "response", None)
        status = getattr(response, "status_code", None)
    if isinstance(status, int):
        return status
    return None


def is_retryable_status(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS_CODES or status_code >= 500


def default_classifier(error: BaseException) -> RetryClass:
    """Transient network / timeout / 429 / 5xx errors retry; everything else is fatal."""
    if isinstance(error, asyncio.CancelledError):
        return RetryClass.FATAL
    status = status_code_of(error)
    if status is not None:
        return RetryClass.RETRYABLE if is_retryable_status(status) else RetryClass.FATAL
    if isinstance(error, _TRANSIENT_TYPES):
        return RetryClass.RETRYABLE
    return RetryClass.FATAL


def retry_on(*exception_types: type[BaseException]) -> Classifier:
    """Build a classifier that retries only the given exception types."""

    def classify(error: BaseException) -> RetryClass:
        if isinstance(error, exception_types):
            return RetryClass.RETRYABLE
        return RetryClass.FATAL

    return classify


def from_predicate(should_retry: Callable[[BaseException], bool]) -> Classifier:
    """Adapt a boolean ``should_retry(error)`` predicate into a classifier."""

    def classify(error: BaseException) -> RetryClass:
        return RetryClass.RETRYABLE if should_retry(error) else RetryClass.FATAL

    return classify


__all__ = [
    "Classifier",
    "RETRYABLE_STATUS_CODES",
    "RetryClass",
    "default_classifier",
    "from_predicate",
    "is_retryable_status",
    "retry_on",
    "status_code_of",
]
