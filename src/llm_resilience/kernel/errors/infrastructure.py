"""Transport and upstream faults: the request may succeed if sent again."""

from __future__ import annotations

from typing import Any

from llm_resilience.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """DNS, TCP or TLS failure before a response arrived."""

    default_code = "connection_error"

    def __init__(self, endpoint: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not reach {endpoint}", **kwargs)
        self.endpoint = endpoint


class TimeoutError(InfrastructureError):  # noqa: A001
    """The transport gave up waiting for the service."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """The service answered with a status the client has no dedicated error for.

    ``status_code`` decides retryability: 408, 425 and 5xx retry, the rest do not.
    """

    default_code = "external_service_error"

    def __init__(self, service: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"{service} returned an error", **kwargs)
        self.service = service

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["service"] = self.service
        return base


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
