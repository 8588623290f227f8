"""Request-level errors: the call itself is wrong and retrying cannot help."""

from __future__ import annotations

from typing import Any

from llm_resilience.kernel.errors.base import BaseError


class DomainError(BaseError):
    """The model service rejected the request as malformed or unserviceable."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Malformed prompt, unknown parameter or out-of-range value (HTTP 400/422).

    ``errors`` holds field-level failures when the service reports them.
    """

    default_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"Validation failed: {message}", **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.errors:
            base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """Unknown deployment, model or route (HTTP 404)."""

    default_code = "not_found"
    status_code = 404

    def __init__(self, resource: str, **kwargs: Any) -> None:
        super().__init__(f"Resource not found: {resource}", **kwargs)
        self.resource = resource


__all__ = ["DomainError", "NotFoundError", "ValidationError"]
