"""Error taxonomy shared by the HTTP adapter and the retry classifier.

Hierarchy (default HTTP status in brackets)::

    BaseError
    ├── DomainError            request-level, never retried
    │   ├── ValidationError    [400]
    │   └── NotFoundError      [404]
    ├── ApplicationError
    │   ├── UnauthorizedError  [401]
    │   ├── ForbiddenError     [403]
    │   ├── RateLimitError     [429]
    │   └── TimeoutError
    └── InfrastructureError    transport and upstream faults
        ├── ConnectionError
        ├── TimeoutError       (re-exported as InfrastructureTimeoutError)
        └── ExternalServiceError [status as received]

Resilience-specific errors (``RetryExhaustedError``, ``CircuitOpenError`` …)
live next to the components that raise them.
"""

from llm_resilience.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    RateLimitError,
    TimeoutError,
    UnauthorizedError,
)
from llm_resilience.kernel.errors.base import BaseError
from llm_resilience.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from llm_resilience.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
)
from llm_resilience.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "DomainError",
    "ExternalServiceError",
    "ForbiddenError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "NotFoundError",
    "RateLimitError",
    "TimeoutError",
    "UnauthorizedError",
    "ValidationError",
]
