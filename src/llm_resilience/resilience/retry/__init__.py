"""Resilience – retry with exponential backoff, jitter and pluggable classification."""
from llm_resilience.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from llm_resilience.resilience.retry.classifier import (
    Classifier,
    RetryClass,
    default_classifier,
    from_predicate,
    retry_on,
    status_code_of,
)
from llm_resilience.resilience.retry.errors import FatalOperationError, RetryExhaustedError
from llm_resilience.resilience.retry.executor import ResilientExecutor, with_retry
from llm_resilience.resilience.retry.jitter import JitterStrategy, NoJitter, PositiveJitter
from llm_resilience.resilience.retry.outcome import (
    AttemptOutcome,
    Cancelled,
    FatalFailure,
    RetryableFailure,
    Success,
)
from llm_resilience.resilience.retry.policy import RetryPolicy
from llm_resilience.resilience.retry.tenacity_adapter import TenacityRetryPolicy

__all__ = [
    "AttemptOutcome", "BackoffStrategy", "Cancelled", "Classifier", "ExponentialBackoff",
    "FatalFailure", "FatalOperationError", "JitterStrategy", "NoJitter", "PositiveJitter",
    "ResilientExecutor", "RetryClass", "RetryExhaustedError", "RetryPolicy", "RetryableFailure",
    "Success", "TenacityRetryPolicy", "default_classifier", "from_predicate", "retry_on",
    "status_code_of", "with_retry",
]
