"""Resilience – the result of a single attempt."""
from __future__ import annotations

import dataclasses
from typing import Any, Union

from llm_resilience.resilience.retry.classifier import Classifier, RetryClass


@dataclasses.dataclass(frozen=True)
class Success:
    value: Any


@dataclasses.dataclass(frozen=True)
class RetryableFailure:
    error: Exception


@dataclasses.dataclass(frozen=True)
class FatalFailure:
    error: Exception


@dataclasses.dataclass(frozen=True)
class Cancelled:
    """The caller withdrew the request; never counted as a failure."""
    error: BaseException


AttemptOutcome = Union[Success, RetryableFailure, FatalFailure, Cancelled]


def classify_outcome(error: Exception, classify: Classifier) -> RetryableFailure | FatalFailure:
    if classify(error) is RetryClass.RETRYABLE:
        return RetryableFailure(error)
    return FatalFailure(error)


__all__ = [
    "AttemptOutcome",
    "Cancelled",
    "FatalFailure",
    "RetryableFailure",
    "Success",
    "classify_outcome",
]
