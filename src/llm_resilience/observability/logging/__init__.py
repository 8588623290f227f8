"""Observability – structured logging helpers."""
from llm_resilience.observability.logging.factory import JsonLoggerFactory
from llm_resilience.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from llm_resilience.observability.logging.hooks import (
    AttemptFailedHook,
    LoggingAttemptHook,
    RecordingAttemptHook,
)
from llm_resilience.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "AttemptFailedHook",
    "JsonLoggerFactory",
    "LoggingAttemptHook",
    "RecordingAttemptHook",
    "SensitiveFieldsFilter",
    "get_logger",
]
