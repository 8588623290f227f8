"""Config settings – ResilienceSettings for retry and circuit-breaker defaults."""
from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, ClassVar

from llm_resilience.config.settings.base import Settings
from llm_resilience.config.validation import InvalidSettingValueError

if TYPE_CHECKING:
    from llm_resilience.resilience.circuit_breaker import CircuitBreakerConfig
    from llm_resilience.resilience.retry import RetryPolicy


@dataclasses.dataclass
class ResilienceSettings(Settings):
    """Environment-driven defaults for calls to the model service.

    Every field maps to ``LLM_RESILIENCE_<FIELD_NAME>``.
    """

    _prefix: ClassVar[str] = "llm_resilience"

    enable_retry: bool = True
    max_retry_attempts: int = 3
    retry_delay_ms: int = 1000
    max_retry_delay_ms: int = 30000
    backoff_factor: float = 2.0
    retry_jitter: bool = True
    attempt_timeout_ms: int | None = None
    breaker_failure_threshold: int = 5
    breaker_reset_timeout_ms: int = 30000
    log_level: str = "INFO"

    def _validate(self) -> None:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def to_retry_policy(self) -> RetryPolicy:
        """Build the immutable retry policy; a disabled retry means a single attempt."""
        from llm_resilience.resilience.retry import RetryPolicy

        return RetryPolicy(
            max_attempts=self.max_retry_attempts if self.enable_retry else 1,
            base_delay_ms=self.retry_delay_ms,
            max_delay_ms=self.max_retry_delay_ms,
            backoff_factor=self.backoff_factor,
            jitter=self.retry_jitter,
            attempt_timeout_ms=self.attempt_timeout_ms,
        )

    def to_breaker_config(self) -> CircuitBreakerConfig:
        from llm_resilience.resilience.circuit_breaker import CircuitBreakerConfig

        return CircuitBreakerConfig(
            failure_threshold=self.breaker_failure_threshold,
            reset_timeout_ms=self.breaker_reset_timeout_ms,
        )


__all__ = ["ResilienceSettings"]
