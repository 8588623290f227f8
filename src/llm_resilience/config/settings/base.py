"""Settings base class shared by every environment-backed settings group."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    Subclasses declare dataclass fields and set ``_prefix``; the field
    ``max_retry_attempts`` of a class prefixed ``"llm_resilience"`` is read
    from ``LLM_RESILIENCE_MAX_RETRY_ATTEMPTS``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable name backing *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Cross-field checks; raise ``InvalidSettingValueError`` on failure."""


__all__ = ["Settings"]
