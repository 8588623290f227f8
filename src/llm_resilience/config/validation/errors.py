"""Errors raised while loading or validating resilience settings."""
from __future__ import annotations

from typing import Any

from llm_resilience.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or do not describe a usable policy."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable without a default was not set."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting_name": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting or policy field holds a value outside its allowed range.

    Raised both by the environment loaders (bad literal) and by the frozen
    policy dataclasses when their ``__post_init__`` checks fail.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting_name": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["value"] = repr(self.value)
        return base


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
