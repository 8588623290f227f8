"""Config – 12-factor settings and loaders."""

from llm_resilience.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ResilienceSettings,
    Settings,
    SettingsLoader,
)
from llm_resilience.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ResilienceSettings",
    "Settings",
    "SettingsLoader",
]
