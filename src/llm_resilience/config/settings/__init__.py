"""Config settings – 12-factor env-based configuration."""
from llm_resilience.config.settings.base import Settings
from llm_resilience.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from llm_resilience.config.settings.resilience import ResilienceSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ResilienceSettings", "Settings", "SettingsLoader"]
