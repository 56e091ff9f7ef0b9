"""Config settings – 12-factor env-based configuration."""
from querykit.config.settings.base import Settings
from querykit.config.settings.compiler import CompilerSettings
from querykit.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CompilerSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
