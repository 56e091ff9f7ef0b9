"""Config – 12-factor settings, loaders and schema errors."""

from querykit.config.settings import CompilerSettings, EnvSettingsLoader, Settings, SettingsLoader
from querykit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SchemaError,
)

__all__ = [
    "CompilerSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SchemaError",
    "Settings",
    "SettingsLoader",
]
