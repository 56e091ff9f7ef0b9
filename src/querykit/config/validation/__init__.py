"""Config validation errors."""
from querykit.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SchemaError,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError", "SchemaError"]
