"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from querykit.config.settings import CompilerSettings, EnvSettingsLoader, Settings
from querykit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SchemaError,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    dsn: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        monkeypatch.setenv("APP_DEBUG", "off")
        assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com,http://b.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_explicit_environ_mapping(self) -> None:
        settings = EnvSettingsLoader(environ={"APP_PORT": "1234"}).load(AppSettings)
        assert settings.port == 1234
        assert settings.host == "localhost"

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as ctx:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert ctx.value.setting_name == "REQ_DSN"

    def test_uncoercible_value_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError) as ctx:
            EnvSettingsLoader(environ={"APP_PORT": "eighty"}).load(AppSettings)
        assert ctx.value.setting_name == "APP_PORT"


# ---------------------------------------------------------------------------
# CompilerSettings
# ---------------------------------------------------------------------------


class TestCompilerSettings:
    def test_defaults(self) -> None:
        s = CompilerSettings()
        assert s.max_in_values == 100
        assert s.max_search_length == 500
        assert s.strict_operators is False

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYKIT_MAX_IN_VALUES", "25")
        monkeypatch.setenv("QUERYKIT_STRICT_OPERATORS", "true")
        s = EnvSettingsLoader().load(CompilerSettings)
        assert s.max_in_values == 25
        assert s.strict_operators is True
        assert s.max_search_length == 500

    def test_rejects_non_positive_in_cap(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            CompilerSettings(max_in_values=0)

    def test_rejects_non_positive_search_length(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            CompilerSettings(max_search_length=0)

    def test_invalid_env_value_surfaces_as_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ={"QUERYKIT_MAX_IN_VALUES": "-1"}).load(CompilerSettings)


class TestErrorHierarchy:
    def test_schema_error_is_config_error(self) -> None:
        assert issubclass(SchemaError, ConfigError)

    def test_codes(self) -> None:
        assert SchemaError("x").code == "schema_error"
        assert MissingRequiredSettingError("X").code == "missing_required_setting"
