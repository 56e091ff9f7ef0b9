"""Unit tests for structured logging helpers."""

from __future__ import annotations

import logging

import pytest
import structlog

from querykit.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSensitiveFieldsFilter:
    def test_defaults_cover_search_and_values(self) -> None:
        assert {"search", "term", "value"} <= DEFAULT_SENSITIVE_FIELDS

    def test_redact_flat(self) -> None:
        f = SensitiveFieldsFilter()
        out = f.redact({"search": "john smith", "field": "last_name"})
        assert out == {"search": "[REDACTED]", "field": "last_name"}

    def test_redact_is_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Value": "x"})["Value"] == "[REDACTED]"

    def test_redact_deep(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"email"}))
        out = f.redact_deep({"outer": {"email": "a@b.c", "kind": "invalid"}})
        assert out == {"outer": {"email": "[REDACTED]", "kind": "invalid"}}

    def test_acts_as_structlog_processor(self) -> None:
        out = SensitiveFieldsFilter()(None, "info", {"event": "filter_param.rejected", "value": "1985-13-01"})
        assert out["value"] == "[REDACTED]"
        assert out["event"] == "filter_param.rejected"


class TestGetLogger:
    def test_returns_logger_with_level_methods(self) -> None:
        log = get_logger(__name__)
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(log, method))

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("querykit.test", entity="patients").info("compiled")
        assert logs == [{"entity": "patients", "event": "compiled", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configure_installs_single_root_handler(self, restore_logging) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_configured_output_redacts_search(self, restore_logging, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure()
        structlog.get_logger("querykit").info("filter_spec.compiled", search="jane doe", limit=25)
        err = capsys.readouterr().err
        assert "[REDACTED]" in err
        assert "jane doe" not in err
        assert '"limit": 25' in err
