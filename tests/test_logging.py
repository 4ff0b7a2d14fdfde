"""Tests for structured logging setup"""

import json
import logging

import pytest
import structlog

from fsutils.core.config import settings
from fsutils.infrastructure.logging import (
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
    unbind_context,
)
from fsutils.infrastructure.logging_processors import (
    add_service_context,
    format_exception_info,
    set_log_severity,
)


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    clear_context()
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestProcessors:
    """Test custom structlog processors"""

    def test_set_log_severity(self):
        event = set_log_severity(None, "warning", {"level": "warning"})

        assert event["severity"] == "WARNING"

    def test_add_service_context(self):
        event = add_service_context(None, "info", {"event": "x"})

        assert event["service"] == settings.app_name
        assert event["environment"] == settings.environment

    def test_format_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError as e:
            event = format_exception_info(None, "error", {"exc_info": e})

        assert "exc_info" not in event
        assert event["exception"]["type"] == "ValueError"
        assert event["exception"]["message"] == "boom"
        assert event["exception"]["traceback"]

    def test_format_exception_info_without_exception(self):
        assert format_exception_info(None, "info", {"event": "x"}) == {"event": "x"}


class TestSetupLogging:
    """Test logging configuration"""

    def test_json_output(self, monkeypatch, capsys, restore_logging):
        monkeypatch.setattr(settings, "log_format", "json")
        monkeypatch.setattr(settings, "log_level", "DEBUG")
        setup_logging()

        bind_context(operation="move")
        get_logger("fsutils.test").info("directory_created", path="/tmp/x")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "directory_created"
        assert record["path"] == "/tmp/x"
        assert record["operation"] == "move"
        assert record["severity"] == "INFO"
        assert record["service"] == settings.app_name
        assert "timestamp" in record

    def test_respects_log_level(self, monkeypatch, capsys, restore_logging):
        monkeypatch.setattr(settings, "log_format", "json")
        monkeypatch.setattr(settings, "log_level", "WARNING")
        setup_logging()

        get_logger("fsutils.test").debug("hidden")

        assert capsys.readouterr().out == ""

    def test_unbind_context_drops_keys(self, monkeypatch, capsys, restore_logging):
        monkeypatch.setattr(settings, "log_format", "json")
        monkeypatch.setattr(settings, "log_level", "INFO")
        setup_logging()

        bind_context(operation="copy", batch="nightly")
        unbind_context("batch")
        get_logger("fsutils.test").info("copy_completed")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["operation"] == "copy"
        assert "batch" not in record
