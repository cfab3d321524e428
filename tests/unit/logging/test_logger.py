# tests/unit/logging/test_logger.py — v1
"""Tests for logging/ — formatters, context and rotating handler."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from assetrev.logging.context import (
    clear_context,
    get_context,
    set_run_context,
    set_stage_context,
)
from assetrev.logging.handlers import create_rotating_handler, parse_size
from assetrev.logging.logger import JsonFormatter, TextFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger("assetrev")
    level = root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(level)


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )


class TestContext:
    def test_set_and_clear(self):
        set_run_context("run1")
        set_stage_context("rev", "/src/a.css")
        assert get_context().as_dict() == {
            "run_id": "run1", "stage": "rev", "file": "/src/a.css",
        }
        clear_context()
        assert get_context().as_dict() == {}


class TestJsonFormatter:
    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record("Hello")))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_extra_attributes_not_serialized(self):
        record = _record("msg")
        record.data = {"k": "v"}
        assert "data" not in json.loads(JsonFormatter().format(record))

    def test_format_with_context(self):
        set_run_context("run1")
        set_stage_context("manifest")
        parsed = json.loads(JsonFormatter().format(_record("msg")))
        assert parsed["context"] == {"run_id": "run1", "stage": "manifest"}


class TestTextFormatter:
    def test_format_with_stage(self):
        set_stage_context("rev", "/src/a.css")
        output = TextFormatter().format(_record("Renamed"))
        assert "[rev]" in output
        assert "(/src/a.css)" in output
        assert output.endswith("- Renamed")


class TestSetupLogging:
    def test_get_logger_namespace(self):
        assert get_logger("rev").name == "assetrev.rev"

    def test_setup_text(self):
        setup_logging(level="DEBUG", log_format="text")
        root = logging.getLogger("assetrev")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_setup_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "assetrev.log"
        setup_logging(level="INFO", log_format="json", log_file=str(log_file))
        root = logging.getLogger("assetrev")
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert log_file.parent.is_dir()


class TestHandlers:
    @pytest.mark.parametrize(
        "size,expected",
        [("10MB", 10 * 1024**2), ("512kb", 512 * 1024), ("100", 100), ("1 GB", 1024**3)],
    )
    def test_parse_size(self, size, expected):
        assert parse_size(size) == expected

    def test_parse_size_invalid(self):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_size("ten megs")

    def test_rotating_handler(self, tmp_path):
        handler = create_rotating_handler(tmp_path / "a" / "b.log", "1KB", 2)
        try:
            assert handler.maxBytes == 1024
            assert handler.backupCount == 2
        finally:
            handler.close()
