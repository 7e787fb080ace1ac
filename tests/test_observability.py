"""Tests for svnaction.observability: JSON logging."""

from __future__ import annotations

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from svnaction import config
from svnaction.observability import JsonFormatter, setup_logging


def _record(msg="hello world", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test", level=level, pathname="", lineno=0,
        msg=msg, args=(), exc_info=exc_info,
    )


class TestJsonFormatter:
    def test_format_basic_record(self):
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "hello world"
        assert parsed["logger"] == "test"
        assert "timestamp" in parsed

    def test_format_propagates_action_fields(self):
        record = _record("replaced")
        record.action_id = 36
        record.action_name = "revprop_set"
        parsed = json.loads(JsonFormatter().format(record))
        assert parsed["action_id"] == 36
        assert parsed["action_name"] == "revprop_set"

    def test_format_excludes_missing_extra_fields(self):
        parsed = json.loads(JsonFormatter().format(_record()))
        assert "action_id" not in parsed
        assert "action_name" not in parsed

    def test_format_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("failed", level=logging.ERROR, exc_info=sys.exc_info())
        parsed = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in parsed["exception"]


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        logger = logging.getLogger("svnaction")
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_installs_json_handler(self):
        setup_logging("debug")
        logger = logging.getLogger("svnaction")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_level_from_settings(self):
        with patch.dict(os.environ, {"SVNACTION_LOG_LEVEL": "WARNING"}, clear=True):
            config.reload_settings()
            setup_logging()
        assert logging.getLogger("svnaction").level == logging.WARNING

    def test_unknown_level_defaults_to_info(self):
        setup_logging("nonsense")
        assert logging.getLogger("svnaction").level == logging.INFO
