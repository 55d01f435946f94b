# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Tests for logging setup (issuer_identity.logging_config)."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from issuer_identity.logging_config import JSONFormatter, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Test structured JSON log lines."""

    def test_fields(self):
        """Each record becomes one JSON object with the standard fields."""
        record = logging.LogRecord(
            name="issuer_identity.extract",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="Selected %s",
            args=("fragment",),
            exc_info=None,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "issuer_identity.extract"
        assert entry["message"] == "Selected fragment"
        assert "timestamp" in entry
        assert "exception" not in entry

    def test_exception(self):
        """Exception info is serialized as a traceback string."""
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            name="test", level=logging.ERROR, pathname=__file__, lineno=1,
            msg="failed", args=(), exc_info=exc_info,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestConfigureLogging:
    """Test root logger configuration."""

    def test_single_handler(self, root_logger):
        """Repeated configuration leaves exactly one handler."""
        configure_logging(level="INFO", fmt="json")
        configure_logging(level="INFO", fmt="json")
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JSONFormatter)
        assert root_logger.level == logging.INFO

    def test_text_format(self, root_logger):
        """Non-json formats use the plain text formatter."""
        configure_logging(level="debug", fmt="text")
        assert not isinstance(root_logger.handlers[0].formatter, JSONFormatter)
        assert root_logger.level == logging.DEBUG

    def test_unknown_level(self, root_logger):
        """An unrecognized level name falls back to WARNING."""
        configure_logging(level="chatty", fmt="json")
        assert root_logger.level == logging.WARNING
