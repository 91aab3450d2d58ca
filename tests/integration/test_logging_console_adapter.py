"""Integration tests for ConsoleAdapter with real structlog.

Tests cover:
- JSON output and level filtering
- Context binding
- Exception details on error/critical
"""

import json
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from erroror.infrastructure.logging.console_adapter import ConsoleAdapter


def _lines(output: StringIO) -> list[dict]:
    return [json.loads(line) for line in output.getvalue().splitlines() if line]


@pytest.mark.integration
class TestConsoleAdapterIntegration:
    """Integration tests for ConsoleAdapter with real structlog."""

    def test_json_mode_produces_valid_json(self):
        """Test JSON mode produces parseable JSON output."""
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.warning("Request rejected", error_code="User.NotFound")

        (log_data,) = _lines(captured_output)
        assert log_data["event"] == "Request rejected"
        assert log_data["level"] == "warning"
        assert log_data["error_code"] == "User.NotFound"
        assert "timestamp" in log_data

    def test_level_filtering(self):
        """Test messages below the configured level are dropped."""
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True, level="WARNING")
            adapter.info("dropped")
            adapter.error("kept")

        assert [line["event"] for line in _lines(captured_output)] == ["kept"]

    def test_bind_includes_context(self):
        """Test bound context is included in every log."""
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            bound = adapter.bind(trace_id="t-1")
            bound.info("first")
            bound.with_context(step=2).info("second")

        first, second = _lines(captured_output)
        assert first["trace_id"] == "t-1"
        assert second["trace_id"] == "t-1"
        assert second["step"] == 2

    def test_error_with_exception(self):
        """Test exception type and message are added on error."""
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=True)
            adapter.error("Mapping failed", error=ValueError("bad status"))
            adapter.critical("Mapping failed", error=KeyError("kind"))

        error_line, critical_line = _lines(captured_output)
        assert error_line["error_type"] == "ValueError"
        assert error_line["error_message"] == "bad status"
        assert critical_line["level"] == "critical"
        assert critical_line["error_type"] == "KeyError"

    def test_console_mode_writes_text(self):
        """Test human-readable mode writes the message."""
        captured_output = StringIO()

        with patch.object(sys, "stdout", captured_output):
            adapter = ConsoleAdapter(use_json=False)
            adapter.info("Readable message")

        assert "Readable message" in captured_output.getvalue()
