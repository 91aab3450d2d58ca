"""Unit tests for get_logger() container function.

Tests cover:
- Renderer selection based on environment
- Level taken from settings
- Singleton pattern (same instance returned)
- Protocol compliance
"""

from unittest.mock import MagicMock, patch

import pytest

from erroror.core.container import get_logger
from erroror.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            ("development", False),
            ("testing", True),
            ("ci", True),
            ("production", True),
        ],
    )
    def test_renderer_per_environment(self, monkeypatch, environment, use_json):
        """Test JSON output everywhere except development."""
        monkeypatch.setenv("ERROROR_ENVIRONMENT", environment)
        monkeypatch.delenv("ERROROR_LOG_LEVEL", raising=False)

        with patch(
            "erroror.infrastructure.logging.console_adapter.ConsoleAdapter"
        ) as mock_console:
            mock_console.return_value = MagicMock()

            logger = get_logger()

            mock_console.assert_called_once_with(use_json=use_json, level="INFO")
            assert logger is mock_console.return_value

    def test_level_from_settings(self, monkeypatch):
        """Test the configured log level is passed to the adapter."""
        monkeypatch.setenv("ERROROR_LOG_LEVEL", "warning")

        with patch(
            "erroror.infrastructure.logging.console_adapter.ConsoleAdapter"
        ) as mock_console:
            get_logger()

            assert mock_console.call_args.kwargs["level"] == "WARNING"

    def test_singleton(self):
        """Test get_logger() returns the same instance."""
        assert get_logger() is get_logger()

    def test_returns_console_adapter(self):
        """Test the real adapter implements the protocol methods."""
        logger = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        for method in ["debug", "info", "warning", "error", "critical", "bind"]:
            assert callable(getattr(logger, method))
