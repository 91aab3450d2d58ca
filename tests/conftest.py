"""Pytest configuration.

Ensures:
1. Settings and logger singletons are rebuilt for every test
2. Environment-driven settings never leak between tests
3. Mapped failures can be asserted through a recording logger
"""

from typing import Any

import pytest

from erroror.core.config import get_settings
from erroror.core.container import get_logger


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings and logger around each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


class RecordingLogger:
    """LoggerProtocol implementation that keeps every call in memory."""

    def __init__(self, bound: dict[str, Any] | None = None) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []
        self._bound = bound or {}

    def _record(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.records.append((level, message, {**self._bound, **context}))

    def debug(self, message: str, /, **context: Any) -> None:
        self._record("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._record("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._record("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._record("error", message, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._record("critical", message, context)

    def bind(self, **context: Any) -> "RecordingLogger":
        bound = RecordingLogger({**self._bound, **context})
        bound.records = self.records
        return bound

    def with_context(self, **context: Any) -> "RecordingLogger":
        return self.bind(**context)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Logger that records calls for assertions."""
    return RecordingLogger()
