"""Runtime environment, read from ERROROR_ENVIRONMENT.

Only one behavior hangs off it: whether mapped failures are logged as
human-readable console lines (development) or as JSON (everywhere else).
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """True when log lines should be rendered as JSON."""
        return self is not Environment.DEVELOPMENT
