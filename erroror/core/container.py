"""Dependency factories (composition root).

Application-scoped singletons for ambient services. Only logging lives
here: error values themselves own no resources.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from erroror.core.config import get_settings

if TYPE_CHECKING:
    from erroror.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from erroror.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs, level=settings.log_level
    )
