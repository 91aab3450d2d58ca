"""Logging adapters.

Usage:
    from erroror.infrastructure.logging import ConsoleAdapter
"""

from erroror.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
