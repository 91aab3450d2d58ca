"""Domain protocols.

Usage:
    from erroror.domain.protocols import LoggerProtocol
"""

from erroror.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
