"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from railtrace.domain.protocols import LoggerProtocol
"""

from railtrace.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
