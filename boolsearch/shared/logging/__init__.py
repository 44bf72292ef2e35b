"""
Logging setup for boolsearch.
"""

from .structured_logger import LogLevel, StructuredLogger, StructuredFormatter, configure_logging

__all__ = [
    'LogLevel',
    'StructuredLogger',
    'StructuredFormatter',
    'configure_logging'
]
