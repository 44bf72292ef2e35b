"""
Core interfaces module for boolsearch.

This module provides access to all core interfaces used throughout
the application.
"""

from .driver_interface import DriverInterface, DocumentTypes
from .client_interface import SearchClientInterface

__all__ = [
    'DriverInterface',
    'DocumentTypes',
    'SearchClientInterface'
]
