"""
Search drivers and the factory that selects one.
"""

from .elasticsearch_driver import ElasticsearchDriver
from .null_driver import NullDriver
from .factory import DriverFactory, SUPPORTED_DRIVERS

__all__ = [
    'ElasticsearchDriver',
    'NullDriver',
    'DriverFactory',
    'SUPPORTED_DRIVERS'
]
