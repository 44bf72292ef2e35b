"""
Fluent search building.
"""

from .search_builder import SearchBuilder

__all__ = ['SearchBuilder']
