"""
Search domain services: query composition and result mapping.
"""

from .query_builder import CompoundQueryBuilder
from .result_mapper import ResultMapper

__all__ = [
    'CompoundQueryBuilder',
    'ResultMapper'
]
