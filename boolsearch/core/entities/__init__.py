"""
Core entities module for boolsearch.

This module provides access to all core entity classes used throughout
the application.
"""

from .query_entity import (
    BooleanRole,
    QueryExpression,
    QueryDirective,
    CompoundQuery,
    ExpressionCallback,
    SCORE_SORT
)
from .result_entity import (
    Result,
    ResultCollection
)
from .pagination_entity import LengthAwarePaginator

__all__ = [
    'BooleanRole',
    'QueryExpression',
    'QueryDirective',
    'CompoundQuery',
    'ExpressionCallback',
    'SCORE_SORT',
    'Result',
    'ResultCollection',
    'LengthAwarePaginator'
]
