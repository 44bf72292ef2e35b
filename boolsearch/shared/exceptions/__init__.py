"""
Error types and error context for boolsearch.
"""

from .error_context import ErrorContext, ErrorContextManager
from .search_errors import (
    SearchError,
    BackendUnavailableError,
    BackendError,
    MalformedQueryError,
    DocumentNotFoundError
)

__all__ = [
    'ErrorContext',
    'ErrorContextManager',
    'SearchError',
    'BackendUnavailableError',
    'BackendError',
    'MalformedQueryError',
    'DocumentNotFoundError'
]
