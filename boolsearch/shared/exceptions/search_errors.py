"""
Exceptions raised by search drivers.

Backend client failures are translated into this hierarchy. The
underlying client exception is chained and kept on ``cause``.
"""

from typing import Any, Optional

from .error_context import ErrorContext, ErrorContextManager


class SearchError(Exception):
    """Base class for all search errors."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        **context_data: Any
    ):
        super().__init__(message)
        self.cause = cause
        self.context: ErrorContext = ErrorContextManager.create_context(
            cause if cause is not None else self,
            **context_data
        )
        self.context.error_type = self.__class__.__name__
        self.context.error_message = message


class BackendUnavailableError(SearchError):
    """The backend could not be reached."""


class BackendError(SearchError):
    """The backend answered with an error."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
        **context_data: Any
    ):
        super().__init__(message, cause=cause, status=status, **context_data)
        self.status = status


class MalformedQueryError(BackendError):
    """The backend rejected the request as invalid."""


class DocumentNotFoundError(BackendError):
    """The document addressed by a mutation does not exist."""
