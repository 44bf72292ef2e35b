"""
Error context management.

This module provides the structured context attached to every search
error, so callers and logs see the same details.
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class ErrorContext:
    """
    Structured error context information.

    Captures what failed, where it failed and the data describing the
    failed call.
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error_type: str = ""
    error_message: str = ""
    stack_trace: Optional[List[str]] = None
    context_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.error_type,
            "error_message": self.error_message,
            "stack_trace": self.stack_trace,
            "context_data": self.context_data
        }

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self.context_data.update(kwargs)


class ErrorContextManager:
    """Helpers for creating error contexts."""

    @staticmethod
    def create_context(
        error: BaseException,
        include_stack_trace: bool = True,
        **context_data: Any
    ) -> ErrorContext:
        """
        Create error context from exception.

        Args:
            error: The exception to create context from
            include_stack_trace: Whether to include stack trace
            **context_data: Additional context data

        Returns:
            ErrorContext: Created error context
        """
        context = ErrorContext(
            error_type=error.__class__.__name__,
            error_message=str(error),
            context_data=context_data
        )

        if include_stack_trace and error.__traceback__ is not None:
            context.stack_trace = traceback.format_exception(
                type(error),
                error,
                error.__traceback__
            )

        return context
