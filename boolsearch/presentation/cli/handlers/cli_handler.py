"""
Base handler for CLI commands.

This module provides the result type and the success and error
reporting shared by every command.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..formatters.output_formatter import OutputFormatter
from ....shared.exceptions import SearchError


@dataclass
class CommandResult:
    """Result of a command execution."""

    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[Exception] = None


class CommandHandler(ABC):
    """
    Base class for command handlers.

    Subclasses implement ``execute`` and report through
    ``handle_success`` and ``handle_error``.
    """

    def __init__(self, formatter: OutputFormatter):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
        """
        self.formatter = formatter

    @abstractmethod
    def execute(self, **kwargs: Any) -> CommandResult:
        """
        Execute the command.

        Args:
            **kwargs: Command arguments

        Returns:
            CommandResult: Command execution result
        """
        pass

    def handle_error(
        self,
        error: Exception,
        message: str = "An error occurred"
    ) -> CommandResult:
        """
        Report a failed command.

        Args:
            error: Exception that occurred
            message: Error message

        Returns:
            CommandResult: Error result
        """
        details = str(error)
        if isinstance(error, SearchError) and error.context.context_data:
            details += "\n" + ", ".join(
                f"{k}={v}" for k, v in error.context.context_data.items()
            )

        self.formatter.print(self.formatter.format_error(message, details))

        return CommandResult(
            success=False,
            message=message,
            error=error
        )

    def handle_success(
        self,
        message: str,
        data: Optional[Any] = None,
        details: Optional[str] = None,
        quiet: bool = False
    ) -> CommandResult:
        """
        Report a successful command.

        Args:
            message: Success message
            data: Optional result data
            details: Optional success details
            quiet: Skip printing the success panel

        Returns:
            CommandResult: Success result
        """
        if not quiet:
            self.formatter.print(self.formatter.format_success(message, details))

        return CommandResult(
            success=True,
            message=message,
            data=data
        )
