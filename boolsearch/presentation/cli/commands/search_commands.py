"""
Search commands for CLI.

This module provides command handlers for searching, indexing and
deleting documents.
"""

import json
from typing import Any, Dict, Optional, Sequence

from ..handlers.cli_handler import CommandHandler, CommandResult
from ..formatters.output_formatter import OutputFormatter
from ..directive_parser import parse_directive
from ....application.services.search_application_service import SearchApplicationService
from ....core.entities import LengthAwarePaginator, Result
from ....infrastructure.ingestion import DocumentReader
from ....shared.exceptions import SearchError

SOURCE_PREVIEW_LENGTH = 80


class SearchCommand(CommandHandler):
    """
    Command handler for document search.

    Builds directives from ``kind:field=value`` strings and runs
    them as one compound query.
    """

    def __init__(
        self,
        formatter: OutputFormatter,
        search_service: SearchApplicationService
    ):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
            search_service: Search service
        """
        super().__init__(formatter)
        self.search_service = search_service

    def execute(
        self,
        types: Sequence[str] = (),
        must: Sequence[str] = (),
        should: Sequence[str] = (),
        must_not: Sequence[str] = (),
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        as_json: bool = False,
        **kwargs: Any
    ) -> CommandResult:
        """
        Execute the search command.

        Args:
            types: Document types to search
            must: Directive strings for the must bucket
            should: Directive strings for the should bucket
            must_not: Directive strings for the must_not bucket
            page: Optional page number
            per_page: Optional page size
            as_json: Print the results as JSON only
            **kwargs: Additional arguments

        Returns:
            CommandResult: Command execution result
        """
        try:
            driver = self.search_service.driver
            builder = self.search_service.builder()
            for text in must:
                builder.must(parse_directive(driver, text))
            for text in should:
                builder.should(parse_directive(driver, text))
            for text in must_not:
                builder.must_not(parse_directive(driver, text))

            results = self.search_service.search(
                list(types),
                builder.directives,
                page=page,
                per_page=per_page
            )
        except ValueError as e:
            return self.handle_error(e, "Invalid search")
        except SearchError as e:
            return self.handle_error(e, "Search failed")

        if as_json:
            self.formatter.print_plain(self.formatter.format_json(results.to_dict()))
            return self.handle_success("Search completed", data=results, quiet=True)

        rows = [self._row(result) for result in results]
        if rows:
            self.formatter.print(self.formatter.format_table(rows, title="Results"))

        return self.handle_success(
            "Search completed successfully" if rows else "No results found",
            data=results,
            details=self._summary(results)
        )

    @staticmethod
    def _row(result: Result) -> Dict[str, Any]:
        source = json.dumps(result.source, default=str)
        if len(source) > SOURCE_PREVIEW_LENGTH:
            source = source[:SOURCE_PREVIEW_LENGTH - 3] + "..."
        return {
            "ID": result.id,
            "Score": f"{result.score:.2f}",
            "Source": source
        }

    @staticmethod
    def _summary(results: Any) -> str:
        if isinstance(results, LengthAwarePaginator):
            return (
                f"Page {results.current_page} of {results.last_page}, "
                f"{len(results)} of {results.total} hits"
            )
        return (
            f"{len(results)} of {results.total_hits} hits, "
            f"max score {results.max_score:.2f}, took {results.total_time}ms"
        )


class IndexCommand(CommandHandler):
    """
    Command handler for bulk indexing.

    Reads a CSV, JSON-lines or Parquet file and indexes its rows as
    documents of one type.
    """

    def __init__(
        self,
        formatter: OutputFormatter,
        search_service: SearchApplicationService,
        reader: Optional[DocumentReader] = None
    ):
        super().__init__(formatter)
        self.search_service = search_service
        self.reader = reader or DocumentReader()

    def execute(
        self,
        type: str = "",
        path: str = "",
        id_field: str = "id",
        **kwargs: Any
    ) -> CommandResult:
        """
        Execute the index command.

        Args:
            type: Document type
            path: Document file path
            id_field: Column holding document ids
            **kwargs: Additional arguments

        Returns:
            CommandResult: Command execution result
        """
        try:
            count = self.search_service.index_batches(
                type,
                self.reader.iter_batches(path, id_field)
            )
        except (FileNotFoundError, KeyError, ValueError) as e:
            return self.handle_error(e, "Could not read documents")
        except SearchError as e:
            return self.handle_error(e, "Indexing failed")

        return self.handle_success(
            "Indexing completed successfully",
            data=count,
            details=f"Sent {count} {type} documents"
        )


class DeleteCommand(CommandHandler):
    """Command handler for deleting a document."""

    def __init__(
        self,
        formatter: OutputFormatter,
        search_service: SearchApplicationService
    ):
        super().__init__(formatter)
        self.search_service = search_service

    def execute(self, type: str = "", id: str = "", **kwargs: Any) -> CommandResult:
        try:
            self.search_service.delete_document(type, id)
        except SearchError as e:
            return self.handle_error(e, "Delete failed")

        return self.handle_success(f"Deleted {type} document {id}")


class PingCommand(CommandHandler):
    """Command handler for checking the backend connection."""

    def __init__(
        self,
        formatter: OutputFormatter,
        search_service: SearchApplicationService
    ):
        super().__init__(formatter)
        self.search_service = search_service

    def execute(self, **kwargs: Any) -> CommandResult:
        if not self.search_service.is_enabled():
            return self.handle_success("Search is disabled", details="Using the null driver")

        if not self.search_service.ping():
            return self.handle_error(
                ConnectionError("No response from the search backend"),
                "Backend unavailable"
            )

        return self.handle_success("Backend is reachable")


def build_commands(
    formatter: OutputFormatter,
    search_service: SearchApplicationService
) -> Dict[str, CommandHandler]:
    """Create every command handler for one service."""
    return {
        "search": SearchCommand(formatter, search_service),
        "index": IndexCommand(formatter, search_service),
        "delete": DeleteCommand(formatter, search_service),
        "ping": PingCommand(formatter, search_service),
    }
