"""
Driver interface definition.

This module defines the contract every search driver follows. Callers
build directives through the factory operations, run them with ``get``
or ``paginate``, and mutate documents through the passthroughs, without
knowing whether search is backed by a real engine or disabled.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..entities import (
    QueryDirective,
    ExpressionCallback,
    ResultCollection,
    LengthAwarePaginator
)

DocumentTypes = Union[str, Sequence[str]]


class DriverInterface(ABC):
    """Interface for search drivers."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether calls reach a search backend."""
        pass

    @abstractmethod
    def ping(self) -> bool:
        """
        Check the backend connection.

        Returns:
            bool: True if the backend answered; False when it did not or
                the driver is disabled
        """
        pass

    # ------------------------------------------------------------------ #
    # Query factories
    # ------------------------------------------------------------------ #

    @abstractmethod
    def common(
        self,
        field: str,
        query: str,
        cutoff_frequency: float,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """
        Create a common terms query.

        Args:
            field: Field to query
            query: Query text
            cutoff_frequency: Frequency above which terms are optional
            callback: Optional hook run on the built expression

        Returns:
            Optional[QueryDirective]: Directive with the ``must`` role
        """
        pass

    @abstractmethod
    def fuzzy(
        self,
        field: str,
        value: str,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a fuzzy query."""
        pass

    @abstractmethod
    def match(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a match query."""
        pass

    @abstractmethod
    def match_phrase(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a match phrase query."""
        pass

    @abstractmethod
    def match_phrase_prefix(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a match phrase prefix query."""
        pass

    @abstractmethod
    def multi_match(
        self,
        query: str = "",
        fields: Optional[List[str]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a multi match query."""
        pass

    @abstractmethod
    def match_all(
        self,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a match all query."""
        pass

    @abstractmethod
    def query_string(
        self,
        query: str = "",
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a query string query."""
        pass

    @abstractmethod
    def range(
        self,
        field: Optional[str] = None,
        args: Optional[Dict[str, Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """
        Create a range query.

        Args:
            field: Field to query
            args: Range bounds, e.g. ``{"gte": 10, "lt": 20}``
            callback: Optional hook run on the built expression

        Returns:
            Optional[QueryDirective]: Directive with the ``must`` role
        """
        pass

    @abstractmethod
    def regexp(
        self,
        key: str = "",
        value: Optional[str] = None,
        boost: float = 1.0,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a regular expression query."""
        pass

    @abstractmethod
    def term(
        self,
        terms: Optional[Mapping[str, Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """
        Create a single term query.

        Args:
            terms: One ``{field: value}`` pair
            callback: Optional hook run on the built expression

        Returns:
            Optional[QueryDirective]: Directive with the ``must`` role
        """
        pass

    @abstractmethod
    def terms(
        self,
        key: str = "",
        terms: Optional[List[Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a terms query."""
        pass

    @abstractmethod
    def wildcard(
        self,
        key: str = "",
        value: Optional[str] = None,
        boost: float = 1.0,
        callback: Optional[ExpressionCallback] = None
    ) -> Optional[QueryDirective]:
        """Create a wildcard query."""
        pass

    # ------------------------------------------------------------------ #
    # Execution
    # ------------------------------------------------------------------ #

    @abstractmethod
    def get(
        self,
        types: DocumentTypes,
        directives: Sequence[QueryDirective]
    ) -> ResultCollection:
        """
        Execute the directives as one compound query.

        Args:
            types: Document type or types to search
            directives: Directives to compose

        Returns:
            ResultCollection: Hits and totals of the search
        """
        pass

    @abstractmethod
    def paginate(
        self,
        types: DocumentTypes,
        directives: Sequence[QueryDirective],
        page: int = 1,
        per_page: int = 15,
        offset: Optional[int] = None
    ) -> LengthAwarePaginator:
        """
        Execute the directives and return one page of results.

        Args:
            types: Document type or types to search
            directives: Directives to compose
            page: 1-based page number
            per_page: Page size
            offset: Index of the first hit; derived from ``page`` when None

        Returns:
            LengthAwarePaginator: The requested page
        """
        pass

    # ------------------------------------------------------------------ #
    # Document mutation
    # ------------------------------------------------------------------ #

    @abstractmethod
    def add(
        self,
        type: str,
        id: str,
        document: Mapping[str, Any]
    ) -> "DriverInterface":
        """Index a document, replacing any document of the same type and id."""
        pass

    @abstractmethod
    def add_multiple(
        self,
        type: str,
        documents: Mapping[str, Mapping[str, Any]]
    ) -> "DriverInterface":
        """Index several documents keyed by id."""
        pass

    @abstractmethod
    def update(
        self,
        type: str,
        id: str,
        document: Mapping[str, Any]
    ) -> "DriverInterface":
        """Partially update a document."""
        pass

    @abstractmethod
    def delete(self, type: str, id: str) -> "DriverInterface":
        """Delete a document."""
        pass

    @staticmethod
    def normalize_types(types: Optional[DocumentTypes]) -> List[str]:
        """Turn a type name or a sequence of names into a list."""
        if types is None:
            return []
        if isinstance(types, str):
            return [types]
        return list(types)
