"""
No-op implementation of the driver interface.

Used where search is disabled. Call sites stay unchanged: factories
return None, searches come back empty and mutations are accepted
without touching a backend.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...core.entities import (
    ExpressionCallback,
    LengthAwarePaginator,
    QueryDirective,
    ResultCollection
)
from ...core.interfaces import DriverInterface, DocumentTypes


class NullDriver(DriverInterface):
    """Driver that never contacts a backend."""

    @property
    def enabled(self) -> bool:
        return False

    def ping(self) -> bool:
        return False

    # ------------------------------------------------------------------ #
    # Query factories
    # ------------------------------------------------------------------ #

    def common(
        self,
        field: str,
        query: str,
        cutoff_frequency: float,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def fuzzy(
        self,
        field: str,
        value: str,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def match(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def match_phrase(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def match_phrase_prefix(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def multi_match(
        self,
        query: str = "",
        fields: Optional[List[str]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def match_all(
        self,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def query_string(
        self,
        query: str = "",
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def range(
        self,
        field: Optional[str] = None,
        args: Optional[Dict[str, Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def regexp(
        self,
        key: str = "",
        value: Optional[str] = None,
        boost: float = 1.0,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def term(
        self,
        terms: Optional[Mapping[str, Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def terms(
        self,
        key: str = "",
        terms: Optional[List[Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    def wildcard(
        self,
        key: str = "",
        value: Optional[str] = None,
        boost: float = 1.0,
        callback: Optional[ExpressionCallback] = None
    ) -> None:
        return None

    # ------------------------------------------------------------------ #
    # Execution
    # ------------------------------------------------------------------ #

    def get(
        self,
        types: DocumentTypes,
        directives: Sequence[Optional[QueryDirective]]
    ) -> ResultCollection:
        return ResultCollection.empty()

    def paginate(
        self,
        types: DocumentTypes,
        directives: Sequence[Optional[QueryDirective]],
        page: int = 1,
        per_page: int = 15,
        offset: Optional[int] = None
    ) -> LengthAwarePaginator:
        return LengthAwarePaginator.from_collection(
            ResultCollection.empty(), per_page, page, offset
        )

    # ------------------------------------------------------------------ #
    # Document mutation
    # ------------------------------------------------------------------ #

    def add(self, type: str, id: str, document: Mapping[str, Any]) -> "NullDriver":
        return self

    def add_multiple(
        self,
        type: str,
        documents: Mapping[str, Mapping[str, Any]]
    ) -> "NullDriver":
        return self

    def update(self, type: str, id: str, document: Mapping[str, Any]) -> "NullDriver":
        return self

    def delete(self, type: str, id: str) -> "NullDriver":
        return self
