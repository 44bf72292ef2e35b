"""
Elasticsearch implementation of the driver interface.
"""

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...core.entities import (
    QueryDirective,
    QueryExpression,
    ExpressionCallback,
    ResultCollection,
    LengthAwarePaginator
)
from ...core.interfaces import DriverInterface, DocumentTypes, SearchClientInterface
from ...domain.search import CompoundQueryBuilder, ResultMapper

logger = logging.getLogger(__name__)


class ElasticsearchDriver(DriverInterface):
    """
    Driver that builds Elasticsearch queries and runs them.

    Document types are stored in ``type_field`` on each document and
    searches over a non-empty type list are filtered on it. A document
    is stored under the backend id ``<type>:<id>``, so the same id may
    be used by documents of different types.
    """

    ID_SEPARATOR = ":"

    def __init__(
        self,
        client: SearchClientInterface,
        index: str,
        type_field: str = "type"
    ):
        """
        Initialize the driver.

        Args:
            client: Search backend client
            index: Index every call is scoped to
            type_field: Source field holding the document type
        """
        self.client = client
        self.index = index
        self.type_field = type_field

    @property
    def enabled(self) -> bool:
        return True

    def ping(self) -> bool:
        """Check if the backend answers."""
        return self.client.ping()

    # ------------------------------------------------------------------ #
    # Query factories
    # ------------------------------------------------------------------ #

    def common(
        self,
        field: str,
        query: str,
        cutoff_frequency: float,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """
        Create a common terms query.

        See https://www.elastic.co/guide/en/elasticsearch/reference/7.17/query-dsl-common-terms-query.html
        """
        expression = QueryExpression("common", field, {
            "query": query,
            "cutoff_frequency": cutoff_frequency
        })
        return self._directive(expression, callback)

    def fuzzy(
        self,
        field: str,
        value: str,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a fuzzy query."""
        expression = QueryExpression("fuzzy", field, {"value": value})
        return self._directive(expression, callback)

    def match(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a match query."""
        return self._directive(self._match_expression("match", field, value), callback)

    def match_phrase(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a match phrase query."""
        return self._directive(self._match_expression("match_phrase", field, value), callback)

    def match_phrase_prefix(
        self,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a match phrase prefix query."""
        return self._directive(
            self._match_expression("match_phrase_prefix", field, value),
            callback
        )

    def multi_match(
        self,
        query: str = "",
        fields: Optional[List[str]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a multi match query."""
        expression = QueryExpression("multi_match", params={
            "query": query,
            "fields": list(fields or [])
        })
        return self._directive(expression, callback)

    def match_all(
        self,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a match all query."""
        return self._directive(QueryExpression("match_all"), callback)

    def query_string(
        self,
        query: str = "",
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a query string query."""
        expression = QueryExpression("query_string", params={"query": query})
        return self._directive(expression, callback)

    def range(
        self,
        field: Optional[str] = None,
        args: Optional[Dict[str, Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a range query."""
        expression = QueryExpression("range", field, copy.deepcopy(args or {}))
        return self._directive(expression, callback)

    def regexp(
        self,
        key: str = "",
        value: Optional[str] = None,
        boost: float = 1.0,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a regular expression query."""
        expression = QueryExpression("regexp", key, {"value": value, "boost": boost})
        return self._directive(expression, callback)

    def term(
        self,
        terms: Optional[Mapping[str, Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a single term query from one ``{field: value}`` pair."""
        terms = dict(terms or {})
        if terms:
            field, value = next(iter(terms.items()))
            expression = QueryExpression("term", field, {"value": value})
        else:
            expression = QueryExpression("term")
        return self._directive(expression, callback)

    def terms(
        self,
        key: str = "",
        terms: Optional[List[Any]] = None,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a terms query."""
        expression = QueryExpression("terms", params={key: list(terms or [])})
        return self._directive(expression, callback)

    def wildcard(
        self,
        key: str = "",
        value: Optional[str] = None,
        boost: float = 1.0,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Create a wildcard query."""
        expression = QueryExpression("wildcard", key, {"value": value, "boost": boost})
        return self._directive(expression, callback)

    @staticmethod
    def _match_expression(kind: str, field: Optional[str], value: Any) -> QueryExpression:
        if field is None:
            return QueryExpression(kind)
        return QueryExpression(kind, field, {"query": value})

    @staticmethod
    def _directive(
        expression: QueryExpression,
        callback: Optional[ExpressionCallback] = None
    ) -> QueryDirective:
        """Run the callback on the expression, then wrap it with the ``must`` role."""
        if callback is not None:
            callback(expression)
        return QueryDirective(expression)

    # ------------------------------------------------------------------ #
    # Execution
    # ------------------------------------------------------------------ #

    def get(
        self,
        types: DocumentTypes,
        directives: Sequence[QueryDirective]
    ) -> ResultCollection:
        """Execute the directives as one compound query."""
        return self._search(types, directives)

    def paginate(
        self,
        types: DocumentTypes,
        directives: Sequence[QueryDirective],
        page: int = 1,
        per_page: int = 15,
        offset: Optional[int] = None
    ) -> LengthAwarePaginator:
        """Execute the directives and return one page of results."""
        if offset is None:
            offset = max(page - 1, 0) * per_page

        results = self._search(types, directives, from_=offset, size=per_page)
        return LengthAwarePaginator.from_collection(results, per_page, page, offset)

    def _search(
        self,
        types: DocumentTypes,
        directives: Sequence[QueryDirective],
        from_: Optional[int] = None,
        size: Optional[int] = None
    ) -> ResultCollection:
        types = self.normalize_types(types)
        query = CompoundQueryBuilder.build(directives)
        body = self._scope_to_types(query.to_dict(), types)

        response = self.client.search(self.index, body, from_=from_, size=size)
        results = ResultMapper.to_result_collection(response)

        logger.debug(
            "Searched %s for types %s with %d clauses: %d/%d hits in %dms",
            self.index, types, query.clause_count(),
            len(results), results.total_hits, results.total_time
        )
        return results

    def _scope_to_types(self, body: Dict[str, Any], types: List[str]) -> Dict[str, Any]:
        """Restrict a request body to the given document types."""
        if not types:
            return body

        body["query"] = {
            "bool": {
                "must": [body["query"]],
                "filter": [{"terms": {self.type_field: types}}]
            }
        }
        return body

    # ------------------------------------------------------------------ #
    # Document mutation
    # ------------------------------------------------------------------ #

    def add(
        self,
        type: str,
        id: str,
        document: Mapping[str, Any]
    ) -> "ElasticsearchDriver":
        """Index a document, replacing any document of the same type and id."""
        self.client.index_document(
            self.index,
            self.document_id(type, id),
            self._typed(type, document)
        )
        logger.info("Indexed %s document %s into %s", type, id, self.index)
        return self

    def add_multiple(
        self,
        type: str,
        documents: Mapping[str, Mapping[str, Any]]
    ) -> "ElasticsearchDriver":
        """
        Index several documents keyed by id.

        Raises:
            BackendError: If the backend rejects any of the documents
        """
        typed = {
            self.document_id(type, document_id): self._typed(type, document)
            for document_id, document in documents.items()
        }
        counts = self.client.bulk_index(self.index, typed)
        logger.info(
            "Indexed %d %s documents into %s",
            counts.get("success", 0), type, self.index
        )
        return self

    def update(
        self,
        type: str,
        id: str,
        document: Mapping[str, Any]
    ) -> "ElasticsearchDriver":
        """
        Partially update a document.

        Raises:
            DocumentNotFoundError: If no document of this type has the id
        """
        self.client.update_document(
            self.index,
            self.document_id(type, id),
            self._typed(type, document)
        )
        logger.info("Updated %s document %s in %s", type, id, self.index)
        return self

    def delete(self, type: str, id: str) -> "ElasticsearchDriver":
        """
        Delete a document.

        Raises:
            DocumentNotFoundError: If no document of this type has the id
        """
        self.client.delete_document(self.index, self.document_id(type, id))
        logger.info("Deleted %s document %s from %s", type, id, self.index)
        return self

    @classmethod
    def document_id(cls, type: str, id: Any) -> str:
        """Backend id of the document ``id`` of ``type``."""
        return f"{type}{cls.ID_SEPARATOR}{id}"

    def _typed(self, type: str, document: Mapping[str, Any]) -> Dict[str, Any]:
        typed = dict(document)
        typed[self.type_field] = type
        return typed
