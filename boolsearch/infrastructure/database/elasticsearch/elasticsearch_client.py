"""
Elasticsearch client for search and document operations.

This module wraps the official Elasticsearch client behind the
SearchClientInterface and translates client exceptions into the
boolsearch error hierarchy.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional

from elasticsearch import (
    ApiError,
    Elasticsearch,
    TransportError
)

from ....core.interfaces import SearchClientInterface
from ....shared.exceptions import (
    BackendError,
    BackendUnavailableError,
    DocumentNotFoundError,
    MalformedQueryError
)

logger = logging.getLogger(__name__)


class ElasticsearchClient(SearchClientInterface):
    """
    Client for Elasticsearch operations.

    The underlying connection is created once and reused for every
    call. Failed calls are never retried here.
    """

    def __init__(
        self,
        url: str = "http://localhost:9200",
        api_key: Optional[str] = None,
        timeout_seconds: float = 30.0,
        max_retries: int = 0,
        verify_certs: bool = True,
        client: Optional[Elasticsearch] = None
    ):
        """
        Initialize the client.

        Args:
            url: Elasticsearch URL
            api_key: Optional API key
            timeout_seconds: Request timeout
            max_retries: Retries performed by the transport
            verify_certs: Verify TLS certificates for https URLs
            client: Optional pre-built Elasticsearch client
        """
        self.url = url
        if client is not None:
            self.client = client
            return

        options: Dict[str, Any] = {
            "request_timeout": timeout_seconds,
            "max_retries": max_retries,
            "retry_on_timeout": False
        }
        if api_key:
            options["api_key"] = api_key
        if url.startswith("https://"):
            options["verify_certs"] = verify_certs

        self.client = Elasticsearch(url, **options)

    # ------------------------------------------------------------------ #
    # Error translation
    # ------------------------------------------------------------------ #

    @contextmanager
    def _translate_errors(self, operation: str, **context: Any) -> Iterator[None]:
        """Re-raise client exceptions as search errors."""
        try:
            yield
        except ApiError as e:
            status = e.meta.status
            logger.error(
                "Elasticsearch %s failed with status %s: %s",
                operation, status, e.message
            )
            if status == 400:
                error_class = MalformedQueryError
            elif status == 404:
                error_class = DocumentNotFoundError
            else:
                error_class = BackendError
            raise error_class(
                f"Elasticsearch {operation} failed: {e.message}",
                status=status,
                cause=e,
                operation=operation,
                **context
            ) from e
        except TransportError as e:
            logger.error("Elasticsearch %s could not reach %s: %s", operation, self.url, e)
            raise BackendUnavailableError(
                f"Elasticsearch unavailable during {operation}: {e}",
                cause=e,
                operation=operation,
                url=self.url,
                **context
            ) from e

    @staticmethod
    def _body(response: Any) -> Dict[str, Any]:
        """Return the plain dict behind a client response."""
        return getattr(response, "body", response)

    # ------------------------------------------------------------------ #
    # Search
    # ------------------------------------------------------------------ #

    def search(
        self,
        index: str,
        body: Dict[str, Any],
        from_: Optional[int] = None,
        size: Optional[int] = None
    ) -> Dict[str, Any]:
        """Run a search request against one index."""
        params: Dict[str, Any] = dict(body)
        if from_ is not None:
            params["from_"] = from_
        if size is not None:
            params["size"] = size

        with self._translate_errors("search", index=index):
            response = self.client.search(index=index, **params)
        return self._body(response)

    # ------------------------------------------------------------------ #
    # Documents
    # ------------------------------------------------------------------ #

    def index_document(
        self,
        index: str,
        document_id: str,
        document: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Index a single document."""
        with self._translate_errors("index", index=index, document_id=document_id):
            response = self.client.index(index=index, id=document_id, document=dict(document))
        return self._body(response)

    def update_document(
        self,
        index: str,
        document_id: str,
        document: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Partially update a single document."""
        with self._translate_errors("update", index=index, document_id=document_id):
            response = self.client.update(index=index, id=document_id, doc=dict(document))
        return self._body(response)

    def bulk_index(
        self,
        index: str,
        documents: Mapping[str, Mapping[str, Any]]
    ) -> Dict[str, int]:
        """
        Index several documents in one bulk request.

        Raises:
            BackendError: If the backend rejected any document; the failed
                ids and error types are in the error context
        """
        if not documents:
            return {"success": 0, "errors": 0}

        operations = []
        for document_id, document in documents.items():
            operations.append({"index": {"_index": index, "_id": document_id}})
            operations.append(dict(document))

        with self._translate_errors("bulk", index=index, documents=len(documents)):
            response = self._body(self.client.bulk(operations=operations))

        failures: Dict[str, str] = {}
        for item in response.get("items", []):
            result = item.get("index", {})
            error = result.get("error")
            if error:
                error_type = error.get("type", "unknown") if isinstance(error, dict) else str(error)
                failures[str(result.get("_id"))] = error_type

        if failures:
            logger.error(
                "Bulk indexing into %s rejected %d of %d documents",
                index, len(failures), len(documents)
            )
            raise BackendError(
                f"Elasticsearch bulk rejected {len(failures)} of {len(documents)} documents",
                operation="bulk",
                index=index,
                failed_ids=sorted(failures),
                error_types=sorted(set(failures.values()))
            )
        return {"success": len(documents), "errors": 0}

    def delete_document(self, index: str, document_id: str) -> Dict[str, Any]:
        """Delete a single document."""
        with self._translate_errors("delete", index=index, document_id=document_id):
            response = self.client.delete(index=index, id=document_id)
        return self._body(response)

    # ------------------------------------------------------------------ #
    # Connection helpers
    # ------------------------------------------------------------------ #

    def ping(self) -> bool:
        """Check if the cluster answers."""
        return bool(self.client.ping())

    def close(self) -> None:
        """Close the client connection."""
        self.client.close()
