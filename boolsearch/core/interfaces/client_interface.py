"""
Client interface definitions for the search backend.

This module defines the abstract boundary between drivers and the
client that talks to the search engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional


class SearchClientInterface(ABC):
    """Interface for search backend client operations."""

    @abstractmethod
    def search(
        self,
        index: str,
        body: Dict[str, Any],
        from_: Optional[int] = None,
        size: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Run a search request.

        Args:
            index: Index to search
            body: Request body with ``query`` and optional ``sort``
            from_: Optional offset of the first hit
            size: Optional number of hits to return

        Returns:
            Dict[str, Any]: Raw search response
        """
        pass

    @abstractmethod
    def index_document(
        self,
        index: str,
        document_id: str,
        document: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Index a single document."""
        pass

    @abstractmethod
    def update_document(
        self,
        index: str,
        document_id: str,
        document: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Partially update a single document."""
        pass

    @abstractmethod
    def bulk_index(
        self,
        index: str,
        documents: Mapping[str, Mapping[str, Any]]
    ) -> Dict[str, int]:
        """
        Index several documents in one bulk request.

        Args:
            index: Target index
            documents: Documents keyed by id

        Returns:
            Dict[str, int]: Success and error counts

        Raises:
            BackendError: If any document was rejected
        """
        pass

    @abstractmethod
    def delete_document(self, index: str, document_id: str) -> Dict[str, Any]:
        """Delete a single document."""
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Check whether the backend answers."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the client connection."""
        pass
