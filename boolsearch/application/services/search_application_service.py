"""
Application service for search operations.

This module coordinates drivers with configured paging limits and is
the entry point used by the command line interface.
"""

import logging
import time
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ...core.entities import LengthAwarePaginator, QueryDirective, ResultCollection
from ...core.interfaces import DocumentTypes, DriverInterface
from ..search.search_builder import SearchBuilder

logger = logging.getLogger(__name__)


class SearchApplicationService:
    """
    Application service for search operations.

    Applies the configured default and maximum page sizes and logs the
    outcome of every call.
    """

    def __init__(
        self,
        driver: DriverInterface,
        default_per_page: int = 15,
        max_per_page: int = 100
    ):
        """
        Initialize the service.

        Args:
            driver: Search driver
            default_per_page: Page size used when none is requested
            max_per_page: Largest page size served
        """
        self.driver = driver
        self.default_per_page = default_per_page
        self.max_per_page = max_per_page

    def is_enabled(self) -> bool:
        """Whether searches reach a backend."""
        return self.driver.enabled

    def ping(self) -> bool:
        return self.driver.ping()

    def builder(self) -> SearchBuilder:
        return SearchBuilder(self.driver)

    def search(
        self,
        types: DocumentTypes,
        directives: Sequence[Optional[QueryDirective]],
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> Union[ResultCollection, LengthAwarePaginator]:
        """
        Search documents.

        Args:
            types: Document type or types
            directives: Directives to compose
            page: Optional page number; paginates when set
            per_page: Optional page size, capped at ``max_per_page``

        Returns:
            Union[ResultCollection, LengthAwarePaginator]: All returned
                hits, or one page when ``page`` or ``per_page`` is given
        """
        directives = [d for d in directives if d is not None]
        start = time.perf_counter()

        if page is None and per_page is None:
            results = self.driver.get(types, directives)
            total = results.total_hits
        else:
            per_page = self._page_size(per_page)
            results = self.driver.paginate(types, directives, max(page or 1, 1), per_page)
            total = results.total

        logger.info(
            "Search over %s returned %d of %d hits in %.2fms",
            DriverInterface.normalize_types(types), len(results), total,
            (time.perf_counter() - start) * 1000
        )
        return results

    def _page_size(self, per_page: Optional[int]) -> int:
        if per_page is None or per_page <= 0:
            return self.default_per_page
        return min(per_page, self.max_per_page)

    def index_documents(
        self,
        type: str,
        documents: Mapping[str, Mapping[str, Any]]
    ) -> int:
        """
        Index documents keyed by id.

        Returns:
            int: Number of documents sent
        """
        if not documents:
            return 0
        self.driver.add_multiple(type, documents)
        return len(documents)

    def index_batches(
        self,
        type: str,
        batches: Iterable[Mapping[str, Mapping[str, Any]]]
    ) -> int:
        """Index batches of documents and return how many were sent."""
        return sum(self.index_documents(type, batch) for batch in batches)

    def delete_document(self, type: str, id: str) -> None:
        self.driver.delete(type, id)
