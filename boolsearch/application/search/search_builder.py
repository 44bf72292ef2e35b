"""
Fluent collection of directives into role buckets.
"""

from typing import List, Optional

from ...core.entities import (
    BooleanRole,
    LengthAwarePaginator,
    QueryDirective,
    ResultCollection
)
from ...core.interfaces import DocumentTypes, DriverInterface


class SearchBuilder:
    """
    Collects directives and runs them through a driver.

    Example::

        search = SearchBuilder(driver)
        search.must(driver.match("title", "python"))
        search.must_not(driver.term({"status": "archived"}))
        results = search.get("article")

    Placing a directive in a bucket re-tags it with that role. ``None``
    directives, as returned by a disabled driver, are skipped.
    """

    def __init__(self, driver: DriverInterface):
        self.driver = driver
        self._directives: List[QueryDirective] = []

    def add(self, directive: Optional[QueryDirective]) -> "SearchBuilder":
        """Add a directive with the role it already carries."""
        if directive is not None:
            self._directives.append(directive)
        return self

    def must(self, directive: Optional[QueryDirective]) -> "SearchBuilder":
        return self._add_with_role(directive, BooleanRole.MUST)

    def should(self, directive: Optional[QueryDirective]) -> "SearchBuilder":
        return self._add_with_role(directive, BooleanRole.SHOULD)

    def must_not(self, directive: Optional[QueryDirective]) -> "SearchBuilder":
        return self._add_with_role(directive, BooleanRole.MUST_NOT)

    def _add_with_role(
        self,
        directive: Optional[QueryDirective],
        role: BooleanRole
    ) -> "SearchBuilder":
        if directive is not None:
            self._directives.append(directive.with_role(role))
        return self

    @property
    def directives(self) -> List[QueryDirective]:
        return list(self._directives)

    def get(self, types: DocumentTypes) -> ResultCollection:
        """Run the collected directives."""
        return self.driver.get(types, self.directives)

    def paginate(
        self,
        types: DocumentTypes,
        page: int = 1,
        per_page: int = 15,
        offset: Optional[int] = None
    ) -> LengthAwarePaginator:
        """Run the collected directives and return one page."""
        return self.driver.paginate(types, self.directives, page, per_page, offset)
