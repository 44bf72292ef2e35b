"""
Length-aware pagination view over a result collection.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .result_entity import Result, ResultCollection


@dataclass(frozen=True)
class LengthAwarePaginator:
    """
    One page of results together with the overall total.

    ``total`` is the backend's hit count, not the length of ``items``.
    ``offset`` is the position of the first item when the page was
    fetched from an explicit offset rather than from its page number.
    """
    items: List[Result] = field(default_factory=list)
    total: int = 0
    per_page: int = 15
    current_page: int = 1
    offset: Optional[int] = None

    @classmethod
    def from_collection(
        cls,
        collection: ResultCollection,
        per_page: int,
        current_page: int,
        offset: Optional[int] = None
    ) -> "LengthAwarePaginator":
        """
        Wrap a result collection as a page.

        Args:
            collection: Results returned for the page
            per_page: Page size
            current_page: 1-based page number; lower values count as 1
            offset: Optional index of the first returned hit

        Returns:
            LengthAwarePaginator: Paginated view
        """
        return cls(
            items=collection.all()[:per_page],
            total=collection.total_hits,
            per_page=per_page,
            current_page=max(current_page, 1),
            offset=None if offset is None else max(offset, 0)
        )

    @property
    def last_page(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(int(math.ceil(self.total / self.per_page)), 1)

    @property
    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page

    @property
    def on_first_page(self) -> bool:
        return self.current_page <= 1

    @property
    def first_item(self) -> Optional[int]:
        """1-based position of the first item on this page."""
        if not self.items:
            return None
        if self.offset is not None:
            return self.offset + 1
        return (max(self.current_page, 1) - 1) * self.per_page + 1

    @property
    def last_item(self) -> Optional[int]:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1

    def count(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert page to dictionary representation."""
        return {
            'data': [item.to_dict() for item in self.items],
            'total': self.total,
            'per_page': self.per_page,
            'current_page': self.current_page,
            'last_page': self.last_page,
            'from': self.first_item,
            'to': self.last_item
        }
