"""
Data models for search results.

This module contains the normalized hit wrapper and the collection
returned from every search call.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


class Result:
    """
    A single search hit.

    The raw hit is kept exactly as the backend returned it. Item access
    and ``get`` read document fields from ``_source``.
    """

    def __init__(self, hit: Mapping[str, Any]):
        self.hit: Dict[str, Any] = dict(hit)

    @property
    def id(self) -> Optional[str]:
        return self.hit.get("_id")

    @property
    def index(self) -> Optional[str]:
        return self.hit.get("_index")

    @property
    def score(self) -> float:
        return self.hit.get("_score") or 0.0

    @property
    def source(self) -> Dict[str, Any]:
        return self.hit.get("_source") or {}

    def get(self, field: str, default: Any = None) -> Any:
        """Return a document field, or ``default`` when missing."""
        return self.source.get(field, default)

    def __getitem__(self, field: str) -> Any:
        return self.source[field]

    def __contains__(self, field: object) -> bool:
        return field in self.source

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.hit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.hit == other.hit

    def __repr__(self) -> str:
        return f"Result(id={self.id!r}, score={self.score!r})"


@dataclass(frozen=True)
class ResultCollection:
    """
    The hits of one search call plus the backend's reported totals.

    ``items`` holds only the page the backend returned, so its length
    never exceeds ``total_hits``.
    """
    items: Tuple[Result, ...] = ()
    total_hits: int = 0
    max_score: float = 0.0
    total_time: int = 0

    @classmethod
    def empty(cls) -> "ResultCollection":
        return cls()

    def all(self) -> List[Result]:
        return list(self.items)

    def first(self) -> Optional[Result]:
        return self.items[0] if self.items else None

    def count(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Result:
        return self.items[index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert collection to dictionary representation."""
        return {
            'items': [item.to_dict() for item in self.items],
            'total_hits': self.total_hits,
            'max_score': self.max_score,
            'total_time': self.total_time
        }
