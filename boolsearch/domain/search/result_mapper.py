"""
Mapping of raw search responses into result collections.
"""

from typing import Any, Mapping

from ...core.entities import Result, ResultCollection


class ResultMapper:
    """
    Maps raw backend responses onto result collections.

    Hits are wrapped one to one, in order, and the totals are taken as
    reported by the backend.
    """

    @staticmethod
    def to_result(hit: Mapping[str, Any]) -> Result:
        return Result(hit)

    @classmethod
    def to_result_collection(cls, response: Mapping[str, Any]) -> ResultCollection:
        """
        Create a result collection from a search response.

        Args:
            response: Raw response with ``hits`` and ``took``

        Returns:
            ResultCollection: Wrapped hits and reported totals
        """
        hits = response.get("hits") or {}
        items = tuple(cls.to_result(hit) for hit in hits.get("hits") or [])

        return ResultCollection(
            items=items,
            total_hits=cls._total_hits(hits.get("total")),
            max_score=float(hits.get("max_score") or 0.0),
            total_time=int(response.get("took") or 0)
        )

    @staticmethod
    def _total_hits(total: Any) -> int:
        """Read the hit count, reported either as a number or as ``{"value": n}``."""
        if total is None:
            return 0
        if isinstance(total, Mapping):
            return int(total.get("value", 0))
        return int(total)
