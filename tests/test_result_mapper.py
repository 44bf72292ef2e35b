"""
Tests for search results, pagination and response mapping.
"""

import pytest

from boolsearch.core.entities import LengthAwarePaginator, Result, ResultCollection
from boolsearch.domain.search import ResultMapper


class TestResult:
    """Tests for Result."""

    def test_accessors(self, make_hit):
        """Test hit metadata and source fields are exposed."""
        result = Result(make_hit("42", {"title": "Python"}, score=1.5, index="articles"))

        assert result.id == "42"
        assert result.index == "articles"
        assert result.score == 1.5
        assert result["title"] == "Python"
        assert result.get("missing", "n/a") == "n/a"
        assert "title" in result
        assert "missing" not in result

    def test_raw_hit_is_kept(self, make_hit):
        hit = make_hit("1", {"a": 1})
        hit["highlight"] = {"a": ["<em>1</em>"]}
        assert Result(hit).to_dict() == hit

    def test_missing_score(self, make_hit):
        """Test a hit without a score reports zero."""
        assert Result(make_hit("1", score=None)).score == 0.0


class TestResultMapper:
    """Tests for ResultMapper."""

    def test_counts_and_totals(self, make_hit, make_response):
        """Test hits are wrapped in order and totals passed through."""
        hits = [make_hit(str(i), {"n": i}, score=3.0 - i) for i in range(3)]
        collection = ResultMapper.to_result_collection(
            make_response(hits, total=10, max_score=3.0, took=7)
        )

        assert collection.count() == 3
        assert [r.id for r in collection] == ["0", "1", "2"]
        assert collection.total_hits == 10
        assert collection.max_score == 3.0
        assert collection.total_time == 7

    def test_integer_total(self, make_hit):
        """Test hit counts reported as a plain number."""
        response = {"took": 1, "hits": {"total": 4, "max_score": 1.0, "hits": [make_hit("1")]}}
        assert ResultMapper.to_result_collection(response).total_hits == 4

    def test_missing_max_score(self, make_hit):
        """Test a null max score becomes zero."""
        response = {"took": 1, "hits": {"total": {"value": 1}, "max_score": None, "hits": [make_hit("1")]}}
        assert ResultMapper.to_result_collection(response).max_score == 0.0

    def test_empty_response(self):
        collection = ResultMapper.to_result_collection({})

        assert collection.is_empty()
        assert collection.total_hits == 0
        assert collection.first() is None


class TestResultCollection:
    """Tests for ResultCollection."""

    def test_empty(self):
        collection = ResultCollection.empty()
        assert collection.count() == 0
        assert collection.total_hits == 0
        assert collection.max_score == 0.0
        assert collection.total_time == 0

    def test_to_dict(self, make_hit):
        collection = ResultCollection(items=(Result(make_hit("1")),), total_hits=1, max_score=1.0, total_time=2)
        assert collection.to_dict() == {
            "items": [make_hit("1")],
            "total_hits": 1,
            "max_score": 1.0,
            "total_time": 2
        }


class TestLengthAwarePaginator:
    """Tests for LengthAwarePaginator."""

    def test_from_collection_caps_items(self, article_hits):
        """Test a page never holds more than per_page items."""
        collection = ResultCollection(
            items=tuple(Result(hit) for hit in article_hits),
            total_hits=5
        )
        page = LengthAwarePaginator.from_collection(collection, per_page=2, current_page=1)

        assert page.count() == 2
        assert page.total == 5
        assert page.last_page == 3
        assert page.has_more_pages
        assert page.on_first_page

    def test_item_positions(self, article_hits):
        page = LengthAwarePaginator(
            items=[Result(hit) for hit in article_hits[:2]],
            total=5,
            per_page=2,
            current_page=2
        )

        assert page.first_item == 3
        assert page.last_item == 4
        assert page.to_dict()["from"] == 3
        assert page.to_dict()["to"] == 4

    def test_page_zero_counts_as_first_page(self, article_hits):
        """Test a page number below one never yields a negative position."""
        collection = ResultCollection(
            items=tuple(Result(hit) for hit in article_hits[:2]),
            total_hits=5
        )
        page = LengthAwarePaginator.from_collection(collection, per_page=2, current_page=0)

        assert page.current_page == 1
        assert page.first_item == 1
        assert page.last_item == 2

    def test_explicit_offset_positions(self, article_hits):
        collection = ResultCollection(
            items=tuple(Result(hit) for hit in article_hits[:3]),
            total_hits=20
        )
        page = LengthAwarePaginator.from_collection(collection, per_page=3, current_page=1, offset=7)

        assert page.offset == 7
        assert page.first_item == 8
        assert page.last_item == 10
        assert page.to_dict()["from"] == 8

    def test_empty_page(self):
        page = LengthAwarePaginator(per_page=10, current_page=3)

        assert page.last_page == 1
        assert not page.has_more_pages
        assert page.first_item is None
        assert page.to_dict() == {
            "data": [],
            "total": 0,
            "per_page": 10,
            "current_page": 3,
            "last_page": 1,
            "from": None,
            "to": None
        }

    @pytest.mark.parametrize("total,per_page,expected", [
        (0, 15, 1),
        (15, 15, 1),
        (16, 15, 2),
        (5, 2, 3),
    ])
    def test_last_page(self, total, per_page, expected):
        assert LengthAwarePaginator(total=total, per_page=per_page).last_page == expected
