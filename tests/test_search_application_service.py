"""
Tests for the search builder and the search application service.
"""

from unittest.mock import Mock

import pytest

from boolsearch.application.search import SearchBuilder
from boolsearch.application.services import SearchApplicationService
from boolsearch.core.entities import BooleanRole, LengthAwarePaginator, ResultCollection
from boolsearch.core.interfaces import DriverInterface


@pytest.fixture
def mock_driver():
    driver = Mock(spec=DriverInterface)
    driver.enabled = True
    driver.ping.return_value = True
    driver.get.return_value = ResultCollection.empty()
    driver.paginate.side_effect = lambda types, directives, page, per_page: LengthAwarePaginator(
        per_page=per_page, current_page=page
    )
    return driver


@pytest.fixture
def service(mock_driver):
    return SearchApplicationService(mock_driver, default_per_page=15, max_per_page=50)


class TestSearchBuilder:
    """Tests for SearchBuilder."""

    def test_buckets_retag_directives(self, es_driver):
        """Test placing a directive in a bucket sets its role."""
        builder = (
            SearchBuilder(es_driver)
            .must(es_driver.match("title", "python"))
            .should(es_driver.match("body", "tutorial"))
            .must_not(es_driver.term({"status": "archived"}))
        )

        assert [d.role for d in builder.directives] == [
            BooleanRole.MUST, BooleanRole.SHOULD, BooleanRole.MUST_NOT
        ]

    def test_add_keeps_role(self, es_driver):
        builder = SearchBuilder(es_driver).add(es_driver.match("title", "x").should())
        assert builder.directives[0].role is BooleanRole.SHOULD

    def test_none_directives_are_skipped(self, null_driver):
        """Test directives from a disabled driver are dropped."""
        builder = SearchBuilder(null_driver).must(null_driver.match("title", "x")).add(None)
        assert builder.directives == []

    def test_get_runs_directives(self, es_driver, mock_search_client):
        SearchBuilder(es_driver).must_not(es_driver.term({"status": "archived"})).get("article")

        args, _ = mock_search_client.search.call_args
        inner = args[1]["query"]["bool"]["must"][0]
        assert inner == {"bool": {"must_not": [{"term": {"status": {"value": "archived"}}}]}}

    def test_paginate_passes_position(self, mock_driver):
        mock_driver.paginate.side_effect = None
        builder = SearchBuilder(mock_driver)

        builder.paginate("article", page=2, per_page=5, offset=7)

        mock_driver.paginate.assert_called_once_with("article", [], 2, 5, 7)


class TestSearchApplicationService:
    """Tests for SearchApplicationService."""

    def test_search_without_paging_uses_get(self, service, mock_driver):
        result = service.search("article", [])

        assert isinstance(result, ResultCollection)
        mock_driver.get.assert_called_once_with("article", [])
        mock_driver.paginate.assert_not_called()

    def test_search_filters_none(self, service, mock_driver):
        service.search("article", [None, None])
        mock_driver.get.assert_called_once_with("article", [])

    def test_search_with_page_paginates(self, service, mock_driver):
        """Test a page number switches to pagination with the default size."""
        result = service.search("article", [], page=2)

        assert isinstance(result, LengthAwarePaginator)
        mock_driver.paginate.assert_called_once_with("article", [], 2, 15)

    @pytest.mark.parametrize("per_page,expected", [
        (10, 10),
        (500, 50),
        (0, 15),
        (-3, 15),
    ])
    def test_page_size_limits(self, service, mock_driver, per_page, expected):
        """Test page sizes are clamped to the configured limits."""
        result = service.search("article", [], per_page=per_page)

        assert result.per_page == expected
        assert result.current_page == 1

    def test_page_floor(self, service, mock_driver):
        result = service.search("article", [], page=0, per_page=5)
        assert result.current_page == 1

    def test_is_enabled(self, service, null_driver):
        assert service.is_enabled()
        assert not SearchApplicationService(null_driver).is_enabled()

    def test_is_enabled_follows_driver(self, service, mock_driver):
        """Test any driver reporting itself disabled disables the service."""
        mock_driver.enabled = False
        assert not service.is_enabled()

    def test_ping(self, service, mock_driver, null_driver):
        assert service.ping() is True
        mock_driver.ping.assert_called_once_with()
        assert SearchApplicationService(null_driver).ping() is False

    def test_default_limits(self, mock_driver):
        service = SearchApplicationService(mock_driver)
        assert (service.default_per_page, service.max_per_page) == (15, 100)

    def test_builder_uses_driver(self, service, mock_driver):
        assert service.builder().driver is mock_driver

    def test_index_batches(self, service, mock_driver):
        """Test batches are sent one by one and counted."""
        count = service.index_batches("article", [{"1": {}, "2": {}}, {}, {"3": {}}])

        assert count == 3
        assert mock_driver.add_multiple.call_count == 2

    def test_delete_document(self, service, mock_driver):
        service.delete_document("article", "1")
        mock_driver.delete.assert_called_once_with("article", "1")
