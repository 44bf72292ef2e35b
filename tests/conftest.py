"""
Test configuration and fixtures for boolsearch tests.
"""

import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig

from boolsearch.core.interfaces import SearchClientInterface
from boolsearch.infrastructure.drivers import ElasticsearchDriver, NullDriver


@pytest.fixture
def make_hit():
    """Factory for raw search hits."""
    def _make_hit(
        doc_id: str,
        source: Optional[Dict[str, Any]] = None,
        score: Optional[float] = 1.0,
        index: str = "articles"
    ) -> Dict[str, Any]:
        return {
            "_index": index,
            "_id": doc_id,
            "_score": score,
            "_source": source or {},
        }
    return _make_hit


@pytest.fixture
def make_response():
    """Factory for raw search responses."""
    def _make_response(
        hits: List[Dict[str, Any]],
        total: Optional[int] = None,
        max_score: Optional[float] = None,
        took: int = 3
    ) -> Dict[str, Any]:
        if max_score is None and hits:
            max_score = max(hit["_score"] or 0.0 for hit in hits)
        return {
            "took": took,
            "timed_out": False,
            "hits": {
                "total": {"value": len(hits) if total is None else total, "relation": "eq"},
                "max_score": max_score,
                "hits": hits,
            },
        }
    return _make_response


@pytest.fixture
def article_hits(make_hit) -> List[Dict[str, Any]]:
    """Five article hits in descending score order."""
    return [
        make_hit(str(i), {"title": f"Article {i}", "status": "published", "type": "article"}, score=5.0 - i)
        for i in range(5)
    ]


@pytest.fixture
def mock_search_client(make_response):
    """Mock search client returning an empty response by default."""
    client = Mock(spec=SearchClientInterface)
    client.search.return_value = make_response([])
    client.index_document.return_value = {"result": "created"}
    client.update_document.return_value = {"result": "updated"}
    client.delete_document.return_value = {"result": "deleted"}
    client.bulk_index.side_effect = lambda index, documents: {
        "success": len(documents),
        "errors": 0,
    }
    client.ping.return_value = True
    return client


@pytest.fixture
def es_driver(mock_search_client) -> ElasticsearchDriver:
    """Elasticsearch driver backed by the mock client."""
    return ElasticsearchDriver(mock_search_client, index="articles")


@pytest.fixture
def null_driver() -> NullDriver:
    return NullDriver()


@pytest.fixture
def mock_elasticsearch():
    """Mock of the official Elasticsearch client."""
    es = Mock()
    es.ping.return_value = True
    return es


@pytest.fixture
def api_error():
    """Factory for Elasticsearch API errors with a given HTTP status."""
    def _api_error(error_class, status: int, message: str = "error"):
        meta = ApiResponseMeta(
            status=status,
            http_version="1.1",
            headers=HttpHeaders(),
            duration=0.0,
            node=NodeConfig("http", "localhost", 9200),
        )
        return error_class(message, meta=meta, body={"error": {"type": message}})
    return _api_error
