"""
Tests for the command line interface.
"""

import json
import logging

import pytest
import yaml
from click.testing import CliRunner

from boolsearch.application.services import SearchApplicationService
from boolsearch.presentation.cli.formatters.output_formatter import OutputFormatter
from boolsearch.presentation.cli.main import cli
from boolsearch.shared.exceptions import BackendError, BackendUnavailableError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def es_obj(es_driver):
    return {
        "service": SearchApplicationService(es_driver, default_per_page=15, max_per_page=100),
        "formatter": OutputFormatter(use_rich=False)
    }


@pytest.fixture
def null_obj(null_driver):
    return {
        "service": SearchApplicationService(null_driver),
        "formatter": OutputFormatter(use_rich=False)
    }


class TestSearchCommand:
    """Tests for the search command."""

    def test_directives_are_composed(self, runner, es_obj, mock_search_client, article_hits, make_response):
        """Test bucket options become one compound query over the given types."""
        mock_search_client.search.return_value = make_response(article_hits[:2], total=2)

        result = runner.invoke(cli, [
            "search", "article",
            "--must", "match:title=python",
            "--must-not", "term:status=archived",
            "--should", "match:body=tutorial"
        ], obj=es_obj)

        assert result.exit_code == 0, result.output
        args, _ = mock_search_client.search.call_args
        assert args[1]["query"] == {
            "bool": {
                "must": [{
                    "bool": {
                        "must": [{"match": {"title": {"query": "python"}}}],
                        "should": [{"match": {"body": {"query": "tutorial"}}}],
                        "must_not": [{"term": {"status": {"value": "archived"}}}]
                    }
                }],
                "filter": [{"terms": {"type": ["article"]}}]
            }
        }
        assert "Search completed successfully" in result.output
        assert "2 of 2 hits" in result.output

    def test_json_output(self, runner, es_obj, mock_search_client, article_hits, make_response):
        mock_search_client.search.return_value = make_response(article_hits[:1], total=1, took=4)

        result = runner.invoke(cli, ["search", "article", "--json"], obj=es_obj)

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_hits"] == 1
        assert data["total_time"] == 4
        assert data["items"][0]["_id"] == "0"

    def test_pagination(self, runner, es_obj, mock_search_client, article_hits, make_response):
        """Test paging options request one page from the backend."""
        mock_search_client.search.return_value = make_response(article_hits[2:4], total=5)

        result = runner.invoke(cli, ["search", "article", "--page", "2", "--per-page", "2", "--json"], obj=es_obj)

        assert result.exit_code == 0, result.output
        _, kwargs = mock_search_client.search.call_args
        assert kwargs == {"from_": 2, "size": 2}
        data = json.loads(result.output)
        assert data["total"] == 5
        assert data["current_page"] == 2
        assert data["last_page"] == 3

    def test_no_results(self, runner, es_obj):
        result = runner.invoke(cli, ["search"], obj=es_obj)

        assert result.exit_code == 0
        assert "No results found" in result.output

    def test_invalid_directive(self, runner, es_obj, mock_search_client):
        result = runner.invoke(cli, ["search", "--must", "boost:title=x"], obj=es_obj)

        assert result.exit_code == 1
        assert "Invalid search" in result.output
        mock_search_client.search.assert_not_called()

    def test_backend_failure(self, runner, es_obj, mock_search_client):
        """Test backend errors are reported with their context."""
        mock_search_client.search.side_effect = BackendUnavailableError(
            "Elasticsearch unavailable during search", url="http://localhost:9200"
        )

        result = runner.invoke(cli, ["search", "article"], obj=es_obj)

        assert result.exit_code == 1
        assert "Search failed" in result.output
        assert "url=http://localhost:9200" in result.output

    def test_null_driver_returns_nothing(self, runner, null_obj):
        result = runner.invoke(cli, ["search", "article", "--must", "match:title=python", "--json"], obj=null_obj)

        assert result.exit_code == 0
        assert json.loads(result.output)["items"] == []


class TestIndexCommand:
    """Tests for the index command."""

    def test_index_csv(self, runner, es_obj, mock_search_client, tmp_path):
        path = tmp_path / "articles.csv"
        path.write_text("id,title\n1,Python\n2,Search\n")

        result = runner.invoke(cli, ["index", "article", str(path)], obj=es_obj)

        assert result.exit_code == 0, result.output
        assert "Sent 2 article documents" in result.output
        args, _ = mock_search_client.bulk_index.call_args
        assert args[1]["article:1"] == {"id": 1, "title": "Python", "type": "article"}

    def test_missing_id_column(self, runner, es_obj, tmp_path):
        path = tmp_path / "articles.csv"
        path.write_text("slug,title\na,Python\n")

        result = runner.invoke(cli, ["index", "article", str(path)], obj=es_obj)

        assert result.exit_code == 1
        assert "Could not read documents" in result.output

    def test_rejected_documents(self, runner, es_obj, mock_search_client, tmp_path):
        """Test documents rejected by the backend fail the command."""
        path = tmp_path / "articles.csv"
        path.write_text("id,title\n1,Python\n2,Search\n")
        mock_search_client.bulk_index.side_effect = BackendError(
            "Elasticsearch bulk rejected 1 of 2 documents",
            failed_ids=["article:2"],
            error_types=["mapper_parsing_exception"]
        )

        result = runner.invoke(cli, ["index", "article", str(path)], obj=es_obj)

        assert result.exit_code == 1
        assert "Indexing failed" in result.output
        assert "mapper_parsing_exception" in result.output
        assert "Sent" not in result.output


class TestOtherCommands:
    """Tests for delete and ping."""

    def test_delete(self, runner, es_obj, mock_search_client):
        result = runner.invoke(cli, ["delete", "article", "42"], obj=es_obj)

        assert result.exit_code == 0
        mock_search_client.delete_document.assert_called_once_with("articles", "article:42")
        assert "Deleted article document 42" in result.output

    def test_ping(self, runner, es_obj, mock_search_client):
        assert runner.invoke(cli, ["ping"], obj=es_obj).exit_code == 0

        mock_search_client.ping.return_value = False
        result = runner.invoke(cli, ["ping"], obj=es_obj)
        assert result.exit_code == 1
        assert "Backend unavailable" in result.output

    def test_ping_null_driver(self, runner, null_obj):
        result = runner.invoke(cli, ["ping"], obj=null_obj)

        assert result.exit_code == 0
        assert "Search is disabled" in result.output


@pytest.fixture
def restore_package_logger():
    """Undo the logging setup performed by the command group."""
    package_logger = logging.getLogger("boolsearch")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.mark.usefixtures("restore_package_logger")
class TestConfiguration:
    """Tests for building the service from configuration files."""

    def test_null_driver_from_config(self, runner, tmp_path, monkeypatch):
        """Test the configured driver is used when no service is injected."""
        for variable in ("SEARCH_DRIVER", "SEARCH_INDEX", "ELASTICSEARCH_URL", "ELASTICSEARCH_API_KEY",
                         "LOG_LEVEL", "LOG_FILE", "APP_ENV"):
            monkeypatch.delenv(variable, raising=False)
        (tmp_path / "base.yaml").write_text(yaml.safe_dump({
            "search": {"driver": "null"},
            "elasticsearch": {"url": "http://localhost:9200"},
            "logging": {"level": "WARNING", "format": "json"}
        }))

        result = runner.invoke(cli, ["--config-dir", str(tmp_path), "--plain", "ping"], obj={})

        assert result.exit_code == 0, result.output
        assert "Search is disabled" in result.output

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["--config-dir", str(tmp_path), "ping"], obj={})

        assert result.exit_code != 0
        assert "Configuration file not found" in result.output
