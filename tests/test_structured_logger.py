"""
Tests for structured logging and search error context.
"""

import io
import json
import logging

import pytest

from boolsearch.shared.exceptions import BackendError, SearchError
from boolsearch.shared.logging import LogLevel, StructuredLogger, configure_logging


@pytest.fixture
def stream():
    return io.StringIO()


def _entries(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_json_entries(self, stream):
        """Test messages are written as JSON lines with context."""
        logger = StructuredLogger("boolsearch.test.json", output=stream)
        logger.add_context(index="articles")

        logger.info("Search completed", hits=3)

        entry = _entries(stream)[0]
        assert entry["level"] == "INFO"
        assert entry["logger"] == "boolsearch.test.json"
        assert entry["message"] == "Search completed"
        assert entry["context"] == {"index": "articles", "hits": 3}

    def test_level_filtering(self, stream):
        logger = StructuredLogger("boolsearch.test.level", level=LogLevel.WARNING, output=stream)

        logger.info("hidden")
        logger.warning("shown")

        assert [e["message"] for e in _entries(stream)] == ["shown"]
        assert logger.get_level() is LogLevel.WARNING

    def test_levels_are_logging_level_names(self):
        """Test every level maps onto a standard logging level."""
        for level in LogLevel:
            assert logging.getLevelName(level.value) == getattr(logging, level.name)

    def test_exception_details(self, stream):
        logger = StructuredLogger("boolsearch.test.exception", output=stream)
        try:
            raise ValueError("bad value")
        except ValueError as e:
            logger.exception("Failed", exc_info=e)

        entry = _entries(stream)[0]
        assert entry["level"] == "ERROR"
        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "bad value"

    def test_context_management(self, stream):
        logger = StructuredLogger("boolsearch.test.context", output=stream)
        logger.add_context(request="abc")
        assert logger.get_context() == {"request": "abc"}
        logger.clear_context()
        assert logger.get_context() == {}

    def test_reconfiguring_replaces_handlers(self, stream):
        """Test configuring twice does not duplicate output."""
        configure_logging("boolsearch.test.reconfigure", output=io.StringIO())
        configure_logging("boolsearch.test.reconfigure", output=stream)

        logging.getLogger("boolsearch.test.reconfigure").info("once")

        assert len(_entries(stream)) == 1

    def test_child_loggers_use_format(self, stream):
        """Test module loggers below the configured name emit JSON."""
        configure_logging("boolsearch.test.parent", output=stream)

        logging.getLogger("boolsearch.test.parent.module").info("Indexed %d documents", 2)

        entry = _entries(stream)[0]
        assert entry["message"] == "Indexed 2 documents"
        assert entry["context"] == {}

    def test_text_format(self, stream):
        logger = StructuredLogger("boolsearch.test.text", output=stream, json_format=False)
        logger.info("plain message")
        assert "boolsearch.test.text - INFO - plain message" in stream.getvalue()


class TestSearchError:
    """Tests for search error context."""

    def test_context_data(self):
        error = SearchError("failed", operation="search", index="articles")

        assert error.cause is None
        assert error.context.error_type == "SearchError"
        assert error.context.error_message == "failed"
        assert error.context.context_data == {"operation": "search", "index": "articles"}

    def test_cause_stack_trace(self):
        """Test the stack trace of a raised cause is captured."""
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            error = BackendError("backend failed", status=503, cause=e)

        assert error.status == 503
        assert error.context.context_data["status"] == 503
        assert error.context.error_type == "BackendError"
        assert any("RuntimeError: boom" in line for line in error.context.stack_trace)

    def test_to_dict(self):
        data = SearchError("failed", index="articles").context.to_dict()
        assert data["error_type"] == "SearchError"
        assert data["context_data"] == {"index": "articles"}
        assert "timestamp" in data
