"""
boolsearch: compose boolean search queries from independent directives.

Typical use::

    from boolsearch import DriverFactory, SearchBuilder

    driver = DriverFactory(config).create_driver()
    results = (
        SearchBuilder(driver)
        .must(driver.match("title", "python"))
        .must_not(driver.term({"status": "archived"}))
        .get("article")
    )
"""

from .core.entities import (
    BooleanRole,
    QueryExpression,
    QueryDirective,
    CompoundQuery,
    Result,
    ResultCollection,
    LengthAwarePaginator
)
from .core.interfaces import DriverInterface, SearchClientInterface
from .domain.search import CompoundQueryBuilder, ResultMapper
from .infrastructure.drivers import DriverFactory, ElasticsearchDriver, NullDriver
from .application.search import SearchBuilder
from .application.services import SearchApplicationService

__version__ = "1.0.0"

__all__ = [
    'BooleanRole',
    'QueryExpression',
    'QueryDirective',
    'CompoundQuery',
    'Result',
    'ResultCollection',
    'LengthAwarePaginator',
    'DriverInterface',
    'SearchClientInterface',
    'CompoundQueryBuilder',
    'ResultMapper',
    'DriverFactory',
    'ElasticsearchDriver',
    'NullDriver',
    'SearchBuilder',
    'SearchApplicationService'
]
