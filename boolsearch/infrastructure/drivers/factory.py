"""
Driver factory.

This module selects and builds the search driver from configuration.
The choice is made once; callers only ever see the driver interface.
"""

from typing import Optional

from ...core.interfaces import DriverInterface
from ..config.environment_config import EnvironmentConfig
from ..database.elasticsearch.elasticsearch_client import ElasticsearchClient
from .elasticsearch_driver import ElasticsearchDriver
from .null_driver import NullDriver

ELASTICSEARCH = "elasticsearch"
NULL = "null"
SUPPORTED_DRIVERS = (ELASTICSEARCH, NULL)


class DriverFactory:
    """
    Factory for creating search drivers.

    Owns the backend client it creates and closes it on ``close``.
    """

    def __init__(
        self,
        config: Optional[EnvironmentConfig] = None
    ):
        """
        Initialize the factory.

        Args:
            config: Loaded configuration. If None, uses defaults.
        """
        self.config = config or EnvironmentConfig({})
        self._client: Optional[ElasticsearchClient] = None

    @property
    def client(self) -> ElasticsearchClient:
        """
        Get or create the Elasticsearch client.

        Returns:
            ElasticsearchClient: Backend client
        """
        if self._client is None:
            self._client = ElasticsearchClient(
                url=self.config.get_elasticsearch_url(),
                api_key=self.config.get_elasticsearch_api_key(),
                timeout_seconds=self.config.get_elasticsearch_timeout(),
                max_retries=self.config.get_elasticsearch_max_retries(),
                verify_certs=self.config.get_elasticsearch_verify_certs()
            )
        return self._client

    def create_driver(self, name: Optional[str] = None) -> DriverInterface:
        """
        Create a driver.

        Args:
            name: Driver name; defaults to ``search.driver``

        Returns:
            DriverInterface: Driver instance

        Raises:
            ValueError: If the driver name is not supported
        """
        name = (name or self.config.get_search_driver()).lower()

        if name == NULL:
            return NullDriver()
        elif name == ELASTICSEARCH:
            return ElasticsearchDriver(
                self.client,
                index=self.config.get_search_index(),
                type_field=self.config.get_type_field()
            )
        else:
            raise ValueError(f"Unsupported search driver: {name}")

    def close(self) -> None:
        """Close the backend client."""
        if self._client is not None:
            self._client.close()
            self._client = None
