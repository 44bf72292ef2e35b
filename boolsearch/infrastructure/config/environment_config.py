"""
Environment configuration for environment-specific settings.

This module wraps the merged configuration and applies environment
variable overrides on top of it.
"""

from typing import Any, Dict, Optional
import os

# Environment variable -> (section, key)
ENVIRONMENT_OVERRIDES = {
    "ELASTICSEARCH_URL": ("elasticsearch", "url"),
    "ELASTICSEARCH_API_KEY": ("elasticsearch", "api_key"),
    "SEARCH_DRIVER": ("search", "driver"),
    "SEARCH_INDEX": ("search", "index"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "file"),
}


class EnvironmentConfig:
    """
    Environment-specific configuration.

    Provides typed accessors with defaults for every setting the
    application reads.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the configuration.

        Args:
            config: Merged configuration
        """
        self.config = config
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        for variable, (section, key) in ENVIRONMENT_OVERRIDES.items():
            if variable in os.environ:
                self.config.setdefault(section, {})[key] = os.environ[variable]

    def get(self, section: str, default: Any = None) -> Any:
        """Return a configuration section."""
        return self.config.get(section, default)

    def to_dict(self) -> Dict[str, Any]:
        return self.config

    def _section(self, name: str) -> Dict[str, Any]:
        return self.config.get(name) or {}

    def get_search_driver(self) -> str:
        return self._section("search").get("driver", "elasticsearch")

    def get_search_index(self) -> str:
        return self._section("search").get("index", "boolsearch")

    def get_type_field(self) -> str:
        return self._section("search").get("type_field", "type")

    def get_default_per_page(self) -> int:
        """
        Get the default page size.

        Returns:
            int: Default page size
        """
        return self._section("search").get("default_per_page", 15)

    def get_max_per_page(self) -> int:
        """
        Get the maximum page size.

        Returns:
            int: Maximum page size
        """
        return self._section("search").get("max_per_page", 100)

    def get_elasticsearch_url(self) -> str:
        return self._section("elasticsearch").get("url", "http://localhost:9200")

    def get_elasticsearch_api_key(self) -> Optional[str]:
        return self._section("elasticsearch").get("api_key")

    def get_elasticsearch_timeout(self) -> float:
        """
        Get the Elasticsearch request timeout.

        Returns:
            float: Timeout in seconds
        """
        return self._section("elasticsearch").get("timeout_seconds", 30.0)

    def get_elasticsearch_max_retries(self) -> int:
        return self._section("elasticsearch").get("max_retries", 0)

    def get_elasticsearch_verify_certs(self) -> bool:
        return self._section("elasticsearch").get("verify_certs", True)

    def get_log_level(self) -> str:
        return str(self._section("logging").get("level", "INFO")).upper()

    def get_log_format(self) -> str:
        return self._section("logging").get("format", "json")

    def get_log_file(self) -> Optional[str]:
        return self._section("logging").get("file")
