"""
Configuration validator for validating configuration values.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Dict, Any, List
import re

SUPPORTED_DRIVERS = ("elasticsearch", "null")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "text")


class ConfigValidator:
    """
    Validator for configuration values.

    Collects every problem in the configuration and reports them
    together.
    """

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ValueError: If configuration is invalid
        """
        self.errors = []

        if "search" in config:
            self._validate_search_config(config["search"])

        if "elasticsearch" in config:
            self._validate_elasticsearch_config(config["elasticsearch"])

        if "logging" in config:
            self._validate_logging_config(config["logging"])

        if self.errors:
            raise ValueError("\n".join(self.errors))

    def _validate_search_config(self, config: Dict[str, Any]) -> None:
        """
        Validate search configuration.

        Args:
            config: Search configuration
        """
        if "driver" in config:
            driver = config["driver"]
            if not isinstance(driver, str) or driver.lower() not in SUPPORTED_DRIVERS:
                self.errors.append(
                    f"Search driver must be one of: {', '.join(SUPPORTED_DRIVERS)}"
                )

        for key in ("index", "type_field"):
            if key in config:
                value = config[key]
                if not isinstance(value, str) or not value:
                    self.errors.append(f"Search {key} must be a non-empty string")

        for key in ("default_per_page", "max_per_page"):
            if key in config:
                value = config[key]
                if not isinstance(value, int) or value <= 0:
                    self.errors.append(f"Search {key} must be a positive integer")

        default = config.get("default_per_page")
        maximum = config.get("max_per_page")
        if isinstance(default, int) and isinstance(maximum, int) and default > maximum:
            self.errors.append("Search default_per_page must not exceed max_per_page")

    def _validate_elasticsearch_config(self, config: Dict[str, Any]) -> None:
        """
        Validate Elasticsearch configuration.

        Args:
            config: Elasticsearch configuration
        """
        if "url" not in config:
            self.errors.append("Missing required elasticsearch field: url")
        else:
            url = config["url"]
            if not isinstance(url, str) or not url:
                self.errors.append("Elasticsearch URL must be a non-empty string")
            elif not re.match(r"^https?://", url):
                self.errors.append("Elasticsearch URL must start with http:// or https://")

        if config.get("api_key") is not None:
            api_key = config["api_key"]
            if not isinstance(api_key, str) or not api_key:
                self.errors.append("Elasticsearch API key must be a non-empty string")

        if "timeout_seconds" in config:
            timeout = config["timeout_seconds"]
            if not isinstance(timeout, (int, float)) or timeout <= 0:
                self.errors.append("Elasticsearch timeout must be a positive number")

        if "max_retries" in config:
            retries = config["max_retries"]
            if not isinstance(retries, int) or retries < 0:
                self.errors.append("Elasticsearch max_retries must be a non-negative integer")

        if "verify_certs" in config and not isinstance(config["verify_certs"], bool):
            self.errors.append("Elasticsearch verify_certs must be a boolean")

    def _validate_logging_config(self, config: Dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        if "level" in config:
            level = config["level"]
            if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(VALID_LOG_LEVELS)}"
                )

        if "format" in config:
            fmt = config["format"]
            if not isinstance(fmt, str) or fmt not in VALID_LOG_FORMATS:
                self.errors.append(
                    f"Logging format must be one of: {', '.join(VALID_LOG_FORMATS)}"
                )

        if config.get("file") is not None:
            file_path = config["file"]
            if not isinstance(file_path, str) or not file_path:
                self.errors.append("Logging file path must be a non-empty string")
