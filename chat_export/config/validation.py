"""
Configuration validation for the chat export service.
"""

import re
from typing import List

from .settings import ExportConfig, RepositoryBackend


class ConfigValidator:
    """Validates configuration settings."""

    @staticmethod
    def validate_config(config: ExportConfig) -> List[str]:
        """Validate the entire service configuration."""
        errors = []

        errors.extend(ConfigValidator._validate_app_settings(config))
        errors.extend(ConfigValidator._validate_server_config(config))
        errors.extend(ConfigValidator._validate_repository_config(config))

        return errors

    @staticmethod
    def _validate_app_settings(config: ExportConfig) -> List[str]:
        errors = []

        if not config.app_name.strip():
            errors.append("Application name must not be empty")

        if not re.match(r'^https?://[^\s/]+', config.base_url):
            errors.append(f"Feed base URL must be an http(s) URL: {config.base_url}")

        return errors

    @staticmethod
    def _validate_server_config(config: ExportConfig) -> List[str]:
        """Validate HTTP server configuration."""
        errors = []

        server_config = config.server_config

        if not (1 <= server_config.port <= 65535):
            errors.append(f"Server port {server_config.port} is not in valid range (1-65535)")

        for origin in server_config.cors_origins:
            if not ConfigValidator._is_valid_url_or_wildcard(origin):
                errors.append(f"Invalid CORS origin: {origin}")

        return errors

    @staticmethod
    def _validate_repository_config(config: ExportConfig) -> List[str]:
        """Validate message store configuration."""
        errors = []

        repository_config = config.repository_config
        valid_backends = [backend.value for backend in RepositoryBackend]

        if repository_config.backend not in valid_backends:
            errors.append(
                f"Repository backend must be one of {valid_backends}, "
                f"got '{repository_config.backend}'"
            )

        if repository_config.timeout <= 0:
            errors.append("Repository timeout must be positive")

        if (repository_config.backend == RepositoryBackend.SQLITE.value
                and not repository_config.database_path):
            errors.append("Database path is required for the sqlite backend")

        return errors

    @staticmethod
    def _is_valid_url_or_wildcard(value: str) -> bool:
        """Check if value is a valid URL origin or the '*' wildcard."""
        if value == '*':
            return True
        return bool(re.match(r'^https?://[A-Za-z0-9.-]+(:\d+)?$', value))
