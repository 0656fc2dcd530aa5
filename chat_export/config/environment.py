"""
Environment variable handling for chat export configuration.
"""

import os
from typing import List

from dotenv import load_dotenv

from .settings import (
    ExportConfig, ServerConfig, RepositoryConfig, LogLevel,
    DEFAULT_APP_NAME, DEFAULT_BASE_URL
)


class EnvironmentLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load_config(use_dotenv: bool = True) -> ExportConfig:
        """Load configuration from environment variables."""
        if use_dotenv:
            # Values already present in the environment win over .env
            load_dotenv(override=False)

        server_config = ServerConfig(
            host=os.getenv('SERVER_HOST', '0.0.0.0'),
            port=int(os.getenv('SERVER_PORT', '8080')),
            cors_origins=EnvironmentLoader._parse_list(os.getenv('CORS_ORIGINS', ''))
        )

        repository_config = RepositoryConfig(
            backend=os.getenv('REPOSITORY_BACKEND', 'memory').strip().lower(),
            database_path=os.getenv('DATABASE_PATH', 'data/chat.db'),
            seed_file=os.getenv('SEED_FILE') or None,
            timeout=float(os.getenv('REPOSITORY_TIMEOUT', '10'))
        )

        log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
        log_level = LogLevel.INFO
        try:
            log_level = LogLevel(log_level_str)
        except ValueError:
            pass  # Use default

        return ExportConfig(
            app_name=os.getenv('APP_NAME', DEFAULT_APP_NAME),
            base_url=os.getenv('FEED_BASE_URL', DEFAULT_BASE_URL),
            server_config=server_config,
            repository_config=repository_config,
            log_level=log_level
        )

    @staticmethod
    def _parse_list(value: str, delimiter: str = ',') -> List[str]:
        """Parse a comma-separated string into a list."""
        if not value:
            return []
        return [item.strip() for item in value.split(delimiter) if item.strip()]
