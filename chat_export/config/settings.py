"""
Configuration settings for the chat export service.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RepositoryBackend(str, Enum):
    """Message store implementations."""
    MEMORY = "memory"
    SQLITE = "sqlite"


# strftime pattern for timestamps embedded in download filenames. %z writes a
# four digit offset (+0000) where legacy exports used two digits (+00).
FILENAME_DATE_FORMAT = "%Y-%m-%d.%H%M%S%z"

DEFAULT_APP_NAME = "JabbR"
DEFAULT_BASE_URL = "http://jabbr.net"


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = field(default_factory=list)


@dataclass
class RepositoryConfig:
    """Message store configuration."""
    backend: str = RepositoryBackend.MEMORY.value
    database_path: str = "data/chat.db"
    seed_file: Optional[str] = None
    timeout: float = 10.0


@dataclass
class ExportConfig:
    """Top-level service configuration."""
    app_name: str = DEFAULT_APP_NAME
    base_url: str = DEFAULT_BASE_URL
    server_config: ServerConfig = field(default_factory=ServerConfig)
    repository_config: RepositoryConfig = field(default_factory=RepositoryConfig)
    log_level: LogLevel = LogLevel.INFO
    filename_date_format: str = FILENAME_DATE_FORMAT
