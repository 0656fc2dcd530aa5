"""
Configuration module for the chat export service.
"""

from .settings import (
    ExportConfig, ServerConfig, RepositoryConfig, RepositoryBackend, LogLevel,
    FILENAME_DATE_FORMAT
)
from .environment import EnvironmentLoader
from .validation import ConfigValidator

__all__ = [
    'ExportConfig',
    'ServerConfig',
    'RepositoryConfig',
    'RepositoryBackend',
    'LogLevel',
    'FILENAME_DATE_FORMAT',
    'EnvironmentLoader',
    'ConfigValidator',
]
