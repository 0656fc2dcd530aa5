"""
Data access layer for the chat export service.
"""

import logging

from .base import ChatRepository
from .memory import InMemoryChatRepository
from .sqlite import SQLiteChatRepository
from ..config.settings import RepositoryConfig, RepositoryBackend

logger = logging.getLogger(__name__)


def create_repository(config: RepositoryConfig) -> ChatRepository:
    """Create the repository selected by configuration.

    The returned repository still needs ``await repository.connect()``.
    """
    if config.backend == RepositoryBackend.SQLITE.value:
        logger.info(f"Using SQLite message store: {config.database_path}")
        return SQLiteChatRepository(config.database_path)

    if config.seed_file:
        return InMemoryChatRepository.from_seed_file(config.seed_file)

    logger.warning("Using empty in-memory message store")
    return InMemoryChatRepository()


__all__ = [
    'ChatRepository',
    'InMemoryChatRepository',
    'SQLiteChatRepository',
    'create_repository',
]
