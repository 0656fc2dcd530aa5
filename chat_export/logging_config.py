"""
Logging setup for the chat export service.
"""

import logging
import sys

from .config.settings import LogLevel

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: LogLevel = LogLevel.INFO) -> None:
    """Send log records to stdout at the configured level."""
    logging.basicConfig(
        level=level.value,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )
