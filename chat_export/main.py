"""
Main application entry point for the chat export service.

Loads configuration, opens the message store and serves the export API
until interrupted.
"""

import asyncio
import logging
import signal
from typing import Optional

from .config import ConfigValidator, EnvironmentLoader, ExportConfig
from .data import create_repository
from .logging_config import configure_logging
from .server import ExportServer

logger = logging.getLogger(__name__)


class ChatExportApp:
    """Wires configuration, repository and HTTP server together."""

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config
        self.server: Optional[ExportServer] = None

    def initialize(self) -> None:
        """Load and validate configuration, then build the server."""
        if self.config is None:
            self.config = EnvironmentLoader.load_config()

        configure_logging(self.config.log_level)

        errors = ConfigValidator.validate_config(self.config)
        if errors:
            for error in errors:
                logger.error(f"Configuration error: {error}")
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

        repository = create_repository(self.config.repository_config)
        self.server = ExportServer(self.config, repository)
        logger.info("Chat export service initialized")

    async def start(self) -> None:
        """Run the server until it exits or a stop signal arrives."""
        if self.server is None:
            self.initialize()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, lambda: asyncio.create_task(self.stop()))
            except NotImplementedError:
                # Signal handlers are unavailable on some platforms
                pass

        await self.server.start_server()
        await self.server.wait()

    async def stop(self) -> None:
        if self.server is not None:
            await self.server.stop_server()


async def main() -> None:
    app = ChatExportApp()
    await app.start()
