"""
FastAPI server for the chat export service.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from . import __version__
from .api import router as export_router
from .config.settings import ExportConfig
from .data.base import ChatRepository
from .export.dispatcher import RequestDispatcher
from .export.schemas import HealthResponse

logger = logging.getLogger(__name__)


class ExportServer:
    """FastAPI server exposing the message export endpoint."""

    def __init__(self,
                 config: ExportConfig,
                 repository: ChatRepository,
                 clock: Optional[Callable[[], datetime]] = None):
        """Initialize export server.

        Args:
            config: Service configuration
            repository: Message store the endpoint reads from
            clock: Optional time source for the dispatcher
        """
        self.config = config
        self.repository = repository
        self.dispatcher = RequestDispatcher(repository, config, clock=clock)
        self.server: Optional[uvicorn.Server] = None
        self._server_task: Optional[asyncio.Task] = None

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            # Startup
            logger.info("Export server starting up")
            await self.repository.connect()

            yield

            # Shutdown
            await self.repository.disconnect()
            logger.info("Export server shutting down")

        self.app = FastAPI(
            title=f"{config.app_name} Message Export API",
            description="Read-only export of chat room history as JSON or RSS",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
            lifespan=lifespan
        )
        self.app.state.dispatcher = self.dispatcher

        self._setup_middleware()
        self._setup_routes()
        self._setup_error_handlers()

    def _setup_middleware(self) -> None:
        """Configure FastAPI middleware."""
        cors_origins = list(self.config.server_config.cors_origins)
        if cors_origins:
            logger.info(f"CORS allowed origins: {cors_origins}")
            self.app.add_middleware(
                CORSMiddleware,
                allow_origins=cors_origins,
                allow_credentials=False,
                allow_methods=["GET", "OPTIONS"],
                allow_headers=["*"],
                expose_headers=["Content-Disposition"]
            )

        self.app.add_middleware(GZipMiddleware, minimum_size=1000)

    def _setup_routes(self) -> None:
        """Configure API routes."""

        @self.app.get("/health", tags=["Health"], response_model=HealthResponse)
        async def health_check():
            """Check API health status."""
            return HealthResponse(status="healthy", version=__version__)

        self.app.include_router(export_router, tags=["Messages"])

    def _setup_error_handlers(self) -> None:
        """Configure global error handlers."""

        @self.app.exception_handler(Exception)
        async def general_error_handler(request: Request, exc: Exception):
            """Handle unexpected errors."""
            logger.error(f"Unhandled error serving {request.url.path}: {exc}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"message": "An unexpected error occurred"}
            )

    async def start_server(self) -> None:
        """Start the server in a background task."""
        if self._server_task is not None:
            logger.warning("Export server already running")
            return

        host = self.config.server_config.host
        port = self.config.server_config.port

        logger.info(f"Starting export server on {host}:{port}")

        server_config = uvicorn.Config(
            app=self.app,
            host=host,
            port=port,
            log_level=self.config.log_level.value.lower(),
            access_log=True,
            loop="asyncio"
        )
        self.server = uvicorn.Server(server_config)
        self._server_task = asyncio.create_task(self.server.serve())

        logger.info(f"API docs available at http://{host}:{port}/docs")

    async def wait(self) -> None:
        """Block until the running server exits."""
        if self._server_task is not None:
            await self._server_task

    async def stop_server(self) -> None:
        """Stop the server gracefully."""
        if self.server is None:
            logger.warning("Export server not running")
            return

        logger.info("Stopping export server...")
        self.server.should_exit = True

        if self._server_task:
            try:
                await asyncio.wait_for(self._server_task, timeout=10.0)
            except asyncio.TimeoutError:
                logger.warning("Server shutdown timed out, cancelling task")
                self._server_task.cancel()
                try:
                    await self._server_task
                except asyncio.CancelledError:
                    pass

        self.server = None
        self._server_task = None

        logger.info("Export server stopped")

    def get_app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self.app


def create_app(config: ExportConfig,
               repository: ChatRepository,
               clock: Optional[Callable[[], datetime]] = None) -> FastAPI:
    """Build the FastAPI application for a repository."""
    return ExportServer(config, repository, clock=clock).get_app()
