# Standard library imports
import logging

# External package imports
import uvicorn
from fastapi import FastAPI

# Local application imports
from .core.config import ServerConfig

logger = logging.getLogger(__name__)


class UserServiceServer:
    """
    HTTP listener for the user service.

    Wraps a uvicorn server around the FastAPI application. uvicorn installs
    SIGINT/SIGTERM handlers while serving; either signal, or a call to
    shutdown(), stops accepting connections and drains in-flight requests
    before the application lifespan closes the database pool.
    """

    def __init__(self, config: ServerConfig, app: FastAPI, log_level: str = "INFO") -> None:
        self.config = config
        self.app = app
        self._server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=int(config.port),
                log_level=log_level.lower(),
                log_config=None,
                lifespan="on",
                timeout_graceful_shutdown=config.shutdown_timeout,
            )
        )

    @property
    def started(self) -> bool:
        """Whether the listener has finished starting up"""
        return self._server.started

    async def serve(self) -> None:
        """
        Listen until shut down

        Raises:
            RuntimeError: If startup failed (e.g. database unreachable, port in use)
        """
        logger.info(f"starting server on {self.config.host}:{self.config.port}")
        await self._server.serve()
        if not self._server.started:
            raise RuntimeError("server failed to start")
        logger.info("server stopped")

    def shutdown(self, force: bool = False) -> None:
        """
        Ask the server to stop

        Args:
            force: Skip draining of in-flight requests
        """
        logger.info("server shutting down")
        self._server.should_exit = True
        if force:
            self._server.force_exit = True
