"""Command line entry point: load config, wire dependencies, serve."""

# Standard library imports
import asyncio
import logging
from typing import Optional

# External package imports
import click

# Local application imports
from .core.config import ConfigError, load_settings, resolve_config_path
from .core.logging import setup_logging
from .di.container import DIContainer
from .main import create_application
from .server import UserServiceServer

logger = logging.getLogger(__name__)


@click.command(name="userservice")
@click.option("-c", "--config", "config_path", default=None, help="Path to config file.")
def main(config_path: Optional[str]) -> None:
    """user service"""
    setup_logging()

    try:
        settings = load_settings(resolve_config_path(config_path))
    except ConfigError as e:
        logger.error(f"cannot load config: {e}")
        raise SystemExit(1)

    setup_logging(settings.logging.level)

    container = DIContainer(settings)
    application = create_application(container)
    microservice = UserServiceServer(settings.server, application, settings.logging.level)

    try:
        asyncio.run(microservice.serve())
    except Exception as e:
        logger.error(f"while running server: {e}", exc_info=True)
        raise SystemExit(1)
