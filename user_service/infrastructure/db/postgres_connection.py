# Standard library imports
import logging

# External package imports
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Local application imports
from ...core.config import DatabaseConfig
from .schema import metadata

logger = logging.getLogger(__name__)


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """
    Create the async engine shared by every request

    Args:
        config: Database section of the settings

    Returns:
        AsyncEngine backed by a connection pool; no connection is opened yet
    """
    logger.info(
        f"Configuring database {config.dbname} at {config.host}:{config.port} "
        f"(sslmode={config.sslmode})"
    )
    return create_async_engine(
        config.url(),
        connect_args=config.connect_args(),
        pool_pre_ping=True,
        # Keep user emails out of logged driver errors
        hide_parameters=True,
    )


async def init_schema(engine: AsyncEngine) -> None:
    """
    Create the users table if the database does not contain it yet.

    Idempotent - safe to call on every startup.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    logger.info("DB schema ready")
