from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from ...core.config import Settings
from ...infrastructure.db.postgres_connection import create_db_engine

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the engine"""

    @staticmethod
    def register(container: "BaseContainer", engine: Optional[AsyncEngine] = None) -> None:
        """
        Register the shared async engine in the container.
        This is the ONLY place where the database connection is registered.
        """
        if engine is None:
            settings = container.get(Settings)
            engine = create_db_engine(settings.database)

        container.register_singleton("engine", engine)
