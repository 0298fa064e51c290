from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.sql_user_repository import SqlUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the engine from database provider and creates repository instances.
        """
        engine = container.get("engine")

        # Domain interface -> Infrastructure implementation
        container.register_singleton(
            UserRepository,
            SqlUserRepository(engine=engine)
        )
