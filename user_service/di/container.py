# Standard library imports
from typing import Optional

# External package imports
from sqlalchemy.ext.asyncio import AsyncEngine

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database engine (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (UserProvider) - depend on repositories
    """

    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None) -> None:
        super().__init__()
        self.settings = settings
        self.setup(engine)

    def setup(self, engine: Optional[AsyncEngine] = None) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases

        Args:
            engine: Pre-built engine to use instead of one built from settings
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self, engine)
        RepositoryProvider.register(self)
        UserProvider.register(self)
