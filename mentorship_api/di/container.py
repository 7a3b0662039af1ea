# Standard library imports
import logging
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from ..domain.models.account import AccountRole
from ..domain.repositories.account_repository import AccountRepository
from ..infrastructure.db.mongo_connection import MongoConnection
from ..infrastructure.http_client_factory import HttpClientFactory
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    ChatProvider,
    DatabaseProvider,
    HealthProvider,
    RepositoryProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings (passed in, or read from the environment)
    2. Database connection (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depend on the connection
    4. Use cases (AuthProvider, ChatProvider, HealthProvider)
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self)
        RepositoryProvider.register(self)

        AuthProvider.register(self)
        ChatProvider.register(self)
        HealthProvider.register(self)

    async def ensure_indexes(self) -> None:
        """
        Ask every account repository to create its storage constraints

        Each role is attempted on its own; a failure is logged and does not
        stop the next role.
        """
        for role in AccountRole:
            try:
                await self.get((AccountRepository, role)).ensure_indexes()
            except Exception as e:
                logger.error(f"MongoDB connection error, {role.value} email index not ensured: {e}")

    async def aclose(self) -> None:
        """Release the shared HTTP client and the MongoDB client"""
        if self.has(HttpClientFactory):
            await self.get(HttpClientFactory).aclose()
        if self.has(MongoConnection):
            self.get(MongoConnection).close()


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
