from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the DB handle"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the shared MongoDB connection.
        The client itself is opened lazily on the first query.
        """
        settings = container.get(Settings)
        container.register_singleton(MongoConnection, MongoConnection(settings))
