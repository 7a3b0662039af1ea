from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoConnection
from ...application.use_cases.health.ping_database import PingDatabaseUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class HealthProvider:
    """Health check provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            PingDatabaseUseCase,
            lambda: PingDatabaseUseCase(
                connection=container.get(MongoConnection)
            )
        )
