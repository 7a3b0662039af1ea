from typing import TYPE_CHECKING
from ...domain.models.account import AccountRole
from ...domain.repositories.account_repository import AccountRepository
from ...infrastructure.db.mongo_account_repository import MongoAccountRepository
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - one account repository per role"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register account repositories under (AccountRepository, role) keys.
        """
        connection = container.get(MongoConnection)

        for role in AccountRole:
            container.register_singleton(
                (AccountRepository, role),
                MongoAccountRepository(connection=connection, role=role)
            )
