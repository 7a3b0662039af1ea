# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings
from ...core.exceptions import DatabaseNotConfiguredError
from ...domain.models.account import AccountRole

logger = logging.getLogger(__name__)


ACCOUNT_COLLECTIONS = {
    AccountRole.MENTOR: "mentors",
    AccountRole.MENTEE: "mentees",
}


class MongoConnection:
    """
    Long-lived MongoDB handle shared by every request.

    The client is opened on first use, so a missing MONGO_URI does not stop
    the application from starting; queries fail with
    DatabaseNotConfiguredError instead.
    """

    def __init__(self, settings: Settings) -> None:
        self.mongo_uri = settings.mongo_uri
        self.database_name = settings.mongo_database_name
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    def get_database(self) -> AsyncIOMotorDatabase:
        """
        Get MongoDB database instance, connecting on first call

        Returns:
            MongoDB database instance

        Raises:
            DatabaseNotConfiguredError: If MONGO_URI is not set
        """
        if self._database is not None:
            return self._database

        if not self.mongo_uri:
            raise DatabaseNotConfiguredError("MONGO_URI is not configured")

        self._client = AsyncIOMotorClient(self.mongo_uri)
        # A database named in the URI wins over MONGO_DB_NAME
        self._database = self._client.get_default_database(self.database_name)
        logger.info(f"MongoDB client created for database '{self._database.name}'")
        return self._database

    def get_collection(self, name: str) -> AsyncIOMotorCollection:
        """Get a collection by name from the configured database"""
        return self.get_database()[name]

    def get_account_collection(self, role: AccountRole) -> AsyncIOMotorCollection:
        """Get the accounts collection backing a role"""
        return self.get_collection(ACCOUNT_COLLECTIONS[role])

    async def ping(self) -> None:
        """Round-trip a ping command to the server"""
        await self.get_database().command("ping")

    def close(self) -> None:
        """Close the client if it was ever opened"""
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB client closed")
        self._client = None
        self._database = None
