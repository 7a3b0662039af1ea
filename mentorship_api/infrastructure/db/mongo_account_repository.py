# Standard library imports
import logging
from typing import Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.exceptions import DuplicateEmailError
from ...domain.repositories.account_repository import AccountRepository
from ...domain.models.account import Account, AccountRole
from ...domain.constants import AccountFields
from .mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


class MongoAccountRepository(AccountRepository):
    """MongoDB implementation of AccountRepository for a single role"""

    def __init__(self, connection: MongoConnection, role: AccountRole) -> None:
        self.connection = connection
        self.role = role

    @property
    def collection(self) -> AsyncIOMotorCollection:
        # Resolved per call so a missing MONGO_URI only fails the request that needs it
        return self.connection.get_account_collection(self.role)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find account by email address

        Args:
            email: Email address to search for

        Returns:
            Account domain model if found, None otherwise
        """
        if not email:
            return None

        document = await self.collection.find_one({AccountFields.EMAIL: email})
        if document is None:
            return None
        return self._document_to_account(document)

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        """
        Find account by ID

        Args:
            account_id: Hex ObjectId string

        Returns:
            Account domain model if found, None otherwise (also for malformed IDs)
        """
        if not account_id:
            return None

        try:
            object_id = ObjectId(account_id)
        except (InvalidId, TypeError):
            return None

        document = await self.collection.find_one({AccountFields.MONGO_ID: object_id})
        if document is None:
            return None
        return self._document_to_account(document)

    async def create(self, name: str, email: str, hashed_password: str) -> Account:
        """
        Insert a new account unless the email is already registered

        The find-then-insert pair is not atomic; the unique index on email
        catches whatever slips between the two calls.

        Raises:
            DuplicateEmailError: If the email is already taken for this role
        """
        if await self.collection.find_one({AccountFields.EMAIL: email}) is not None:
            raise DuplicateEmailError(f"{self.role.label} with email {email} already exists")

        document = {
            AccountFields.NAME: name,
            AccountFields.EMAIL: email,
            AccountFields.PASSWORD: hashed_password,
        }
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(
                f"{self.role.label} with email {email} already exists",
                details=str(e),
            )

        logger.info(f"Created {self.role.value} account {result.inserted_id}")
        return Account(
            id=str(result.inserted_id),
            name=name,
            email=email,
            hashed_password=hashed_password,
        )

    async def ensure_indexes(self) -> None:
        """Create the unique index on email for this role's collection"""
        await self.collection.create_index(AccountFields.EMAIL, unique=True)
        logger.info(f"Unique email index ensured for {self.role.value} accounts")

    def _document_to_account(self, document: dict) -> Account:
        """
        Convert MongoDB document to Account domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Account domain model
        """
        if not document or AccountFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Account(
            id=str(document[AccountFields.MONGO_ID]),
            name=document.get(AccountFields.NAME) or "",
            email=document.get(AccountFields.EMAIL, ""),
            hashed_password=document.get(AccountFields.PASSWORD, ""),
        )
