from .mongo_connection import MongoConnection, ACCOUNT_COLLECTIONS
from .mongo_account_repository import MongoAccountRepository

__all__ = [
    "MongoConnection",
    "ACCOUNT_COLLECTIONS",
    "MongoAccountRepository",
]
