from abc import ABC, abstractmethod
from typing import Optional
from ..models.account import Account


class AccountRepository(ABC):
    """Repository interface - defines contract for one role's account storage"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find account by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, account_id: str) -> Optional[Account]:
        """Find account by ID"""
        pass

    @abstractmethod
    async def create(self, name: str, email: str, hashed_password: str) -> Account:
        """
        Create an account, refusing duplicates.

        Duplicate detection and insertion belong to this single operation so
        implementations can make it atomic.

        Raises:
            DuplicateEmailError: If the email is already taken for this role
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create storage-level constraints (unique email). No-op by default."""
        return None
