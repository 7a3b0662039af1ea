from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AccountRole(str, Enum):
    """The two kinds of account, each kept in its own collection"""
    MENTOR = "mentor"
    MENTEE = "mentee"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass
class Account:
    """Pure domain model for a mentor or mentee account - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str

    def __post_init__(self):
        """Business validations"""
        if not self.email:
            raise ValueError("Email is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
