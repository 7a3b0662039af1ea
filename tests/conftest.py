"""
Shared pytest fixtures for mentorship backend tests.
"""
import os
from typing import Dict, Optional
from unittest.mock import patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from mentorship_api.core.config import Settings
from mentorship_api.core.exceptions import DuplicateEmailError
from mentorship_api.di.container import DIContainer
from mentorship_api.domain.models.account import Account, AccountRole
from mentorship_api.domain.repositories.account_repository import AccountRepository


TEST_SECRET_KEY = "test_secret_key_for_testing_only"


class InMemoryAccountRepository(AccountRepository):
    """AccountRepository keeping accounts in a dict, keyed by ObjectId hex"""

    def __init__(self) -> None:
        self.accounts: Dict[str, Account] = {}

    async def find_by_email(self, email: str) -> Optional[Account]:
        for account in self.accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        return self.accounts.get(account_id)

    async def create(self, name: str, email: str, hashed_password: str) -> Account:
        if await self.find_by_email(email) is not None:
            raise DuplicateEmailError(f"{email} already exists")
        account = Account(
            id=str(ObjectId()),
            name=name,
            email=email,
            hashed_password=hashed_password,
        )
        self.accounts[account.id] = account
        return account


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables (MONGO_URI deliberately unset)."""
    env_vars = {
        "MONGO_DB_NAME": "test_mentorship_db",
        "SECRET_KEY": TEST_SECRET_KEY,
        "GEMINI_API_KEY": "test-gemini-key",
        "GEMINI_API_URL": "https://gemini.test/v1/models/gemini-pro:generateText",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        os.environ.pop("MONGO_URI", None)
        os.environ.pop("ACCESS_TOKEN_EXPIRE_MINUTES", None)
        yield env_vars


@pytest.fixture
def settings(mock_env):
    """Settings read from the patched environment."""
    return Settings()


@pytest.fixture
def mentor_repository():
    return InMemoryAccountRepository()


@pytest.fixture
def mentee_repository():
    return InMemoryAccountRepository()


@pytest.fixture
def container(settings, mentor_repository, mentee_repository):
    """Real container with in-memory account repositories swapped in."""
    container = DIContainer(settings)
    container.register_singleton((AccountRepository, AccountRole.MENTOR), mentor_repository)
    container.register_singleton((AccountRepository, AccountRole.MENTEE), mentee_repository)
    return container


@pytest.fixture
def client(container):
    """Test client running the full application lifespan against the container."""
    from mentorship_api.main import create_application

    with TestClient(create_application(container)) as c:
        yield c
