"""
Integration tests for application startup and shutdown.
"""
import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from mentorship_api.main import create_application

pytestmark = pytest.mark.integration


class TestLifespan:
    """Index creation must never hold up or break serving"""

    def test_serves_while_index_creation_hangs(self, container, mentor_repository, mentee_repository):
        async def never_finishes():
            await asyncio.Event().wait()

        mentor_repository.ensure_indexes = never_finishes
        mentee_repository.ensure_indexes = AsyncMock()

        with TestClient(create_application(container)) as client:
            response = client.post(
                "/signup", json={"name": "A", "email": "a@example.com", "password": "p"}
            )

        assert response.status_code == 201

    def test_serves_when_index_creation_fails(self, container, mentor_repository, mentee_repository):
        mentor_repository.ensure_indexes = AsyncMock(side_effect=RuntimeError("no server"))
        mentee_repository.ensure_indexes = AsyncMock()

        with TestClient(create_application(container)) as client:
            response = client.post(
                "/mentee/signup", json={"name": "M", "email": "m@example.com", "password": "p"}
            )
            assert response.status_code == 201

        mentee_repository.ensure_indexes.assert_awaited_once()
