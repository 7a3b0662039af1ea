# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import MessageResponse
from ...application.use_cases.health.ping_database import PingDatabaseUseCase
from ...di.container import DIContainer
from .dependencies import get_app_container
from .errors import ApiError

logger = logging.getLogger(__name__)


router = APIRouter(tags=["health"])


@router.get("/test-db", response_model=MessageResponse)
async def test_database(container: DIContainer = Depends(get_app_container)) -> MessageResponse:
    """Ping MongoDB and report whether it answered"""
    ping_use_case: PingDatabaseUseCase = container.get(PingDatabaseUseCase)

    try:
        return await ping_use_case.execute()
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        raise ApiError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Database connection failed",
            details=str(e),
        )
