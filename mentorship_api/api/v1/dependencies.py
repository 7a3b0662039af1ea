# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Header, Request, status

# Local application imports
from ...core.exceptions import InvalidTokenError, MissingTokenError
from ...core.security import TokenService
from ...di.container import DIContainer
from .errors import ApiError


def get_app_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the container the application was built with
    """
    return request.app.state.container


async def get_current_account_id(
    authorization: Optional[str] = Header(default=None),
    container: DIContainer = Depends(get_app_container),
) -> str:
    """
    FastAPI dependency guarding the dashboards

    The authorization header must hold the bare token; a "Bearer " prefix
    is not recognised and makes the token invalid.

    Args:
        authorization: Raw authorization header value
        container: Application DI container

    Returns:
        Account id carried by the token

    Raises:
        ApiError: 403 if no token was sent, 401 if it is invalid or expired
    """
    token_service: TokenService = container.get(TokenService)

    try:
        return token_service.verify(authorization)
    except MissingTokenError:
        raise ApiError(status_code=status.HTTP_403_FORBIDDEN, message="No token provided")
    except InvalidTokenError:
        raise ApiError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message="Unauthorized: Invalid token"
        )
