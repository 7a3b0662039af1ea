# Standard library imports
import logging
from dataclasses import dataclass

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, LoginRequest, MessageResponse, LoginResponse
from ...application.dto.account_dto import DashboardResponse
from ...application.use_cases.auth.signup_account import SignupAccountUseCase
from ...application.use_cases.auth.login_account import LoginAccountUseCase
from ...application.use_cases.auth.get_dashboard import GetDashboardUseCase
from ...core.exceptions import AccountNotFoundError, DuplicateEmailError, InvalidCredentialsError
from ...di.container import DIContainer
from ...domain.models.account import AccountRole
from .dependencies import get_app_container, get_current_account_id
from .errors import ApiError

logger = logging.getLogger(__name__)


router = APIRouter(tags=["authentication"])


@dataclass(frozen=True)
class RoleErrorTexts:
    """Error wording per role; mentee routes report under "message" instead of "error" """
    body_key: str
    duplicate_email: str
    signup_failed: str
    login_failed: str


ROLE_ERROR_TEXTS = {
    AccountRole.MENTOR: RoleErrorTexts(
        body_key="error",
        duplicate_email="Email already registered",
        signup_failed="Signup failed",
        login_failed="Login failed",
    ),
    AccountRole.MENTEE: RoleErrorTexts(
        body_key="message",
        duplicate_email="Mentee already exists",
        signup_failed="Error registering mentee",
        login_failed="Error logging in",
    ),
}


async def _signup(container: DIContainer, role: AccountRole, request: SignupRequest) -> MessageResponse:
    texts = ROLE_ERROR_TEXTS[role]
    signup_use_case: SignupAccountUseCase = container.get((SignupAccountUseCase, role))

    try:
        return await signup_use_case.execute(request)
    except DuplicateEmailError:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=texts.duplicate_email,
            body_key=texts.body_key,
        )
    except Exception as e:
        logger.error(f"{role.label} signup failed: {e}", exc_info=True)
        raise ApiError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=texts.signup_failed,
            body_key=texts.body_key,
            details=str(e),
        )


async def _login(container: DIContainer, role: AccountRole, request: LoginRequest) -> LoginResponse:
    texts = ROLE_ERROR_TEXTS[role]
    login_use_case: LoginAccountUseCase = container.get((LoginAccountUseCase, role))

    try:
        return await login_use_case.execute(request)
    except (AccountNotFoundError, InvalidCredentialsError) as e:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=e.message,
            body_key=texts.body_key,
        )
    except Exception as e:
        logger.error(f"{role.label} login failed: {e}", exc_info=True)
        raise ApiError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=texts.login_failed,
            body_key=texts.body_key,
            details=str(e),
        )


async def _dashboard(container: DIContainer, role: AccountRole, account_id: str) -> DashboardResponse:
    dashboard_use_case: GetDashboardUseCase = container.get((GetDashboardUseCase, role))

    try:
        return await dashboard_use_case.execute(account_id)
    except AccountNotFoundError as e:
        raise ApiError(status_code=status.HTTP_404_NOT_FOUND, message=e.message)
    except Exception as e:
        logger.error(f"{role.label} dashboard failed: {e}", exc_info=True)
        raise ApiError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Error retrieving dashboard",
            details=str(e),
        )


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def mentor_signup(
    request: SignupRequest,
    container: DIContainer = Depends(get_app_container),
) -> MessageResponse:
    """
    Register a new mentor

    Args:
        request: Mentor signup request

    Returns:
        MessageResponse confirming the registration
    """
    return await _signup(container, AccountRole.MENTOR, request)


@router.post("/login", response_model=LoginResponse)
async def mentor_login(
    request: LoginRequest,
    container: DIContainer = Depends(get_app_container),
) -> LoginResponse:
    """
    Authenticate a mentor and get a session token

    Args:
        request: Mentor login request

    Returns:
        LoginResponse with the token
    """
    return await _login(container, AccountRole.MENTOR, request)


@router.get("/mentor-dashboard", response_model=DashboardResponse)
async def mentor_dashboard(
    account_id: str = Depends(get_current_account_id),
    container: DIContainer = Depends(get_app_container),
) -> DashboardResponse:
    """
    Get the authenticated mentor's account

    Args:
        account_id: Account id from the verified token

    Returns:
        DashboardResponse with the account, password excluded
    """
    return await _dashboard(container, AccountRole.MENTOR, account_id)


@router.post("/mentee/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def mentee_signup(
    request: SignupRequest,
    container: DIContainer = Depends(get_app_container),
) -> MessageResponse:
    return await _signup(container, AccountRole.MENTEE, request)


@router.post("/mentee/login", response_model=LoginResponse)
async def mentee_login(
    request: LoginRequest,
    container: DIContainer = Depends(get_app_container),
) -> LoginResponse:
    return await _login(container, AccountRole.MENTEE, request)


@router.get("/mentee-dashboard", response_model=DashboardResponse)
async def mentee_dashboard(
    account_id: str = Depends(get_current_account_id),
    container: DIContainer = Depends(get_app_container),
) -> DashboardResponse:
    """
    Get the dashboard for a mentee token.

    The lookup goes to the mentor collection (see GetDashboardUseCase
    wiring in AuthProvider), so a genuine mentee normally gets 404.
    """
    return await _dashboard(container, AccountRole.MENTEE, account_id)
