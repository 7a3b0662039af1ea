# Local application imports
from ....domain.repositories.account_repository import AccountRepository
from ....domain.models.account import AccountRole
from ....core.exceptions import AccountNotFoundError, InvalidCredentialsError
from ....core.security import TokenService, verify_password
from ...dto.auth_dto import LoginRequest, LoginResponse


class LoginAccountUseCase:
    """Use case for authenticating an account and issuing a session token"""

    def __init__(
        self,
        account_repository: AccountRepository,
        token_service: TokenService,
        role: AccountRole,
    ) -> None:
        self.account_repository = account_repository
        self.token_service = token_service
        self.role = role

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate an account and generate its session token

        Args:
            request: Login request with email and password

        Returns:
            LoginResponse carrying the token

        Raises:
            AccountNotFoundError: If no account has this email
            InvalidCredentialsError: If the password does not match
        """
        account = await self.account_repository.find_by_email(request.email)
        if account is None:
            raise AccountNotFoundError(f"{self.role.label} not found")

        if not verify_password(request.password, account.hashed_password):
            raise InvalidCredentialsError("Invalid credentials")

        token = self.token_service.issue(account.id or "")
        return LoginResponse(token=token)
