# Local application imports
from ....domain.repositories.account_repository import AccountRepository
from ....domain.models.account import AccountRole
from ....core.security import hash_password
from ...dto.auth_dto import SignupRequest, MessageResponse


SIGNUP_MESSAGES = {
    AccountRole.MENTOR: "Mentor registered successfully",
    AccountRole.MENTEE: "Mentee registered successfully!",
}


class SignupAccountUseCase:
    """Use case for registering a new mentor or mentee"""

    def __init__(self, account_repository: AccountRepository, role: AccountRole) -> None:
        self.account_repository = account_repository
        self.role = role

    async def execute(self, request: SignupRequest) -> MessageResponse:
        """
        Register a new account for this use case's role

        Args:
            request: Signup request with name, email and password

        Returns:
            MessageResponse confirming the registration

        Raises:
            DuplicateEmailError: If the email is already registered for the role
        """
        hashed_password = hash_password(request.password)

        await self.account_repository.create(
            name=request.name,
            email=request.email,
            hashed_password=hashed_password,
        )

        return MessageResponse(message=SIGNUP_MESSAGES[self.role])
