# Local application imports
from ....domain.repositories.account_repository import AccountRepository
from ....core.exceptions import AccountNotFoundError
from ...dto.account_dto import AccountResponse, DashboardResponse


class GetDashboardUseCase:
    """
    Use case for reading the account behind a verified session token.

    Both dashboards are wired to the mentor repository, so a mentee token
    only resolves if a mentor happens to share its id.
    """

    def __init__(self, account_repository: AccountRepository, title: str) -> None:
        self.account_repository = account_repository
        self.title = title

    async def execute(self, account_id: str) -> DashboardResponse:
        """
        Load the account and shape the dashboard payload

        Args:
            account_id: Account id taken from the verified token

        Returns:
            DashboardResponse without any password field

        Raises:
            AccountNotFoundError: If the repository has no such account
        """
        account = await self.account_repository.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError("Mentor not found")

        return DashboardResponse(
            message=f"Welcome to {self.title} Dashboard",
            mentor=AccountResponse(
                id=account.id or "",
                name=account.name,
                email=account.email,
            ),
        )
