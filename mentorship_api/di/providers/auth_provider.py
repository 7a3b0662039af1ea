from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import TokenService
from ...domain.models.account import AccountRole
from ...domain.repositories.account_repository import AccountRepository
from ...application.use_cases.auth.signup_account import SignupAccountUseCase
from ...application.use_cases.auth.login_account import LoginAccountUseCase
from ...application.use_cases.auth.get_dashboard import GetDashboardUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers signup, login and dashboard use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the token service and the per-role use cases.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(TokenService, TokenService(container.get(Settings)))

        for role in AccountRole:
            container.register_factory(
                (SignupAccountUseCase, role),
                lambda role=role: SignupAccountUseCase(
                    account_repository=container.get((AccountRepository, role)),
                    role=role,
                )
            )

            container.register_factory(
                (LoginAccountUseCase, role),
                lambda role=role: LoginAccountUseCase(
                    account_repository=container.get((AccountRepository, role)),
                    token_service=container.get(TokenService),
                    role=role,
                )
            )

            # Both dashboards read the mentor collection, as the mentee
            # dashboard always has; see DESIGN.md before changing this.
            container.register_factory(
                (GetDashboardUseCase, role),
                lambda role=role: GetDashboardUseCase(
                    account_repository=container.get((AccountRepository, AccountRole.MENTOR)),
                    title=role.label,
                )
            )
