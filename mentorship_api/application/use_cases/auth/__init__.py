from .signup_account import SignupAccountUseCase
from .login_account import LoginAccountUseCase
from .get_dashboard import GetDashboardUseCase

__all__ = [
    "SignupAccountUseCase",
    "LoginAccountUseCase",
    "GetDashboardUseCase",
]
