from .auth import (
    SignupAccountUseCase,
    LoginAccountUseCase,
    GetDashboardUseCase,
)
from .chat import ForwardMessageUseCase
from .health import PingDatabaseUseCase

__all__ = [
    "SignupAccountUseCase",
    "LoginAccountUseCase",
    "GetDashboardUseCase",
    "ForwardMessageUseCase",
    "PingDatabaseUseCase",
]
