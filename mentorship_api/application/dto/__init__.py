from .auth_dto import SignupRequest, LoginRequest, MessageResponse, LoginResponse
from .account_dto import AccountResponse, DashboardResponse
from .chat_dto import GeminiRequest

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "MessageResponse",
    "LoginResponse",
    "AccountResponse",
    "DashboardResponse",
    "GeminiRequest",
]
