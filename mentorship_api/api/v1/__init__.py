from .auth_controller import router as auth_router
from .chat_controller import router as chat_router
from .health_controller import router as health_router
from .errors import ApiError, api_error_handler, request_validation_error_handler


__all__ = [
    "auth_router",
    "chat_router",
    "health_router",
    "ApiError",
    "api_error_handler",
    "request_validation_error_handler",
]
