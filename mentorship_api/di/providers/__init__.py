from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .chat_provider import ChatProvider
from .health_provider import HealthProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "ChatProvider",
    "HealthProvider",
]
