from .ping_database import PingDatabaseUseCase

__all__ = ["PingDatabaseUseCase"]
