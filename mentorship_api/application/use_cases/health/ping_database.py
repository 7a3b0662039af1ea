from ....infrastructure.db.mongo_connection import MongoConnection
from ...dto.auth_dto import MessageResponse


class PingDatabaseUseCase:
    """Checks that the MongoDB server answers a ping"""

    def __init__(self, connection: MongoConnection) -> None:
        self.connection = connection

    async def execute(self) -> MessageResponse:
        await self.connection.ping()
        return MessageResponse(message="Database connected successfully")
