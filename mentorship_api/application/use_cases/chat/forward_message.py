from typing import Any

from ....infrastructure.external.gemini_client import GeminiClient
from ...dto.chat_dto import GeminiRequest


class ForwardMessageUseCase:
    """Relays a chat message to Gemini and hands back the raw response"""

    def __init__(self, gemini_client: GeminiClient) -> None:
        self.gemini_client = gemini_client

    async def execute(self, request: GeminiRequest) -> Any:
        return await self.gemini_client.generate(request.message)
