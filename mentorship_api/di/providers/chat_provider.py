from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.http_client_factory import HttpClientFactory
from ...infrastructure.external.gemini_client import GeminiClient
from ...application.use_cases.chat.forward_message import ForwardMessageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ChatProvider:
    """Chat proxy provider - registers the pooled HTTP client, the Gemini client and its use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        http_client_factory = HttpClientFactory()
        container.register_singleton(HttpClientFactory, http_client_factory)

        container.register_singleton(
            GeminiClient,
            GeminiClient(
                container.get(Settings),
                client_factory=http_client_factory.get,
            )
        )

        container.register_factory(
            ForwardMessageUseCase,
            lambda: ForwardMessageUseCase(
                gemini_client=container.get(GeminiClient)
            )
        )
