"""Google Gemini pass-through client for the chat proxy endpoint."""
# Standard library imports
import logging
from typing import Any, Callable, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import Settings
from ...core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Forwards a single user message to the Gemini text API.

    The upstream JSON is returned exactly as received. Every failure
    (network, non-2xx status, body that is not JSON) is reported as
    UpstreamError; there is no retry.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[[], httpx.AsyncClient],
    ) -> None:
        self.api_url = settings.gemini_api_url
        self.api_key = settings.gemini_api_key
        self._client_factory = client_factory

        if not self.api_key:
            logger.warning("GEMINI_API_KEY not found in environment variables")

    @staticmethod
    def build_payload(message: Optional[str]) -> Dict[str, Any]:
        """Wrap the message as the single prompt part of the request body"""
        return {"contents": [{"parts": [{"text": message}]}]}

    async def generate(self, message: Optional[str]) -> Any:
        """
        Send a message to Gemini and return its decoded JSON response

        Args:
            message: Free text prompt from the client

        Returns:
            The upstream JSON body, unmodified

        Raises:
            UpstreamError: If the call fails for any reason
        """
        client = self._client_factory()
        try:
            response = await client.post(
                self.api_url,
                params={"key": self.api_key},
                json=self.build_payload(message),
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Error calling Gemini API: {e.response.status_code} - {e.response.text}"
            )
            raise UpstreamError("Gemini API returned an error status", details=e.response.text)
        except httpx.HTTPError as e:
            logger.error(f"Error calling Gemini API: {e}")
            raise UpstreamError("Gemini API request failed", details=str(e))
        except ValueError as e:
            logger.error(f"Gemini API returned a non-JSON body: {e}")
            raise UpstreamError("Gemini API returned malformed JSON", details=str(e))
