"""HTTP client factory for connection pooling."""
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """
    Owns the pooled AsyncClient shared by outbound calls.

    One instance lives in the DI container; the client is created on the
    first get() and closed by aclose() on application shutdown.
    """

    def __init__(self, http2: bool = True) -> None:
        self.http2 = http2
        self._client: Optional[httpx.AsyncClient] = None

    def get(self) -> httpx.AsyncClient:
        """
        Get or create the shared async HTTP client.

        No timeout is set; upstream calls wait as long as the server takes.

        Returns:
            Shared AsyncClient instance
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=None,
                limits=httpx.Limits(
                    max_keepalive_connections=20,
                    max_connections=100,
                    keepalive_expiry=30.0,
                ),
                http2=self.http2,
            )
            logger.info("Created shared HTTP client for connection pooling")

        return self._client

    async def aclose(self) -> None:
        """Close the shared client if one was created"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Closed shared HTTP client")
