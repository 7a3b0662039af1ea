"""External service clients for communicating with external systems"""

from .gemini_client import GeminiClient

__all__ = [
    "GeminiClient",
]
