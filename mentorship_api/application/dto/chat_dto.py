from typing import Optional

from pydantic import BaseModel


class GeminiRequest(BaseModel):
    """DTO for the Gemini proxy request"""
    message: Optional[str] = None
