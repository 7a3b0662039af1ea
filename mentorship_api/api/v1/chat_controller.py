# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.chat_dto import GeminiRequest
from ...application.use_cases.chat.forward_message import ForwardMessageUseCase
from ...di.container import DIContainer
from .dependencies import get_app_container
from .errors import ApiError

logger = logging.getLogger(__name__)


router = APIRouter(tags=["chat"])


@router.post("/gemini")
async def forward_to_gemini(
    request: GeminiRequest,
    container: DIContainer = Depends(get_app_container),
) -> JSONResponse:
    """
    Relay a chat message to Gemini

    Args:
        request: Body carrying the user's message

    Returns:
        The Gemini JSON response, unchanged
    """
    forward_use_case: ForwardMessageUseCase = container.get(ForwardMessageUseCase)

    try:
        upstream_body = await forward_use_case.execute(request)
    except Exception as e:
        logger.error(f"Error calling Gemini API: {e}", exc_info=True)
        raise ApiError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Error fetching response from Gemini API",
        )
    return JSONResponse(content=upstream_body)
