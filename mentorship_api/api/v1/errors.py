# Standard library imports
from typing import Any, Optional

# External package imports
from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(HTTPException):
    """
    HTTPException whose body is a flat JSON object.

    body_key selects the field carrying the text ("error" for most routes,
    "message" for the mentee routes); details is added when present.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        body_key: str = "error",
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.body_key = body_key
        self.details = details

    def to_body(self) -> dict:
        body: dict = {self.body_key: self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


async def api_error_handler(request: Request, exception: ApiError) -> JSONResponse:
    """Render an ApiError raised by a controller or dependency"""
    return JSONResponse(status_code=exception.status_code, content=exception.to_body())


async def request_validation_error_handler(
    request: Request, exception: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of FastAPI's 422"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request body",
            "details": jsonable_encoder(exception.errors()),
        },
    )
