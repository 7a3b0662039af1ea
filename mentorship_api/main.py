# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import (
    ApiError,
    api_error_handler,
    auth_router,
    chat_router,
    health_router,
    request_validation_error_handler,
)
from .di.container import DIContainer, get_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Reports missing configuration and starts creating the unique email
    indexes in the background, so an unreachable MongoDB never delays
    serving. Neither step stops the application; the affected routes fail
    on use.
    """
    container: DIContainer = app.state.container

    for problem in container.settings.configuration_problems():
        logger.error(f"Configuration problem: {problem}")

    index_task = asyncio.create_task(container.ensure_indexes())

    yield

    if not index_task.done():
        index_task.cancel()
        try:
            await index_task
        except asyncio.CancelledError:
            pass
        logger.info("Index creation task cancelled")

    try:
        await container.aclose()
    except Exception as e:
        logger.error(f"Error releasing resources during shutdown: {e}", exc_info=True)

    logger.info("Application shutdown complete")


def create_application(container: Optional[DIContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - The DI container (built from the environment unless one is given)
    - CORS middleware configuration
    - Error rendering and API route registration

    Args:
        container: Pre-built container, mainly for tests

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    if container is None:
        container = get_container()

    application = FastAPI(
        title="Mentorship Backend API",
        version="1.0.0",
        description="Mentor and mentee accounts with a Gemini chat proxy",
        lifespan=lifespan
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=container.settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(ApiError, api_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)

    application.include_router(auth_router)
    application.include_router(chat_router, prefix="/api")
    application.include_router(health_router)

    return application


# Create application instance
app = create_application()
