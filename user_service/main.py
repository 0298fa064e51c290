# Standard library imports
from contextlib import asynccontextmanager
import logging

# External package imports
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import user_router
from .application.dto.user_dto import ErrorResponse
from .di.container import DIContainer
from .infrastructure.db.postgres_connection import init_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the users table if missing before serving, and releases the
    connection pool once uvicorn has drained in-flight requests.
    """
    engine = app.state.container.get("engine")

    try:
        await init_schema(engine)
    except Exception as e:
        logger.error(f"Failed to initialize database schema: {e}", exc_info=True)
        await engine.dispose()
        raise

    yield

    await engine.dispose()
    logger.info("Application shutdown complete")


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": message}"""
    return JSONResponse(
        status_code=exception.status_code,
        content=ErrorResponse(error=str(exception.detail)).model_dump(),
        headers=getattr(exception, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    """Render unexpected failures as a generic {"error": "internal error"}"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="internal error").model_dump(),
    )


def create_application(container: DIContainer) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - The DI container on app.state
    - {"error": ...} rendering for HTTP errors and unexpected failures
    - API route registration

    Args:
        container: Container holding the engine, repository and use cases

    Returns:
        Configured FastAPI application instance
    """
    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="CRUD service for user records",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(user_router, prefix="/users")

    return application
