# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up the Plant Share API, connects it to the database,
# and makes sure everything is ready to serve leaderboards and profiles to the mobile app.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with lifespan-managed logging and database setup,
# middleware stack, exception handlers producing the JSON error envelope, and router registration.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection and session managers)
# - app.api (middleware, v1 router)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application)

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import API_PREFIX, CURRENT_VERSION
from app.api.middleware.error_handling import (
    ErrorHandlingMiddleware,
    create_error_response,
    handle_validation_error,
    log_request_error,
)
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantShareException
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import initialize_sessions, session_manager
from app.shared.utils.logging import (
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Configures logging, opens the database connection pool and session
    factory on startup, and disposes of them on shutdown.
    """
    setup_logging()
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    try:
        await init_database()
        logger.info("✅ Database connection initialized")

        await initialize_sessions()
        logger.info("✅ Session manager initialized")

    except Exception as e:
        logger.critical(f"❌ Startup failed: {e}", exc_info=True)
        raise

    logger.info("✅ Plant Share API startup complete")

    try:
        yield

    finally:
        log_shutdown_event(settings.APP_NAME)
        session_manager.reset()
        await close_database()
        logger.info("✅ Database connections closed")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.ENABLE_SWAGGER_UI else None,
        redoc_url="/redoc" if settings.ENABLE_REDOC else None,
        openapi_url="/openapi.json" if (settings.ENABLE_SWAGGER_UI or settings.ENABLE_REDOC) else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Error handling middleware (outermost to catch all errors)
    app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix=f"{API_PREFIX}/{CURRENT_VERSION}")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PlantShareException)
    async def plant_share_exception_handler(request: Request, exc: PlantShareException) -> JSONResponse:
        """Handle custom Plant Share application exceptions."""
        request_id = getattr(request.state, "request_id", None)
        log_request_error(request, exc, request_id, exc.status_code)
        return create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
            request_id=request_id,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return handle_validation_error(exc, getattr(request.state, "request_id", None))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            code, message = "NOT_FOUND", "The requested resource was not found"
        else:
            code, message = f"HTTP_{exc.status_code}", str(exc.detail)

        return create_error_response(
            error_code=code,
            message=message,
            status_code=exc.status_code,
            details={"path": str(request.url.path)},
            request_id=getattr(request.state, "request_id", None),
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.ENABLE_SWAGGER_UI else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running `python -m app.main` or the `plant-share-api` script.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
