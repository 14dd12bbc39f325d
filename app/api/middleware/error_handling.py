# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches any errors that happen while answering a request and turns them into friendly, consistent
# error messages, so the app always gets the same error shape back
# 🧪 Purpose (Technical Summary):
# Global error handling middleware and helpers producing the JSON error envelope
# {"error": {code, message, details, timestamp, request_id}} with request correlation and leveled logging
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, app.shared.utils.logging, uuid
# 🔄 Connected Modules / Calls From:
# app.main (middleware and exception handler registration)

import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import DatabaseError, PlantShareException
from app.shared.utils.logging import get_logger
from . import COMMON_HEADERS, get_middleware_config

logger = get_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the Plant Share API

    Assigns every request a correlation id, and converts exceptions that
    escape the route handlers into the standard JSON error envelope.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()
        self.include_traceback = get_middleware_config("error_handling").get("include_traceback", False)

        # Status codes for exceptions that are not PlantShareException/HTTPException
        self.error_status_map = {
            ValueError: 400,
            ConnectionError: 503,
            TimeoutError: 504,
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any exceptions that occur

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = request.headers.get(COMMON_HEADERS["REQUEST_ID"].lower()) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = datetime.now(timezone.utc)

        try:
            response = await call_next(request)

        except Exception as exc:
            return self._handle_exception(request, exc, request_id, start_time)

        processing_time = (datetime.now(timezone.utc) - start_time).total_seconds()
        response.headers[COMMON_HEADERS["REQUEST_ID"]] = request_id
        response.headers[COMMON_HEADERS["RESPONSE_TIME"]] = f"{processing_time:.3f}s"
        return response

    def _handle_exception(
        self,
        request: Request,
        exc: Exception,
        request_id: str,
        start_time: datetime
    ) -> JSONResponse:
        status_code = self._get_status_code(exc)
        error_code, error_message, error_details = get_error_info(exc)

        log_request_error(request, exc, request_id, status_code)

        if self.include_traceback and self.settings.DEBUG and not self.settings.is_production:
            error_details = {
                **error_details,
                "debug": {
                    "exception_type": type(exc).__name__,
                    "traceback": traceback.format_exc().split("\n"),
                },
            }

        response = create_error_response(
            error_code=error_code,
            message=error_message,
            status_code=status_code,
            details=error_details,
            request_id=request_id,
        )
        processing_time = (datetime.now(timezone.utc) - start_time).total_seconds()
        response.headers[COMMON_HEADERS["RESPONSE_TIME"]] = f"{processing_time:.3f}s"
        return response

    def _get_status_code(self, exc: Exception) -> int:
        if isinstance(exc, (HTTPException, PlantShareException)):
            return exc.status_code

        for exc_type, status_code in self.error_status_map.items():
            if isinstance(exc, exc_type):
                return status_code

        return 500


def get_error_info(exc: Exception) -> Tuple[str, str, Dict[str, Any]]:
    """
    Extract error information from exception

    Args:
        exc: Exception instance

    Returns:
        Tuple of (error_code, error_message, error_details)
    """
    if isinstance(exc, PlantShareException):
        return exc.error_code, exc.message, exc.details or {}

    if isinstance(exc, HTTPException):
        return f"HTTP_{exc.status_code}", str(exc.detail), {}

    return (
        "INTERNAL_SERVER_ERROR",
        "An internal server error occurred",
        {"exception_type": type(exc).__name__},
    )


def log_request_error(request: Request, exc: Exception, request_id: str, status_code: int) -> None:
    """
    Log error with appropriate level and context

    Server errors are logged with traceback, client errors at info level.
    """
    log_data = {
        "request_id": request_id,
        "method": request.method,
        "path": str(request.url.path),
        "query_params": str(request.query_params) if request.query_params else None,
        "status_code": status_code,
        "exception_type": type(exc).__name__,
        "exception_message": str(exc),
    }

    if isinstance(exc, PlantShareException) and exc.details:
        log_data["error_details"] = exc.details

    if status_code >= 500:
        logger.error(
            f"Server error in {request.method} {request.url.path}",
            extra=log_data,
            exc_info=True
        )
    else:
        logger.info(
            f"Client error in {request.method} {request.url.path}",
            extra=log_data
        )

    if isinstance(exc, (ConnectionError, TimeoutError, DatabaseError)):
        logger.error(
            f"Infrastructure error: {type(exc).__name__}",
            extra={**log_data, "infrastructure_error": True}
        )


def create_error_response(
    error_code: str,
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        request_id: Request correlation ID

    Returns:
        JSON error response
    """
    error_response = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": request_id,
        }
    }

    response = JSONResponse(status_code=status_code, content=error_response)

    if request_id:
        response.headers[COMMON_HEADERS["REQUEST_ID"]] = request_id
    response.headers[COMMON_HEADERS["ERROR_CODE"]] = error_code

    return response


def handle_validation_error(exc, request_id: Optional[str] = None) -> JSONResponse:
    """
    Handle request validation errors (malformed path or query values)

    Args:
        exc: RequestValidationError
        request_id: Request correlation ID

    Returns:
        JSON error response with status 422
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        }
        for error in exc.errors()
    ]

    return create_error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details={"validation_errors": validation_errors},
        request_id=request_id
    )
