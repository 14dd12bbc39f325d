# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the Plant Share API - what was asked for, how long the
# answer took, and whether something went wrong - without writing down passwords or tokens
# 🧪 Purpose (Technical Summary):
# Request logging middleware emitting structured request/response records with timing, request-id
# correlation through logging context variables, sensitive header/parameter filtering and slow-request flags
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, app.shared.utils.logging, app.api.middleware (shared config)
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration), all API endpoints

import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, log_context
from . import COMMON_HEADERS, get_middleware_config, should_exclude_path

logger = get_logger(__name__)

REDACTED = "[REDACTED]"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Structured JSON logging
    - Request/response timing
    - Request ID propagation (X-Request-ID)
    - Security-aware header and query filtering
    - Slow request classification
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        config = get_middleware_config("logging")

        self.sensitive_headers = set(config.get("sensitive_headers", []))
        self.sensitive_params = {"password", "token", "api_key", "secret", "auth", "session"}

        # Performance thresholds for warnings (seconds)
        self.slow_request_threshold = 2.0
        self.very_slow_request_threshold = 5.0

        self.request_id_header = COMMON_HEADERS["REQUEST_ID"]

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        if should_exclude_path("logging", request.url.path):
            return await call_next(request)

        request_id = self._get_or_create_request_id(request)
        start_time = time.perf_counter()

        with log_context(request_id=request_id):
            logger.info(
                f"Request started: {request.method} {request.url.path}",
                extra=self._request_log_data(request)
            )

            try:
                response = await call_next(request)

            except Exception as e:
                processing_time = time.perf_counter() - start_time
                logger.error(
                    f"Request failed: {request.method} {request.url.path}",
                    extra={
                        "event_type": "http_error",
                        "method": request.method,
                        "path": request.url.path,
                        "processing_time_ms": round(processing_time * 1000, 2),
                        "exception_type": type(e).__name__,
                        "exception_message": str(e),
                    }
                )
                raise

            processing_time = time.perf_counter() - start_time
            logger.performance.log_request(
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(processing_time * 1000, 2),
                extra={"performance": self._classify(processing_time)},
            )

        response.headers[self.request_id_header] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        """Reuse the request ID from state or headers, or create a new one."""
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            return request_id

        request_id = request.headers.get(self.request_id_header.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _request_log_data(self, request: Request) -> Dict[str, Any]:
        return {
            "event_type": "http_request",
            "method": request.method,
            "path": request.url.path,
            "query_params": self._filter_sensitive_params(dict(request.query_params)),
            "headers": self._filter_sensitive_headers(dict(request.headers)),
            "client": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent", ""),
        }

    def _classify(self, processing_time: float) -> str:
        if processing_time > self.very_slow_request_threshold:
            return "very_slow"
        if processing_time > self.slow_request_threshold:
            return "slow"
        return "normal"

    def _filter_sensitive_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        filtered = {}
        for key, value in headers.items():
            key_lower = key.lower()
            if key_lower in self.sensitive_headers or "password" in key_lower or "secret" in key_lower:
                filtered[key] = REDACTED
            else:
                filtered[key] = value
        return filtered

    def _filter_sensitive_params(self, params: Dict[str, str]) -> Dict[str, str]:
        return {
            key: REDACTED if key.lower() in self.sensitive_params else value
            for key, value in params.items()
        }
