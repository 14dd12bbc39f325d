# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that sit in front of every request - one keeps a diary of requests,
# the other turns crashes into tidy error messages
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware with shared configuration for request logging and
# error handling middleware
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration), middleware modules

"""
Plant Share API Middleware Package

Middleware Components:
    - RequestLoggingMiddleware: HTTP request and response logging with timing
    - ErrorHandlingMiddleware: Centralized error handling and formatting

Middleware Stack Order (applied in reverse order of registration):
    1. ErrorHandlingMiddleware (outermost - catches all errors)
    2. RequestLoggingMiddleware (logs all requests/responses)
    3. Application Routes (innermost)
"""

from typing import Any, Dict

MIDDLEWARE_CONFIG = {
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/health",
            "/favicon.ico",
        ],
        "sensitive_headers": [
            "authorization",
            "x-api-key",
            "cookie",
            "x-access-token",
        ],
    },
    "error_handling": {
        "enabled": True,
        "include_traceback": False,
    },
}

# Common HTTP headers used by middleware
COMMON_HEADERS = {
    "REQUEST_ID": "X-Request-ID",
    "RESPONSE_TIME": "X-Response-Time",
    "ERROR_CODE": "X-Error-Code",
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific middleware

    Args:
        middleware_name: Name of the middleware

    Returns:
        Middleware configuration dictionary
    """
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing

    Args:
        middleware_name: Name of the middleware
        path: Request path to check

    Returns:
        True if path should be excluded, False otherwise
    """
    exclude_paths = get_middleware_config(middleware_name).get("exclude_paths", [])

    for exclude_path in exclude_paths:
        if path == exclude_path or path.startswith(exclude_path + "/"):
            return True

    return False


__all__ = [
    "MIDDLEWARE_CONFIG",
    "COMMON_HEADERS",
    "get_middleware_config",
    "should_exclude_path",
]
