# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Sets up the helpful tools other parts of the app use for writing clear, searchable logs.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured JSON logging helpers
# used across the Plant Share application.

# 🔗 Dependencies:
# - logging: Structured logging utilities (python-json-logger)
# - concurrency: Fan-out helper that cancels siblings on failure

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware, community_social services and repositories

from .concurrency import gather_or_cancel
from .logging import StructuredLogger, get_logger, setup_logging

__version__ = "1.0.0"

__all__ = [
    "StructuredLogger",
    "gather_or_cancel",
    "get_logger",
    "setup_logging",
]
