# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package, like a table of contents for the web-facing parts
# of the app (request helpers and version 1 routes)
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer with version constants shared by the routers
# and middleware
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1, app.api.middleware

"""
Plant Share API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Request logging and error handling
    │   ├── logging.py
    │   └── error_handling.py
    └── v1/                  # API version 1
        ├── __init__.py
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoints
"""

__version__ = "1.0.0"

API_PREFIX = "/api"
CURRENT_VERSION = "v1"

__all__ = [
    "API_PREFIX",
    "CURRENT_VERSION",
]
