# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of our API so new versions can be added later without breaking existing apps
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 with route prefixes, OpenAPI tags and version metadata
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Plant Share API Version 1

Core Features:
- Community leaderboards (plants, CO2 offset, engagement)
- Leaderboard statistics and top performers
- Public user profiles with activity statistics
- Health checks

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints
"""

from typing import Any, Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "Plant Share API Version 1",
    "features": [
        "leaderboards",
        "leaderboard_statistics",
        "user_profiles",
    ],
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "users": "/users",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Leaderboard",
        "description": "Community rankings and platform statistics"
    },
    {
        "name": "Users",
        "description": "Public user profiles"
    },
    {
        "name": "Health Check",
        "description": "System health and status monitoring"
    },
]


def get_api_info() -> Dict[str, Any]:
    """
    Get API v1 information and configuration

    Returns:
        Dictionary with API v1 metadata and configuration
    """
    return {
        "api_info": API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
        "tags": API_TAGS,
    }


__all__ = [
    "API_V1_CONFIG",
    "ROUTE_PREFIXES",
    "API_TAGS",
    "get_api_info",
]
