# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Acts like a traffic director for all API version 1 requests, sending leaderboard and profile
# requests to the community features and health checks to the health endpoints
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health router and the community module routers
# under their route prefixes
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.community_social.presentation.api.v1.*
# 🔄 Connected Modules / Calls From:
# app.main

import logging

from fastapi import APIRouter

from app.modules.community_social.presentation.api.v1.leaderboard import leaderboard_router
from app.modules.community_social.presentation.api.v1.users import users_router

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])


# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get(
    "/",
    summary="API v1 Information",
    description="Get API v1 version information and available endpoints",
    tags=["API Info"]
)
async def api_v1_info() -> dict:
    """API v1 information endpoint"""
    return {
        **get_api_info(),
        "endpoints": {
            "leaderboard": f"{ROUTE_PREFIXES['users']}/leaderboard",
            "leaderboard_stats": f"{ROUTE_PREFIXES['users']}/leaderboard/stats",
            "user_profile": f"{ROUTE_PREFIXES['users']}/{{user_id}}",
            "user_posts": f"{ROUTE_PREFIXES['users']}/{{user_id}}/posts",
            "saved_posts": f"{ROUTE_PREFIXES['users']}/{{user_id}}/saved",
            "health_check": "/health",
            "detailed_health": "/health/detailed",
        },
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc",
        },
    }


# =========================================================================
# MODULE ROUTER INCLUDES - COMMUNITY & SOCIAL
# =========================================================================

# Leaderboard routes first: /users/leaderboard must not match /users/{user_id}
api_v1_router.include_router(leaderboard_router, prefix=ROUTE_PREFIXES["users"], tags=["Leaderboard"])
api_v1_router.include_router(users_router, prefix=ROUTE_PREFIXES["users"], tags=["Users"])

logger.debug("Community module routers registered")
