# 📄 File: app/modules/community_social/presentation/api/v1/leaderboard.py
#
# 🧭 Purpose (Layman Explanation):
# The web endpoints the app calls to show community leaderboards and the "top growers" statistics page
#
# 🧪 Purpose (Technical Summary):
# FastAPI leaderboard endpoints delegating to CQRS query handlers; query values are free strings so
# unsupported values degrade to defaults instead of failing validation
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.community_social.application (queries and handlers)
# - app.modules.community_social.presentation.api.schemas.leaderboard_schemas
# - app.modules.community_social.presentation.dependencies (handler providers)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /users, before the /{user_id} route)

"""
Leaderboard API Endpoints

Endpoints:
- GET /leaderboard: Ranked leaderboard for a category and time range
- GET /leaderboard/stats: Platform totals, top performers and top-three lists
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.modules.community_social.application.handlers.query_handlers import (
    GetLeaderboardQueryHandler,
    GetLeaderboardStatsQueryHandler,
)
from app.modules.community_social.application.queries.get_leaderboard import (
    GetLeaderboardQuery,
    GetLeaderboardStatsQuery,
)
from app.modules.community_social.presentation.api.schemas.leaderboard_schemas import (
    LeaderboardResponse,
    LeaderboardStatsResponse,
)
from app.modules.community_social.presentation.dependencies import (
    get_leaderboard_query_handler,
    get_leaderboard_stats_query_handler,
)

leaderboard_router = APIRouter()


@leaderboard_router.get(
    "/leaderboard",
    response_model=LeaderboardResponse,
    summary="Get leaderboard",
    description="Rank users by plants shared, CO2 offset or community engagement over a time range",
    responses={
        200: {"description": "Ranked leaderboard (possibly empty)"},
        500: {"description": "Leaderboard could not be computed"},
    }
)
async def get_leaderboard(
    category: Optional[str] = Query(None, description="plants | co2 | engagement"),
    time_range: Optional[str] = Query(None, alias="timeRange", description="week | month | all"),
    limit: Optional[str] = Query(None, description="Maximum number of entries (default 10)"),
    handler: GetLeaderboardQueryHandler = Depends(get_leaderboard_query_handler),
) -> LeaderboardResponse:
    """
    Get a ranked leaderboard.

    Unknown categories rank like plants, unknown time ranges mean all time,
    and a missing or non-positive limit means the default size. The response
    echoes the values actually used.
    """
    board = await handler.handle(
        GetLeaderboardQuery(category=category, time_range=time_range, limit=limit)
    )
    return LeaderboardResponse.from_domain(board)


@leaderboard_router.get(
    "/leaderboard/stats",
    response_model=LeaderboardStatsResponse,
    summary="Get leaderboard statistics",
    description="Platform totals and top performers for a time range",
    responses={
        200: {"description": "Leaderboard statistics"},
        500: {"description": "Statistics could not be computed"},
    }
)
async def get_leaderboard_stats(
    category: Optional[str] = Query(None, description="plants | co2 | engagement"),
    time_range: Optional[str] = Query(None, alias="timeRange", description="week | month | all"),
    handler: GetLeaderboardStatsQueryHandler = Depends(get_leaderboard_stats_query_handler),
) -> LeaderboardStatsResponse:
    stats = await handler.handle(GetLeaderboardStatsQuery(category=category, time_range=time_range))
    return LeaderboardStatsResponse.from_domain(stats)
