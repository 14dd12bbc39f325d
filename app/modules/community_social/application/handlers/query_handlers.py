# 📄 File: app/modules/community_social/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "information retrievers" for the community - they take a leaderboard or profile request,
# tidy up its parameters and ask the right service for the answer
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers resolving request parameters against configured defaults and delegating to the
# leaderboard, profile and post feed domain services
#
# 🔗 Dependencies:
# - app.modules.community_social.application.queries (query definitions)
# - app.modules.community_social.domain.services (LeaderboardService, ProfileService, PostFeedService)
# - app.shared.config.settings (leaderboard and page size limits)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.community_social.presentation.api.v1 (API endpoints invoke handlers)
# - app.modules.community_social.presentation.dependencies (handler instantiation)

"""
Community Query Handlers

- GetLeaderboardQueryHandler: ranked leaderboard for a category and time range
- GetLeaderboardStatsQueryHandler: platform totals and top performers
- GetUserProfileQueryHandler: public profile with activity statistics
- GetUserPostsQueryHandler: one page of a user's posts
- GetSavedPostsQueryHandler: posts a user saved
"""

import logging
from typing import List

from app.modules.community_social.application.queries.get_leaderboard import (
    GetLeaderboardQuery,
    GetLeaderboardStatsQuery,
)
from app.modules.community_social.application.queries.get_user_profile import GetUserProfileQuery
from app.modules.community_social.application.queries.get_user_posts import (
    GetSavedPostsQuery,
    GetUserPostsQuery,
)
from app.modules.community_social.domain.models.leaderboard import Leaderboard, LeaderboardStats
from app.modules.community_social.domain.models.profile import PostPage, PostSummary, UserProfile
from app.modules.community_social.domain.services.leaderboard_service import LeaderboardService
from app.modules.community_social.domain.services.post_feed_service import PostFeedService
from app.modules.community_social.domain.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class GetLeaderboardQueryHandler:
    """Handler for leaderboard retrieval."""

    def __init__(self, leaderboard_service: LeaderboardService, default_limit: int = 10, max_limit: int = 100):
        """
        Initialize the leaderboard query handler.

        Args:
            leaderboard_service: Domain service computing leaderboards
            default_limit: Size used when the caller omits or garbles the limit
            max_limit: Largest leaderboard a caller may request
        """
        self._leaderboard_service = leaderboard_service
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def handle(self, query: GetLeaderboardQuery) -> Leaderboard:
        category = query.resolved_category()
        time_range = query.resolved_time_range()
        limit = query.resolved_limit(self._default_limit, self._max_limit)

        logger.debug(
            f"Processing GetLeaderboardQuery: category={category.value}, "
            f"time_range={time_range.value}, limit={limit}"
        )
        return await self._leaderboard_service.get_leaderboard(category, time_range, limit)


class GetLeaderboardStatsQueryHandler:
    """Handler for leaderboard statistics retrieval."""

    def __init__(self, leaderboard_service: LeaderboardService):
        self._leaderboard_service = leaderboard_service

    async def handle(self, query: GetLeaderboardStatsQuery) -> LeaderboardStats:
        category = query.resolved_category()
        time_range = query.resolved_time_range()

        logger.debug(
            f"Processing GetLeaderboardStatsQuery: category={category.value}, time_range={time_range.value}"
        )
        return await self._leaderboard_service.get_leaderboard_stats(category, time_range)


class GetUserProfileQueryHandler:
    """Handler for public profile retrieval."""

    def __init__(self, profile_service: ProfileService):
        self._profile_service = profile_service

    async def handle(self, query: GetUserProfileQuery) -> UserProfile:
        """
        Handle profile retrieval.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        logger.debug(f"Processing GetUserProfileQuery for user: {query.user_id}")
        return await self._profile_service.get_user_profile(query.user_id)


class GetUserPostsQueryHandler:
    """Handler for paginated user post listings."""

    def __init__(self, post_feed_service: PostFeedService, default_limit: int = 10, max_limit: int = 50):
        self._post_feed_service = post_feed_service
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def handle(self, query: GetUserPostsQuery) -> PostPage:
        page = query.resolved_page()
        limit = query.resolved_limit(self._default_limit, self._max_limit)

        logger.debug(f"Processing GetUserPostsQuery for user: {query.user_id}, page={page}, limit={limit}")
        return await self._post_feed_service.get_user_posts(query.user_id, page, limit)


class GetSavedPostsQueryHandler:
    """Handler for saved post listings."""

    def __init__(self, post_feed_service: PostFeedService):
        self._post_feed_service = post_feed_service

    async def handle(self, query: GetSavedPostsQuery) -> List[PostSummary]:
        logger.debug(f"Processing GetSavedPostsQuery for user: {query.user_id}")
        return await self._post_feed_service.get_saved_posts(query.user_id)
