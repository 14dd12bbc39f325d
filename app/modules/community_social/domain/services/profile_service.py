# 📄 File: app/modules/community_social/domain/services/profile_service.py
# 🧭 Purpose (Layman Explanation):
# Looks up a grower's public profile and adds up their activity - posts shared, plants grown,
# likes received, posts saved and the CO2 their plants offset - along with their latest posts
# 🧪 Purpose (Technical Summary):
# Domain service combining the stored plant counter with lifetime activity counts into profile statistics
# and attaching the most recent posts
# 🔗 Dependencies:
# CommunityStatsRepository, PostFeedRepository, profile domain models, UserNotFoundError, StructuredLogger
# 🔄 Connected Modules / Calls From:
# GetUserProfileQueryHandler

from uuid import UUID

from app.shared.core.exceptions import UserNotFoundError
from app.shared.utils.concurrency import gather_or_cancel
from app.shared.utils.logging import StructuredLogger

from ..models.profile import ProfileStats, UserProfile
from ..repositories.community_stats_repository import CommunityStatsRepository
from ..repositories.post_feed_repository import PostFeedRepository


class ProfileService:
    """Domain service for public user profiles."""

    def __init__(
        self,
        stats_repository: CommunityStatsRepository,
        post_repository: PostFeedRepository,
        logger: StructuredLogger,
        recent_posts: int = 10
    ):
        self.stats_repository = stats_repository
        self.post_repository = post_repository
        self.logger = logger
        self.recent_posts = recent_posts

    async def get_user_profile(self, user_id: UUID) -> UserProfile:
        """
        Get a user's public profile with activity statistics.

        Raises:
            UserNotFoundError: If no user has this id
            RepositoryError: If a lookup fails
        """
        summary = await self.stats_repository.get_user_summary(user_id)
        if summary is None:
            self.logger.info("Profile requested for unknown user", extra={"user_id": str(user_id)})
            raise UserNotFoundError(str(user_id))

        activity, posts = await gather_or_cancel(
            self.stats_repository.get_profile_activity(user_id),
            self.post_repository.list_user_posts(user_id, offset=0, limit=self.recent_posts),
        )

        return UserProfile(
            user=summary,
            stats=ProfileStats.from_activity(summary.number_of_plants, activity),
            recent_posts=posts,
        )
