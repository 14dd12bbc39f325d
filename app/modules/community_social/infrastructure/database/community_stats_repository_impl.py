# 📄 File: app/modules/community_social/infrastructure/database/community_stats_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Answers community-wide questions like "how many posts were shared this week" and fetches
# a single grower's public profile and activity totals
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CommunityStatsRepository: windowed platform counts and public profile
# lookups, each statement on its own read-only session so callers can gather them concurrently
#
# 🔗 Dependencies:
# - SQLAlchemy core select/func
# - app.modules.community_social.domain (repository interface, profile models)
# - query_runner.py (session-per-query execution)
#
# 🔄 Connected Modules / Calls From:
# - LeaderboardService (platform totals)
# - ProfileService (profile lookups)

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select

from app.shared.utils.concurrency import gather_or_cancel

from app.modules.community_social.domain.models.leaderboard import UNKNOWN_PLANT_TYPE
from app.modules.community_social.domain.models.profile import (
    ProfileActivity,
    UserLocation,
    UserSummary,
)
from app.modules.community_social.domain.repositories.community_stats_repository import (
    CommunityStatsRepository,
)
from app.modules.community_social.infrastructure.database.models import (
    CommentModel,
    PostModel,
    UserModel,
    post_likes,
    post_saves,
)
from app.modules.community_social.infrastructure.database.query_runner import ReadOnlyQueryRunner


def _since_context(since: Optional[datetime]) -> dict:
    return {"since": since.isoformat() if since else None}


class CommunityStatsRepositoryImpl(ReadOnlyQueryRunner, CommunityStatsRepository):
    """
    SQLAlchemy implementation of the CommunityStatsRepository interface.
    """

    async def count_users(self) -> int:
        stmt = select(func.count(UserModel.id))
        return int(await self._fetch_scalar(stmt, "count_users", "users") or 0)

    async def count_posts(self, since: Optional[datetime] = None) -> int:
        stmt = select(func.count(PostModel.id))
        if since is not None:
            stmt = stmt.where(PostModel.created_at >= since)
        return int(await self._fetch_scalar(stmt, "count_posts", "posts", _since_context(since)) or 0)

    async def count_plant_posts(self, since: Optional[datetime] = None) -> int:
        stmt = select(func.count(PostModel.id)).where(PostModel.plant_type != UNKNOWN_PLANT_TYPE)
        if since is not None:
            stmt = stmt.where(PostModel.created_at >= since)
        return int(await self._fetch_scalar(stmt, "count_plant_posts", "posts", _since_context(since)) or 0)

    async def count_comments(self, since: Optional[datetime] = None) -> int:
        stmt = select(func.count(CommentModel.id))
        if since is not None:
            stmt = stmt.where(CommentModel.created_at >= since)
        return int(await self._fetch_scalar(stmt, "count_comments", "comments", _since_context(since)) or 0)

    async def count_likes(self, since: Optional[datetime] = None) -> int:
        """Count likes on posts created in the window."""
        stmt = (
            select(func.count(post_likes.c.user_id))
            .select_from(post_likes)
            .join(PostModel, PostModel.id == post_likes.c.post_id)
        )
        if since is not None:
            stmt = stmt.where(PostModel.created_at >= since)
        return int(await self._fetch_scalar(stmt, "count_likes", "post_likes", _since_context(since)) or 0)

    async def get_user_summary(self, user_id: UUID) -> Optional[UserSummary]:
        """
        Get public profile data for a user.

        Credentials and email are never selected.
        """
        stmt = select(
            UserModel.id,
            UserModel.name,
            UserModel.avatar_url,
            UserModel.cover_image_url,
            UserModel.bio,
            UserModel.longitude,
            UserModel.latitude,
            UserModel.address,
            UserModel.number_of_plants,
            UserModel.created_at,
        ).where(UserModel.id == user_id)

        rows = await self._fetch_all(stmt, "get_user_summary", "users", {"user_id": str(user_id)})
        if not rows:
            return None

        row = rows[0]
        return UserSummary(
            user_id=row.id,
            name=row.name,
            avatar_url=row.avatar_url,
            cover_image_url=row.cover_image_url,
            bio=row.bio,
            location=UserLocation(
                longitude=row.longitude,
                latitude=row.latitude,
                address=row.address,
            ),
            number_of_plants=row.number_of_plants or 0,
            created_at=row.created_at,
        )

    async def get_profile_activity(self, user_id: UUID) -> ProfileActivity:
        context = {"user_id": str(user_id)}

        posts_stmt = select(func.count(PostModel.id)).where(PostModel.user_id == user_id)
        likes_stmt = (
            select(func.count(post_likes.c.user_id))
            .select_from(post_likes)
            .join(PostModel, PostModel.id == post_likes.c.post_id)
            .where(PostModel.user_id == user_id)
        )
        saves_stmt = select(func.count(post_saves.c.post_id)).where(post_saves.c.user_id == user_id)

        posts, likes, saves = await gather_or_cancel(
            self._fetch_scalar(posts_stmt, "count_user_posts", "posts", context),
            self._fetch_scalar(likes_stmt, "count_user_likes_received", "post_likes", context),
            self._fetch_scalar(saves_stmt, "count_user_saved_posts", "post_saves", context),
        )

        return ProfileActivity(
            posts=int(posts or 0),
            likes_received=int(likes or 0),
            saved_posts=int(saves or 0),
        )
