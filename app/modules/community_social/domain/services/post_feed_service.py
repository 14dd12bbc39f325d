# 📄 File: app/modules/community_social/domain/services/post_feed_service.py
# 🧭 Purpose (Layman Explanation):
# Shows the plant posts a grower has shared, a page at a time, and the posts they saved for later
# 🧪 Purpose (Technical Summary):
# Domain service for profile post listings: paginated own posts with totals and saved posts,
# both rejecting unknown users with UserNotFoundError
# 🔗 Dependencies:
# PostFeedRepository, profile domain models, gather_or_cancel, UserNotFoundError, StructuredLogger
# 🔄 Connected Modules / Calls From:
# GetUserPostsQueryHandler, GetSavedPostsQueryHandler

from typing import List
from uuid import UUID

from app.shared.core.exceptions import UserNotFoundError
from app.shared.utils.concurrency import gather_or_cancel
from app.shared.utils.logging import StructuredLogger

from ..models.profile import PostPage, PostSummary
from ..repositories.post_feed_repository import PostFeedRepository


class PostFeedService:
    """Domain service for the posts shown on a user's profile."""

    def __init__(self, post_repository: PostFeedRepository, logger: StructuredLogger):
        self.post_repository = post_repository
        self.logger = logger

    async def _require_user(self, user_id: UUID) -> None:
        if not await self.post_repository.user_exists(user_id):
            self.logger.info("Posts requested for unknown user", extra={"user_id": str(user_id)})
            raise UserNotFoundError(str(user_id))

    async def get_user_posts(self, user_id: UUID, page: int, limit: int) -> PostPage:
        """
        Get one page of a user's posts, newest first.

        Args:
            user_id: Author of the posts
            page: 1-based page number
            limit: Posts per page, at least 1

        Raises:
            UserNotFoundError: If no user has this id
            RepositoryError: If a lookup fails
        """
        await self._require_user(user_id)

        total, posts = await gather_or_cancel(
            self.post_repository.count_user_posts(user_id),
            self.post_repository.list_user_posts(user_id, offset=(page - 1) * limit, limit=limit),
        )

        return PostPage(posts=posts, page=page, limit=limit, total_posts=total)

    async def get_saved_posts(self, user_id: UUID) -> List[PostSummary]:
        """
        Get the posts a user saved, most recently saved first.

        Raises:
            UserNotFoundError: If no user has this id
        """
        await self._require_user(user_id)
        return await self.post_repository.list_saved_posts(user_id)
