# 📄 File: app/modules/community_social/domain/repositories/post_feed_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how we fetch the posts a grower has shared and the posts they saved for later
# 🧪 Purpose (Technical Summary):
# Repository interface for read-only post listings: a user's own posts (paginated, newest first)
# and a user's saved posts, each hydrated with like and comment counts
# 🔗 Dependencies:
# Domain models (PostSummary), typing, abc, uuid
# 🔄 Connected Modules / Calls From:
# post_feed_service.py, profile_service.py, infrastructure/database/post_feed_repository_impl.py

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..models.profile import PostSummary


class PostFeedRepository(ABC):
    """Repository interface for post listings on user profiles."""

    @abstractmethod
    async def user_exists(self, user_id: UUID) -> bool:
        pass

    @abstractmethod
    async def count_user_posts(self, user_id: UUID) -> int:
        """Count every post the user has shared."""
        pass

    @abstractmethod
    async def list_user_posts(self, user_id: UUID, offset: int, limit: int) -> List[PostSummary]:
        """
        List a user's posts, newest first.

        Args:
            user_id: Author of the posts
            offset: Number of posts to skip
            limit: Maximum number of posts to return

        Returns:
            Post summaries with like and comment counts

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def list_saved_posts(self, user_id: UUID) -> List[PostSummary]:
        """List the posts a user saved, most recently saved first."""
        pass
