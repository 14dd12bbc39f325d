# 📄 File: app/modules/community_social/domain/repositories/community_stats_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how we look up community-wide totals (how many users, posts, likes) and a single grower's profile
# 🧪 Purpose (Technical Summary):
# Repository interface for platform-level counts within a time window and for public profile lookups
# 🔗 Dependencies:
# Domain models (UserSummary, ProfileActivity), typing, abc, uuid
# 🔄 Connected Modules / Calls From:
# leaderboard_service.py, profile_service.py, infrastructure/database/community_stats_repository_impl.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from ..models.profile import ProfileActivity, UserSummary


class CommunityStatsRepository(ABC):
    """
    Repository interface for community statistics.

    Every count method takes an optional inclusive lower bound on creation
    time; None means all time.
    """

    @abstractmethod
    async def count_users(self) -> int:
        """Count all registered users."""
        pass

    @abstractmethod
    async def count_posts(self, since: Optional[datetime] = None) -> int:
        """Count posts created in the window."""
        pass

    @abstractmethod
    async def count_plant_posts(self, since: Optional[datetime] = None) -> int:
        """Count posts in the window whose plant type is known."""
        pass

    @abstractmethod
    async def count_comments(self, since: Optional[datetime] = None) -> int:
        """Count comments created in the window."""
        pass

    @abstractmethod
    async def count_likes(self, since: Optional[datetime] = None) -> int:
        """Count likes on posts created in the window."""
        pass

    @abstractmethod
    async def get_user_summary(self, user_id: UUID) -> Optional[UserSummary]:
        """
        Get public profile data for a user.

        Args:
            user_id: User ID to find

        Returns:
            UserSummary if found, None otherwise

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_profile_activity(self, user_id: UUID) -> ProfileActivity:
        """Get lifetime post, like-received and saved-post counts for a user."""
        pass
