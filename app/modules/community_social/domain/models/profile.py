# 📄 File: app/modules/community_social/domain/models/profile.py
# 🧭 Purpose (Layman Explanation):
# Describes what we show on a grower's public profile - who they are, where they garden,
# a summary of their activity like posts, plants and the CO2 their plants offset, and the posts they
# shared or saved
# 🧪 Purpose (Technical Summary):
# Domain read models for public user profiles, their aggregated activity statistics and post listings
# 🔗 Dependencies:
# pydantic, datetime, uuid, leaderboard.environmental_impact
# 🔄 Connected Modules / Calls From:
# profile_service.py, community_stats_repository.py, query handlers, profile API schemas

from datetime import datetime
from math import ceil
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .leaderboard import environmental_impact


class UserLocation(BaseModel):
    """Where a user gardens"""
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    address: Optional[str] = None


class UserSummary(BaseModel):
    """
    Public identity of a user.

    Never carries credentials or contact details.
    """

    user_id: UUID
    name: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    bio: Optional[str] = None
    location: UserLocation = Field(default_factory=UserLocation)
    number_of_plants: int = 0
    created_at: Optional[datetime] = None


class ProfileActivity(BaseModel):
    """Lifetime activity counts used for profile statistics."""
    posts: int = 0
    likes_received: int = 0
    saved_posts: int = 0


class ProfileStats(BaseModel):
    posts: int = 0
    plants: int = 0
    likes_received: int = 0
    saved_posts: int = 0
    environmental_impact: int = 0

    @classmethod
    def from_activity(cls, plants: int, activity: ProfileActivity) -> "ProfileStats":
        """Combine the stored plant counter with lifetime activity counts."""
        return cls(
            posts=activity.posts,
            plants=plants,
            likes_received=activity.likes_received,
            saved_posts=activity.saved_posts,
            environmental_impact=environmental_impact(plants),
        )


class PostAuthor(BaseModel):
    user_id: UUID
    name: str
    avatar_url: Optional[str] = None


class PostSummary(BaseModel):
    """
    A post as listed on a profile.

    The viewer flags describe the profile owner's own interactions with
    the post, since listings are read without a signed-in viewer.
    """

    post_id: UUID
    author: PostAuthor
    caption: str = ""
    image_url: str
    plant_type: str
    location: Optional[UserLocation] = None
    likes: int = 0
    comments_count: int = 0
    is_liked: bool = False
    is_saved: bool = False
    is_commented: bool = False
    created_at: datetime


class PostPage(BaseModel):
    """One page of a user's posts, newest first."""
    posts: List[PostSummary] = Field(default_factory=list)
    page: int = 1
    limit: int
    total_posts: int = 0

    @property
    def total_pages(self) -> int:
        return ceil(self.total_posts / self.limit)


class UserProfile(BaseModel):
    """A user's public profile together with activity statistics and recent posts."""
    user: UserSummary
    stats: ProfileStats
    recent_posts: List[PostSummary] = Field(default_factory=list)
