# 📄 File: app/modules/community_social/presentation/api/schemas/profile_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what a grower's public profile and their post listings look like when the app asks for them
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for public user profiles and profile post listings with camelCase serialization
# 🔗 Dependencies:
# pydantic, leaderboard_schemas.CamelModel, profile domain models
# 🔄 Connected Modules / Calls From:
# app.modules.community_social.presentation.api.v1.users

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from app.modules.community_social.domain.models.profile import PostPage, PostSummary, UserProfile
from app.modules.community_social.presentation.api.schemas.leaderboard_schemas import CamelModel


class LocationSchema(CamelModel):
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    address: Optional[str] = None


class PostResponse(CamelModel):
    """A post as listed on a profile, with the owner's interaction flags."""

    id: UUID
    user_id: UUID
    user_name: str
    user_avatar: Optional[str] = None
    caption: str = ""
    image_url: str
    likes: int = 0
    is_liked: bool = False
    is_saved: bool = False
    is_commented: bool = False
    comments_count: int = 0
    plant_type: str
    location: Optional[LocationSchema] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, post: PostSummary) -> "PostResponse":
        return cls(
            id=post.post_id,
            user_id=post.author.user_id,
            user_name=post.author.name,
            user_avatar=post.author.avatar_url,
            caption=post.caption,
            image_url=post.image_url,
            likes=post.likes,
            is_liked=post.is_liked,
            is_saved=post.is_saved,
            is_commented=post.is_commented,
            comments_count=post.comments_count,
            plant_type=post.plant_type,
            location=LocationSchema(**post.location.model_dump()) if post.location else None,
            created_at=post.created_at,
        )


class UserPostsResponse(CamelModel):
    """One page of a user's posts, newest first."""

    posts: List[PostResponse] = Field(default_factory=list)
    current_page: int = Field(1, description="1-based page number")
    total_pages: int = Field(0, description="Pages available at this page size")
    total_posts: int = Field(0, description="Posts the user has shared")

    @classmethod
    def from_domain(cls, page: PostPage) -> "UserPostsResponse":
        return cls(
            posts=[PostResponse.from_domain(post) for post in page.posts],
            current_page=page.page,
            total_pages=page.total_pages,
            total_posts=page.total_posts,
        )


class SavedPostsResponse(CamelModel):
    posts: List[PostResponse] = Field(default_factory=list)
    count: int = 0

    @classmethod
    def from_domain(cls, posts: List[PostSummary]) -> "SavedPostsResponse":
        return cls(posts=[PostResponse.from_domain(post) for post in posts], count=len(posts))


class ProfileStatsSchema(CamelModel):
    posts: int = Field(0, description="Posts shared")
    plants: int = Field(0, description="Lifetime plant counter")
    likes_received: int = Field(0, description="Likes on the user's posts")
    saved_posts: int = Field(0, description="Posts the user saved")
    environmental_impact: int = Field(0, description="CO2 offset, 20 per plant")


class UserProfileResponse(CamelModel):
    """Public profile of a user; never includes email or credentials."""

    id: UUID
    name: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    bio: Optional[str] = None
    location: LocationSchema = Field(default_factory=LocationSchema)
    created_at: Optional[datetime] = None
    stats: ProfileStatsSchema
    posts: List[PostResponse] = Field(default_factory=list, description="Most recent posts, newest first")

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "UserProfileResponse":
        user = profile.user
        return cls(
            id=user.user_id,
            name=user.name,
            avatar_url=user.avatar_url,
            cover_image_url=user.cover_image_url,
            bio=user.bio,
            location=LocationSchema(**user.location.model_dump()),
            created_at=user.created_at,
            stats=ProfileStatsSchema(**profile.stats.model_dump()),
            posts=[PostResponse.from_domain(post) for post in profile.recent_posts],
        )
