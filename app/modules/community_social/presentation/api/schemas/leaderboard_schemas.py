# 📄 File: app/modules/community_social/presentation/api/schemas/leaderboard_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Defines exactly what the app receives when it asks for a leaderboard or the leaderboard statistics page
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for leaderboard endpoints with camelCase serialization and
# conversion from leaderboard domain models
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.modules.community_social.domain.models.leaderboard (domain models)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.community_social.presentation.api.v1.leaderboard (leaderboard endpoints)
# - FastAPI response serialization and OpenAPI documentation

"""
Leaderboard API Schemas

Response Schemas:
- LeaderboardResponse: ranked leaderboard with the resolved query parameters
- LeaderboardStatsResponse: platform totals, top performers and top-three lists

All responses serialise with camelCase keys.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.community_social.domain.models.leaderboard import (
    Leaderboard,
    LeaderboardStats,
    RankedEntry,
)


class CamelModel(BaseModel):
    """Base schema serialising field names in camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# LEADERBOARD
# =============================================================================

class EngagementSchema(CamelModel):
    posts: int = 0
    likes: int = 0
    comments: int = 0
    total: int = 0


class LeaderboardEntrySchema(CamelModel):
    """One ranked row of a leaderboard."""

    id: UUID = Field(..., description="User identifier")
    name: str = Field(..., description="Display name", examples=["Maya Green"])
    avatar_url: Optional[str] = Field(None, description="Profile picture URL")
    number_of_plants: int = Field(0, description="Lifetime plant counter")
    score: int = Field(..., ge=0, description="Score for the category", examples=[42])
    category: str = Field(..., description="Category the score was computed for", examples=["plants"])
    rank: int = Field(..., ge=1, description="1-based position", examples=[1])
    engagement: Optional[EngagementSchema] = Field(None, description="Engagement breakdown")

    @classmethod
    def from_domain(cls, entry: RankedEntry) -> "LeaderboardEntrySchema":
        return cls(
            id=entry.user_id,
            name=entry.name,
            avatar_url=entry.avatar_url,
            number_of_plants=entry.number_of_plants,
            score=entry.score,
            category=entry.category,
            rank=entry.rank,
            engagement=(
                EngagementSchema(
                    posts=entry.engagement.posts,
                    likes=entry.engagement.likes,
                    comments=entry.engagement.comments,
                    total=entry.engagement.total,
                )
                if entry.engagement else None
            ),
        )


class LeaderboardResponse(CamelModel):
    """Leaderboard response schema."""

    leaderboard: List[LeaderboardEntrySchema] = Field(default_factory=list)
    category: str = Field(..., examples=["plants"])
    time_range: str = Field(..., examples=["week"])
    limit: int = Field(..., examples=[10])
    total_users: int = Field(..., description="Number of entries returned", examples=[10])

    @classmethod
    def from_domain(cls, board: Leaderboard) -> "LeaderboardResponse":
        return cls(
            leaderboard=[LeaderboardEntrySchema.from_domain(entry) for entry in board.entries],
            category=board.category.value,
            time_range=board.time_range.value,
            limit=board.limit,
            total_users=board.total_users,
        )


# =============================================================================
# LEADERBOARD STATISTICS
# =============================================================================

class PlatformStatsSchema(CamelModel):
    total_users: int = Field(..., description="All registered users, regardless of time range")
    total_posts: int
    total_comments: int
    total_likes: int
    total_plants: int
    environmental_impact: int = Field(..., description="CO2 offset, 20 per plant")
    time_range: str
    category: str


class TopPlantGrowerSchema(CamelModel):
    id: UUID
    name: str
    plants: int


class TopPosterSchema(CamelModel):
    id: UUID
    name: str
    post_count: int


class TopLikedSchema(CamelModel):
    id: UUID
    name: str
    total_likes: int


class TopCommenterSchema(CamelModel):
    id: UUID
    name: str
    comment_count: int


class RankedPlantGrowerSchema(TopPlantGrowerSchema):
    rank: int


class RankedPosterSchema(TopPosterSchema):
    rank: int


class RankedLikedSchema(TopLikedSchema):
    rank: int


class RankedCommenterSchema(TopCommenterSchema):
    rank: int


class TopPerformersSchema(CamelModel):
    top_plant_grower: Optional[TopPlantGrowerSchema] = None
    most_active_user: Optional[TopPosterSchema] = None
    most_liked_user: Optional[TopLikedSchema] = None
    most_commented_user: Optional[TopCommenterSchema] = None


class TopThreeSchema(CamelModel):
    plant_growers: List[RankedPlantGrowerSchema] = Field(default_factory=list)
    posters: List[RankedPosterSchema] = Field(default_factory=list)
    most_liked: List[RankedLikedSchema] = Field(default_factory=list)
    commenters: List[RankedCommenterSchema] = Field(default_factory=list)


class LeaderboardStatsResponse(CamelModel):
    """
    Leaderboard statistics response schema.

    Each top performer is position 1 of the matching top-three list.
    """

    platform_stats: PlatformStatsSchema
    top_performers: TopPerformersSchema
    top_three: TopThreeSchema

    @classmethod
    def from_domain(cls, stats: LeaderboardStats) -> "LeaderboardStatsResponse":
        def growers(entries: List[RankedEntry]) -> List[RankedPlantGrowerSchema]:
            return [RankedPlantGrowerSchema(id=e.user_id, name=e.name, plants=e.score, rank=e.rank) for e in entries]

        def posters(entries: List[RankedEntry]) -> List[RankedPosterSchema]:
            return [RankedPosterSchema(id=e.user_id, name=e.name, post_count=e.score, rank=e.rank) for e in entries]

        def liked(entries: List[RankedEntry]) -> List[RankedLikedSchema]:
            return [RankedLikedSchema(id=e.user_id, name=e.name, total_likes=e.score, rank=e.rank) for e in entries]

        def commenters(entries: List[RankedEntry]) -> List[RankedCommenterSchema]:
            return [
                RankedCommenterSchema(id=e.user_id, name=e.name, comment_count=e.score, rank=e.rank)
                for e in entries
            ]

        top_three = TopThreeSchema(
            plant_growers=growers(stats.top_plant_growers),
            posters=posters(stats.top_posters),
            most_liked=liked(stats.top_liked),
            commenters=commenters(stats.top_commenters),
        )

        def first(entries: List[CamelModel]) -> Optional[Dict[str, Any]]:
            # Drop the rank so the performer serialises without it
            return entries[0].model_dump(exclude={"rank"}) if entries else None

        totals = stats.totals
        return cls(
            platform_stats=PlatformStatsSchema(
                total_users=totals.total_users,
                total_posts=totals.total_posts,
                total_comments=totals.total_comments,
                total_likes=totals.total_likes,
                total_plants=totals.total_plants,
                environmental_impact=totals.environmental_impact,
                time_range=stats.time_range.value,
                category=stats.category.value,
            ),
            top_performers=TopPerformersSchema(
                top_plant_grower=first(top_three.plant_growers),
                most_active_user=first(top_three.posters),
                most_liked_user=first(top_three.most_liked),
                most_commented_user=first(top_three.commenters),
            ),
            top_three=top_three,
        )
