# 📄 File: app/modules/community_social/domain/models/leaderboard.py
# 🧭 Purpose (Layman Explanation):
# Defines the building blocks of our community leaderboards - which ranking to show (plants, CO2, engagement),
# over what period (week, month, all time), and what each row of a leaderboard looks like
# 🧪 Purpose (Technical Summary):
# Domain value objects for leaderboard ranking: category/time-range enums with lenient parsing,
# per-user metric records, scored and ranked entries, and platform statistics aggregates
# 🔗 Dependencies:
# pydantic, datetime, enum, uuid
# 🔄 Connected Modules / Calls From:
# scoring.py, ranking.py, leaderboard_service.py, metric sources, query handlers, API schemas

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, FrozenSet, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

# Every plant is credited with a fixed amount of CO2 offset
ENVIRONMENTAL_IMPACT_PER_PLANT = 20

# Posts tagged with this plant type do not count as plants
UNKNOWN_PLANT_TYPE = "Unknown"


def environmental_impact(plant_count: int) -> int:
    """CO2 offset credited for a number of plants."""
    return plant_count * ENVIRONMENTAL_IMPACT_PER_PLANT


class LeaderboardCategory(str, Enum):
    """Ranking dimension of a leaderboard"""
    PLANTS = "plants"
    CO2 = "co2"
    ENGAGEMENT = "engagement"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "LeaderboardCategory":
        """Parse a caller-supplied category, falling back to plants."""
        if value is None:
            return cls.PLANTS
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.PLANTS


class TimeRange(str, Enum):
    """Activity window a leaderboard is computed over"""
    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "TimeRange":
        """Parse a caller-supplied time range, falling back to all time."""
        if value is None:
            return cls.ALL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.ALL

    def window_start(self, now: Optional[datetime] = None) -> Optional[datetime]:
        """
        Lower bound (inclusive) of activity timestamps for this range.

        Week and month are rolling windows of 7 and 30 days ending at `now`.
        All time has no bound and returns None.
        """
        days = _WINDOW_DAYS.get(self)
        if days is None:
            return None
        now = now or datetime.now(timezone.utc)
        return now - timedelta(days=days)


_WINDOW_DAYS: Dict[TimeRange, int] = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
}


class Metric(str, Enum):
    """Per-user activity counts a metric source can aggregate"""
    PLANTS = "plants"
    POSTS = "posts"
    LIKES = "likes"
    COMMENTS = "comments"


# Metrics each leaderboard category is scored from
CATEGORY_METRICS: Dict[LeaderboardCategory, FrozenSet[Metric]] = {
    LeaderboardCategory.PLANTS: frozenset({Metric.PLANTS}),
    LeaderboardCategory.CO2: frozenset({Metric.PLANTS}),
    LeaderboardCategory.ENGAGEMENT: frozenset({Metric.POSTS, Metric.LIKES, Metric.COMMENTS}),
}


class MetricRecord(BaseModel):
    """
    Aggregated activity of one user, as produced by a metric source.

    Counts not requested from the source stay at zero. `plant_count` holds the
    lifetime counter when read from the users table and the number of plant
    posts in the window when aggregated from posts.
    """

    user_id: UUID
    name: str = ""
    avatar_url: Optional[str] = None
    number_of_plants: int = Field(default=0, ge=0)

    plant_count: int = Field(default=0, ge=0)
    post_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)

    def value(self, metric: Metric) -> int:
        """Get the count for a single metric."""
        return {
            Metric.PLANTS: self.plant_count,
            Metric.POSTS: self.post_count,
            Metric.LIKES: self.like_count,
            Metric.COMMENTS: self.comment_count,
        }[metric]


class EngagementBreakdown(BaseModel):
    """Components of an engagement score"""
    posts: int = 0
    likes: int = 0
    comments: int = 0

    @property
    def total(self) -> int:
        return self.posts + self.likes + self.comments


class ScoredEntry(BaseModel):
    """A user's display data together with the score being ranked on."""

    user_id: UUID
    name: str = ""
    avatar_url: Optional[str] = None
    number_of_plants: int = 0
    category: str
    score: int = Field(ge=0)
    engagement: Optional[EngagementBreakdown] = None


class RankedEntry(ScoredEntry):
    """Scored entry with its 1-based leaderboard position."""
    rank: int = Field(ge=1)


class Leaderboard(BaseModel):
    """Ranked leaderboard for one category and time range."""

    category: LeaderboardCategory
    time_range: TimeRange
    limit: int
    entries: List[RankedEntry] = Field(default_factory=list)

    @property
    def total_users(self) -> int:
        return len(self.entries)


class PlatformTotals(BaseModel):
    """Platform-wide activity counts within a time range."""

    total_users: int = 0
    total_posts: int = 0
    total_comments: int = 0
    total_likes: int = 0
    total_plants: int = 0

    @property
    def environmental_impact(self) -> int:
        return environmental_impact(self.total_plants)


class LeaderboardStats(BaseModel):
    """
    Platform totals plus the top performers of each activity metric.

    Each top performer is the first entry of the matching top-N list, so the
    two views can never disagree.
    """

    category: LeaderboardCategory
    time_range: TimeRange
    totals: PlatformTotals
    top_plant_growers: List[RankedEntry] = Field(default_factory=list)
    top_posters: List[RankedEntry] = Field(default_factory=list)
    top_liked: List[RankedEntry] = Field(default_factory=list)
    top_commenters: List[RankedEntry] = Field(default_factory=list)

    @staticmethod
    def _first(entries: List[RankedEntry]) -> Optional[RankedEntry]:
        return entries[0] if entries else None

    @property
    def top_plant_grower(self) -> Optional[RankedEntry]:
        return self._first(self.top_plant_growers)

    @property
    def top_poster(self) -> Optional[RankedEntry]:
        return self._first(self.top_posters)

    @property
    def most_liked(self) -> Optional[RankedEntry]:
        return self._first(self.top_liked)

    @property
    def top_commenter(self) -> Optional[RankedEntry]:
        return self._first(self.top_commenters)
