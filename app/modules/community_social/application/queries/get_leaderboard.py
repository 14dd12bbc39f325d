# 📄 File: app/modules/community_social/application/queries/get_leaderboard.py
# 🧭 Purpose (Layman Explanation):
# Describes a request for a leaderboard (or the leaderboard statistics page) and quietly fixes up
# any odd values the app sends, like an unknown category or a negative size
#
# 🧪 Purpose (Technical Summary):
# CQRS query objects for leaderboard and leaderboard statistics retrieval with lenient parameter
# resolution: unrecognised category -> plants, unrecognised time range -> all, bad limit -> default
#
# 🔗 Dependencies:
# - pydantic for query validation and serialization
# - app.modules.community_social.domain.models.leaderboard (category/time range enums)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.community_social.application.handlers.query_handlers
# - app.modules.community_social.presentation.api.v1.leaderboard

"""
Leaderboard Queries

Query parameters arrive as free-form strings. Resolution never fails:

- category: plants | co2 | engagement, anything else ranks like plants
- time_range: week | month | all, anything else means all time
- limit: leading integer ("5abc" reads as 5), anything non-positive or non-numeric
  means the default; capped at the maximum
"""

import re
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.community_social.domain.models.leaderboard import (
    LeaderboardCategory,
    TimeRange,
)


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(raw: Optional[str]) -> Optional[int]:
    """Read the integer at the start of a string, None when there is none."""
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def resolve_limit(raw: Optional[str], default: int, maximum: int) -> int:
    """Parse a caller-supplied limit, falling back to the default."""
    value = parse_leading_int(raw)
    if value is None or value <= 0:
        value = default
    return min(value, maximum)


class GetLeaderboardStatsQuery(BaseModel):
    """Query for platform statistics and top performers."""

    category: Optional[str] = Field(None, description="Ranking category", examples=["plants"])
    time_range: Optional[str] = Field(None, description="Activity window", examples=["week"])

    def resolved_category(self) -> LeaderboardCategory:
        return LeaderboardCategory.resolve(self.category)

    def resolved_time_range(self) -> TimeRange:
        return TimeRange.resolve(self.time_range)


class GetLeaderboardQuery(GetLeaderboardStatsQuery):
    """
    Query for a ranked leaderboard.

    Adds the requested size to the statistics query parameters.
    """

    limit: Optional[str] = Field(None, description="Maximum number of entries", examples=["10"])

    def resolved_limit(self, default: int, maximum: int) -> int:
        return resolve_limit(self.limit, default, maximum)
