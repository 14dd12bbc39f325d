# 📄 File: app/modules/community_social/domain/services/scoring.py
# 🧭 Purpose (Layman Explanation):
# Turns each grower's activity counts into a single leaderboard score - plants grown,
# CO2 offset by those plants, or how engaged they are with the community
# 🧪 Purpose (Technical Summary):
# Pure scoring functions mapping MetricRecords to ScoredEntries for a category with fixed formulas
# 🔗 Dependencies:
# Domain models (LeaderboardCategory, Metric, MetricRecord, ScoredEntry, EngagementBreakdown)
# 🔄 Connected Modules / Calls From:
# leaderboard_service.py

from typing import Iterable, List

from ..models.leaderboard import (
    EngagementBreakdown,
    LeaderboardCategory,
    Metric,
    MetricRecord,
    ScoredEntry,
    environmental_impact,
)


def engagement_breakdown(record: MetricRecord) -> EngagementBreakdown:
    return EngagementBreakdown(
        posts=record.post_count,
        likes=record.like_count,
        comments=record.comment_count,
    )


def calculate_score(record: MetricRecord, category: LeaderboardCategory) -> int:
    """
    Score a metric record for a leaderboard category.

    plants      -> plant count
    co2         -> plant count x 20
    engagement  -> posts + likes received + comments made
    """
    if category == LeaderboardCategory.CO2:
        return environmental_impact(record.plant_count)
    if category == LeaderboardCategory.ENGAGEMENT:
        return engagement_breakdown(record).total
    return record.plant_count


def score_records(records: Iterable[MetricRecord], category: LeaderboardCategory) -> List[ScoredEntry]:
    """Build scored entries for a category, carrying each user's display data."""
    scored = []
    for record in records:
        scored.append(ScoredEntry(
            user_id=record.user_id,
            name=record.name,
            avatar_url=record.avatar_url,
            number_of_plants=record.number_of_plants,
            category=category.value,
            score=calculate_score(record, category),
            engagement=(
                engagement_breakdown(record)
                if category == LeaderboardCategory.ENGAGEMENT else None
            ),
        ))
    return scored


def score_by_metric(records: Iterable[MetricRecord], metric: Metric) -> List[ScoredEntry]:
    """Score records by a single raw metric, skipping users with none of it."""
    return [
        ScoredEntry(
            user_id=record.user_id,
            name=record.name,
            avatar_url=record.avatar_url,
            number_of_plants=record.number_of_plants,
            category=metric.value,
            score=record.value(metric),
        )
        for record in records
        if record.value(metric) > 0
    ]
