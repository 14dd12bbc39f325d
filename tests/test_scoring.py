"""
Tests for leaderboard scoring
"""

from uuid import uuid4

from app.modules.community_social.domain.models.leaderboard import (
    LeaderboardCategory,
    Metric,
    MetricRecord,
)
from app.modules.community_social.domain.services.scoring import (
    calculate_score,
    score_by_metric,
    score_records,
)


def record(**counts) -> MetricRecord:
    return MetricRecord(user_id=uuid4(), name="Grower", **counts)


class TestCalculateScore:

    def test_plants_score_is_plant_count(self):
        assert calculate_score(record(plant_count=4), LeaderboardCategory.PLANTS) == 4

    def test_co2_is_twenty_per_plant(self):
        assert calculate_score(record(plant_count=4), LeaderboardCategory.CO2) == 80

    def test_engagement_sums_posts_likes_and_comments(self):
        activity = record(post_count=2, like_count=3, comment_count=1, plant_count=9)

        assert calculate_score(activity, LeaderboardCategory.ENGAGEMENT) == 6


class TestScoreRecords:

    def test_entries_carry_display_data(self):
        source = MetricRecord(
            user_id=uuid4(),
            name="Maya",
            avatar_url="https://cdn.example.com/maya.png",
            number_of_plants=12,
            plant_count=3,
        )

        [entry] = score_records([source], LeaderboardCategory.CO2)

        assert entry.user_id == source.user_id
        assert entry.name == "Maya"
        assert entry.avatar_url == "https://cdn.example.com/maya.png"
        assert entry.number_of_plants == 12
        assert entry.category == "co2"
        assert entry.score == 60
        assert entry.engagement is None

    def test_engagement_entries_include_breakdown(self):
        [entry] = score_records(
            [record(post_count=2, like_count=3, comment_count=1)],
            LeaderboardCategory.ENGAGEMENT,
        )

        assert entry.engagement.posts == 2
        assert entry.engagement.likes == 3
        assert entry.engagement.comments == 1
        assert entry.engagement.total == entry.score == 6

    def test_zero_scores_are_kept(self):
        entries = score_records([record(), record(plant_count=1)], LeaderboardCategory.PLANTS)

        assert sorted(entry.score for entry in entries) == [0, 1]


def test_score_by_metric_skips_users_without_activity():
    active = record(like_count=5)
    entries = score_by_metric([active, record(post_count=2)], Metric.LIKES)

    assert [(entry.user_id, entry.score) for entry in entries] == [(active.user_id, 5)]
    assert entries[0].category == "likes"
