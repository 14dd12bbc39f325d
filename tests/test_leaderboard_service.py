"""
Tests for LeaderboardService against a seeded database
"""

from unittest.mock import AsyncMock, Mock

import pytest

from app.shared.core.exceptions import RepositoryError
from app.modules.community_social.domain.models.leaderboard import (
    LeaderboardCategory,
    TimeRange,
)
from app.modules.community_social.domain.services.leaderboard_service import LeaderboardService
from app.modules.community_social.infrastructure.database.community_stats_repository_impl import (
    CommunityStatsRepositoryImpl,
)
from app.modules.community_social.infrastructure.database.metric_sources import (
    CounterMetricSource,
    WindowedMetricSource,
)

from .conftest import NOW, days_ago


def build_service(session_factory, logger, top_count: int = 3) -> LeaderboardService:
    return LeaderboardService(
        counter_source=CounterMetricSource(session_factory, logger),
        windowed_source=WindowedMetricSource(session_factory, logger),
        stats_repository=CommunityStatsRepositoryImpl(session_factory, logger),
        logger=logger,
        top_count=top_count,
        clock=lambda: NOW,
    )


@pytest.fixture
def service(session_factory, logger):
    return build_service(session_factory, logger)


class TestGetLeaderboard:

    async def test_weekly_plants_ranking_breaks_ties_by_user_id(self, seed, service):
        """Two growers with 5 plants this week and one with 2."""
        alice = await seed.user("Alice")
        bob = await seed.user("Bob")
        carol = await seed.user("Carol")
        await seed.posts(alice, 5)
        await seed.posts(bob, 5)
        await seed.posts(carol, 2)
        await seed.posts(carol, 6, created_at=days_ago(12))

        board = await service.get_leaderboard(LeaderboardCategory.PLANTS, TimeRange.WEEK, 10)

        tied = sorted([alice.id, bob.id], key=str)
        assert [e.user_id for e in board.entries] == [*tied, carol.id]
        assert [e.score for e in board.entries] == [5, 5, 2]
        assert [e.rank for e in board.entries] == [1, 2, 3]
        assert board.total_users == 3

    async def test_co2_is_twenty_per_plant(self, seed, service):
        grower = await seed.user("Grower")
        await seed.posts(grower, 3)
        await seed.post(grower, plant_type="Unknown")

        board = await service.get_leaderboard(LeaderboardCategory.CO2, TimeRange.MONTH, 10)

        assert board.entries[0].score == 60
        assert board.entries[0].category == "co2"

    async def test_engagement_counts_posts_likes_and_comments(self, seed, service):
        author = await seed.user("Author")
        fans = [await seed.user(f"Fan {i}") for i in range(3)]
        first = await seed.post(author)
        await seed.post(author)
        for fan in fans:
            await seed.like(fan, first)
        await seed.comment(author, first)

        board = await service.get_leaderboard(LeaderboardCategory.ENGAGEMENT, TimeRange.WEEK, 10)

        top = board.entries[0]
        assert top.user_id == author.id
        assert top.score == 6
        assert (top.engagement.posts, top.engagement.likes, top.engagement.comments) == (2, 3, 1)

    async def test_all_time_plants_follow_stored_counter(self, seed, service):
        veteran = await seed.user("Veteran", number_of_plants=50)
        newcomer = await seed.user("Newcomer", number_of_plants=2)
        await seed.posts(newcomer, 4)

        board = await service.get_leaderboard(LeaderboardCategory.PLANTS, TimeRange.ALL, 10)

        assert [e.user_id for e in board.entries] == [veteran.id, newcomer.id]
        assert [e.score for e in board.entries] == [50, 2]

    async def test_limit_bounds_entries(self, seed, service):
        for plants in range(1, 8):
            await seed.user(f"Grower {plants}", number_of_plants=plants)

        board = await service.get_leaderboard(LeaderboardCategory.PLANTS, TimeRange.ALL, 3)

        assert [e.score for e in board.entries] == [7, 6, 5]
        assert [e.rank for e in board.entries] == [1, 2, 3]
        assert board.limit == 3

    @pytest.mark.parametrize("category", list(LeaderboardCategory))
    @pytest.mark.parametrize("time_range", list(TimeRange))
    async def test_limit_bounds_every_category_and_window(self, seed, service, category, time_range):
        fan = await seed.user("Fan")
        for plants in range(1, 5):
            grower = await seed.user(f"Grower {plants}", number_of_plants=plants * 3)
            await seed.posts(grower, plants)
            await seed.post(grower, created_at=days_ago(20))
            latest = await seed.post(grower, created_at=days_ago(2))
            await seed.like(fan, latest)
            await seed.comment(grower, latest)

        full = await service.get_leaderboard(category, time_range, 100)
        limited = await service.get_leaderboard(category, time_range, 2)

        assert len(full.entries) > 2
        assert len(limited.entries) == 2
        assert limited.entries == full.entries[:2]
        assert [e.rank for e in limited.entries] == [1, 2]

    async def test_empty_store_gives_empty_leaderboard(self, service):
        board = await service.get_leaderboard(LeaderboardCategory.ENGAGEMENT, TimeRange.WEEK, 10)

        assert board.entries == []
        assert board.total_users == 0

    async def test_source_failure_propagates(self, logger):
        failing = AsyncMock()
        failing.supports = Mock(return_value=False)
        failing.collect.side_effect = RepositoryError("boom", operation="count_posts_by_user")
        service = LeaderboardService(
            counter_source=failing,
            windowed_source=failing,
            stats_repository=AsyncMock(),
            logger=logger,
            clock=lambda: NOW,
        )

        with pytest.raises(RepositoryError):
            await service.get_leaderboard(LeaderboardCategory.PLANTS, TimeRange.WEEK, 10)


class TestGetLeaderboardStats:

    async def test_top_performers_match_top_three(self, seed, service):
        alice = await seed.user("Alice", number_of_plants=9)
        bob = await seed.user("Bob", number_of_plants=4)
        carol = await seed.user("Carol", number_of_plants=1)
        alice_post = await seed.post(alice)
        await seed.posts(bob, 3)
        await seed.like(bob, alice_post)
        await seed.like(carol, alice_post)
        await seed.comment(carol, alice_post)

        stats = await service.get_leaderboard_stats(LeaderboardCategory.PLANTS, TimeRange.WEEK)

        assert stats.top_poster == stats.top_posters[0]
        assert stats.top_poster.user_id == bob.id
        assert stats.top_poster.score == 3
        assert stats.most_liked.user_id == alice.id
        assert stats.most_liked.score == 2
        assert stats.top_commenter.user_id == carol.id
        assert stats.top_plant_grower.user_id == bob.id
        assert [e.rank for e in stats.top_posters] == [1, 2]

    async def test_platform_totals_follow_window(self, seed, service):
        author = await seed.user("Author")
        fan = await seed.user("Fan")
        recent = await seed.post(author)
        await seed.post(author, plant_type="Unknown")
        old = await seed.post(author, created_at=days_ago(60))
        await seed.like(fan, recent)
        await seed.like(fan, old)
        await seed.comment(fan, old, created_at=days_ago(60))

        stats = await service.get_leaderboard_stats(LeaderboardCategory.PLANTS, TimeRange.MONTH)

        assert stats.totals.total_users == 2
        assert stats.totals.total_posts == 2
        assert stats.totals.total_plants == 1
        assert stats.totals.total_likes == 1
        assert stats.totals.total_comments == 0
        assert stats.totals.environmental_impact == 20

    async def test_all_time_plant_growers_use_counters(self, seed, service):
        for plants in (3, 12, 0, 8):
            await seed.user(f"Grower {plants}", number_of_plants=plants)

        stats = await service.get_leaderboard_stats(LeaderboardCategory.PLANTS, TimeRange.ALL)

        assert [e.score for e in stats.top_plant_growers] == [12, 8, 3]
        assert stats.top_plant_grower.score == 12
        assert stats.top_posters == []

    async def test_empty_store(self, service):
        stats = await service.get_leaderboard_stats(LeaderboardCategory.ENGAGEMENT, TimeRange.WEEK)

        assert stats.totals.total_users == 0
        assert stats.top_plant_grower is None
        assert stats.most_liked is None
        assert stats.top_commenters == []

    async def test_any_failed_query_fails_the_request(self, session_factory, logger):
        service = build_service(session_factory, logger)
        service.stats_repository = AsyncMock()
        service.stats_repository.count_likes.side_effect = RepositoryError("boom", operation="count_likes")

        with pytest.raises(RepositoryError):
            await service.get_leaderboard_stats(LeaderboardCategory.PLANTS, TimeRange.WEEK)
