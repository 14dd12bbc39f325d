"""
Tests for the SQLAlchemy metric sources and statistics repository
"""

from uuid import uuid4

import pytest

from app.shared.core.exceptions import RepositoryError
from app.modules.community_social.domain.models.leaderboard import Metric, TimeRange
from app.modules.community_social.infrastructure.database.community_stats_repository_impl import (
    CommunityStatsRepositoryImpl,
)
from app.modules.community_social.infrastructure.database.metric_sources import (
    CounterMetricSource,
    WindowedMetricSource,
)

from .conftest import NOW, days_ago

ALL_METRICS = frozenset(Metric)


@pytest.fixture
def counter_source(session_factory, logger):
    return CounterMetricSource(session_factory, logger)


@pytest.fixture
def windowed_source(session_factory, logger):
    return WindowedMetricSource(session_factory, logger)


@pytest.fixture
def stats_repository(session_factory, logger):
    return CommunityStatsRepositoryImpl(session_factory, logger)


class TestCounterMetricSource:

    async def test_returns_every_user_with_plant_counter(self, seed, counter_source):
        maya = await seed.user("Maya", number_of_plants=7)
        await seed.user("Idle", number_of_plants=0)

        records = await counter_source.collect(frozenset({Metric.PLANTS}))

        assert len(records) == 2
        assert records[0].user_id == maya.id
        assert records[0].plant_count == records[0].number_of_plants == 7
        assert records[1].plant_count == 0

    async def test_limit_keeps_highest_counters(self, seed, counter_source):
        for plants in (1, 9, 4, 6):
            await seed.user(f"Grower {plants}", number_of_plants=plants)

        records = await counter_source.collect(frozenset({Metric.PLANTS}), limit=2)

        assert [r.plant_count for r in records] == [9, 6]

    async def test_rejects_windows_and_other_metrics(self, counter_source):
        assert counter_source.supports(frozenset({Metric.PLANTS}), None)
        assert not counter_source.supports(frozenset({Metric.PLANTS}), days_ago(7))
        assert not counter_source.supports(frozenset({Metric.POSTS}), None)

        with pytest.raises(ValueError):
            await counter_source.collect(frozenset({Metric.PLANTS}), days_ago(7))


class TestWindowedMetricSource:

    async def test_counts_each_metric_in_window(self, seed, windowed_source):
        author = await seed.user("Author", number_of_plants=40)
        fan = await seed.user("Fan")

        plant_post = await seed.post(author)
        await seed.post(author, plant_type="Unknown")
        await seed.post(author, created_at=days_ago(10))
        await seed.like(fan, plant_post)
        await seed.comment(fan, plant_post)
        await seed.comment(fan, plant_post, created_at=days_ago(20))

        records = await windowed_source.collect(ALL_METRICS, TimeRange.WEEK.window_start(NOW))
        by_name = {r.name: r for r in records}

        assert by_name["Author"].plant_count == 1
        assert by_name["Author"].post_count == 2
        assert by_name["Author"].like_count == 1
        assert by_name["Author"].number_of_plants == 40
        assert by_name["Fan"].comment_count == 1
        assert by_name["Fan"].post_count == 0

    async def test_all_time_includes_old_activity(self, seed, windowed_source):
        author = await seed.user("Author")
        await seed.post(author, created_at=days_ago(400))
        await seed.post(author, created_at=days_ago(40))

        [record] = await windowed_source.collect(frozenset({Metric.POSTS}))

        assert record.post_count == 2

    async def test_inactive_users_are_omitted(self, seed, windowed_source):
        await seed.user("Lurker")

        assert await windowed_source.collect(ALL_METRICS, days_ago(7)) == []

    async def test_activity_of_missing_users_is_dropped(self, seed, windowed_source):
        await seed.post(uuid4())
        author = await seed.user("Author")
        await seed.post(author)

        records = await windowed_source.collect(frozenset({Metric.PLANTS}), days_ago(7))

        assert [r.user_id for r in records] == [author.id]

    async def test_database_failure_becomes_repository_error(self, broken_session_factory, logger):
        source = WindowedMetricSource(broken_session_factory, logger)

        with pytest.raises(RepositoryError) as exc_info:
            await source.collect(frozenset({Metric.POSTS}), days_ago(7))

        assert exc_info.value.error_code == "REPOSITORY_ERROR"
        assert exc_info.value.details["entity"] == "posts"


class TestCommunityStatsRepository:

    async def test_platform_counts(self, seed, stats_repository):
        author = await seed.user("Author")
        fan = await seed.user("Fan")
        recent = await seed.post(author)
        old = await seed.post(author, plant_type="Unknown", created_at=days_ago(45))
        await seed.like(fan, recent)
        await seed.like(fan, old)
        await seed.comment(fan, recent)

        since = days_ago(30)

        assert await stats_repository.count_users() == 2
        assert await stats_repository.count_posts() == 2
        assert await stats_repository.count_posts(since) == 1
        assert await stats_repository.count_plant_posts() == 1
        assert await stats_repository.count_likes() == 2
        assert await stats_repository.count_likes(since) == 1
        assert await stats_repository.count_comments(since) == 1

    async def test_empty_store_counts_zero(self, stats_repository):
        assert await stats_repository.count_users() == 0
        assert await stats_repository.count_likes(days_ago(7)) == 0

    async def test_user_summary_and_activity(self, seed, stats_repository):
        maya = await seed.user(
            "Maya",
            number_of_plants=3,
            bio="Balcony jungle",
            address="Lisbon",
            latitude=38.72,
            longitude=-9.14,
        )
        fan = await seed.user("Fan")
        post = await seed.post(maya)
        await seed.like(fan, post)
        await seed.save(maya, post)

        summary = await stats_repository.get_user_summary(maya.id)
        activity = await stats_repository.get_profile_activity(maya.id)

        assert summary.name == "Maya"
        assert summary.bio == "Balcony jungle"
        assert summary.location.address == "Lisbon"
        assert summary.number_of_plants == 3
        assert activity.posts == 1
        assert activity.likes_received == 1
        assert activity.saved_posts == 1

    async def test_unknown_user_summary_is_none(self, stats_repository):
        assert await stats_repository.get_user_summary(uuid4()) is None
