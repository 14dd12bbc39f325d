"""
Tests for leaderboard query resolution and time windows
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.modules.community_social.application.queries.get_leaderboard import (
    GetLeaderboardQuery,
    resolve_limit,
)
from app.modules.community_social.domain.models.leaderboard import (
    LeaderboardCategory,
    PlatformTotals,
    TimeRange,
    environmental_impact,
)


class TestCategoryResolution:

    @pytest.mark.parametrize("raw, expected", [
        ("plants", LeaderboardCategory.PLANTS),
        ("co2", LeaderboardCategory.CO2),
        ("engagement", LeaderboardCategory.ENGAGEMENT),
        ("CO2", LeaderboardCategory.CO2),
        ("followers", LeaderboardCategory.PLANTS),
        ("", LeaderboardCategory.PLANTS),
        (None, LeaderboardCategory.PLANTS),
    ])
    def test_resolve(self, raw, expected):
        assert LeaderboardCategory.resolve(raw) == expected


class TestTimeRange:

    @pytest.mark.parametrize("raw, expected", [
        ("week", TimeRange.WEEK),
        ("month", TimeRange.MONTH),
        ("all", TimeRange.ALL),
        ("year", TimeRange.ALL),
        (None, TimeRange.ALL),
    ])
    def test_resolve(self, raw, expected):
        assert TimeRange.resolve(raw) == expected

    def test_rolling_windows(self):
        now = datetime(2026, 3, 31, 9, 30, tzinfo=timezone.utc)

        assert TimeRange.WEEK.window_start(now) == now - timedelta(days=7)
        assert TimeRange.MONTH.window_start(now) == now - timedelta(days=30)
        assert TimeRange.ALL.window_start(now) is None

    def test_window_defaults_to_current_time(self):
        start = TimeRange.WEEK.window_start()
        expected = datetime.now(timezone.utc) - timedelta(days=7)

        assert abs((expected - start).total_seconds()) < 5


class TestLimitResolution:

    @pytest.mark.parametrize("raw, expected", [
        (None, 10),
        ("5", 5),
        (" 25 ", 25),
        ("0", 10),
        ("-3", 10),
        ("ten", 10),
        ("2.5", 2),
        ("5abc", 5),
        ("abc5", 10),
        ("-", 10),
        ("100", 100),
        ("500", 100),
    ])
    def test_resolve_limit(self, raw, expected):
        assert resolve_limit(raw, default=10, maximum=100) == expected

    def test_query_resolves_every_parameter(self):
        query = GetLeaderboardQuery(category="bogus", time_range="fortnight", limit="-1")

        assert query.resolved_category() == LeaderboardCategory.PLANTS
        assert query.resolved_time_range() == TimeRange.ALL
        assert query.resolved_limit(default=10, maximum=100) == 10


def test_environmental_impact_is_twenty_per_plant():
    assert environmental_impact(0) == 0
    assert environmental_impact(7) == 140
    assert PlatformTotals(total_plants=3).environmental_impact == 60
