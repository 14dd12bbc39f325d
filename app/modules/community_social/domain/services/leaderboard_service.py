# 📄 File: app/modules/community_social/domain/services/leaderboard_service.py
# 🧭 Purpose (Layman Explanation):
# Builds the community leaderboards and the "who's on top" statistics page by gathering everyone's
# activity, scoring it and putting growers in order
# 🧪 Purpose (Technical Summary):
# Domain service assembling leaderboards and platform statistics: selects a metric source, fans out
# independent aggregation queries concurrently, scores and ranks the results with one shared ranker
# 🔗 Dependencies:
# gather_or_cancel, metric sources, community stats repository, scoring/ranking functions, StructuredLogger
# 🔄 Connected Modules / Calls From:
# Application query handlers, presentation dependencies

import time
from datetime import datetime, timezone
from typing import AbstractSet, Callable, List, Optional

from app.shared.utils.concurrency import gather_or_cancel
from app.shared.utils.logging import StructuredLogger

from ..models.leaderboard import (
    CATEGORY_METRICS,
    Leaderboard,
    LeaderboardCategory,
    LeaderboardStats,
    Metric,
    MetricRecord,
    PlatformTotals,
    RankedEntry,
    TimeRange,
)
from ..repositories.community_stats_repository import CommunityStatsRepository
from ..repositories.metric_source import MetricSource
from .ranking import rank_entries
from .scoring import score_by_metric, score_records


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LeaderboardService:
    """
    Domain service for leaderboards and community statistics.

    All-time plant and CO2 rankings read the stored plant counters; every
    other ranking aggregates posts and comments inside the requested window.
    Both paths flow through the same scoring and ranking functions.
    """

    def __init__(
        self,
        counter_source: MetricSource,
        windowed_source: MetricSource,
        stats_repository: CommunityStatsRepository,
        logger: StructuredLogger,
        top_count: int = 3,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.counter_source = counter_source
        self.windowed_source = windowed_source
        self.stats_repository = stats_repository
        self.logger = logger
        self.top_count = top_count
        self._clock = clock or _utcnow

    def select_source(self, metrics: AbstractSet[Metric], since: Optional[datetime]) -> MetricSource:
        """Prefer the counter source whenever it can answer the request."""
        if self.counter_source.supports(metrics, since):
            return self.counter_source
        return self.windowed_source

    async def get_leaderboard(
        self,
        category: LeaderboardCategory,
        time_range: TimeRange,
        limit: int
    ) -> Leaderboard:
        """
        Compute a ranked leaderboard.

        Args:
            category: Ranking dimension (already resolved)
            time_range: Activity window (already resolved)
            limit: Maximum number of entries, at least 1

        Returns:
            Leaderboard with at most `limit` ranked entries

        Raises:
            RepositoryError: If any aggregation query fails
        """
        context = {
            "category": category.value,
            "time_range": time_range.value,
            "limit": limit,
        }
        started = time.perf_counter()

        try:
            since = time_range.window_start(self._clock())
            metrics = CATEGORY_METRICS[category]
            source = self.select_source(metrics, since)

            records = await source.collect(metrics, since, limit=limit)
            entries = rank_entries(score_records(records, category), limit)

        except Exception as e:
            self.logger.error(
                f"Leaderboard computation failed: {e}",
                extra={**context, "error_type": type(e).__name__},
                exc_info=True
            )
            raise

        self.logger.info(
            "Leaderboard computed",
            extra={
                **context,
                "source": type(source).__name__,
                "entries": len(entries),
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            }
        )

        return Leaderboard(
            category=category,
            time_range=time_range,
            limit=limit,
            entries=entries,
        )

    async def get_leaderboard_stats(
        self,
        category: LeaderboardCategory,
        time_range: TimeRange
    ) -> LeaderboardStats:
        """
        Compute platform totals and top performers for a time range.

        Every count and metric aggregation is an independent read, so they
        are issued together and joined before assembly. A single failure
        fails the whole request.

        Raises:
            RepositoryError: If any query fails
        """
        context = {"category": category.value, "time_range": time_range.value}
        started = time.perf_counter()
        since = time_range.window_start(self._clock())
        all_time = since is None

        try:
            queries = [
                self.stats_repository.count_users(),
                self.stats_repository.count_posts(since),
                self.stats_repository.count_comments(since),
                self.stats_repository.count_likes(since),
                self.stats_repository.count_plant_posts(since),
                self.windowed_source.collect(frozenset(Metric), since),
            ]
            if all_time:
                queries.append(
                    self.counter_source.collect(
                        frozenset({Metric.PLANTS}), None, limit=self.top_count
                    )
                )

            results = await gather_or_cancel(*queries)

        except Exception as e:
            self.logger.error(
                f"Leaderboard statistics failed: {e}",
                extra={**context, "error_type": type(e).__name__},
                exc_info=True
            )
            raise

        total_users, total_posts, total_comments, total_likes, total_plants, activity = results[:6]

        if all_time:
            plant_growers = self._rank_plant_counters(results[6])
        else:
            plant_growers = rank_entries(score_by_metric(activity, Metric.PLANTS), self.top_count)

        stats = LeaderboardStats(
            category=category,
            time_range=time_range,
            totals=PlatformTotals(
                total_users=total_users,
                total_posts=total_posts,
                total_comments=total_comments,
                total_likes=total_likes,
                total_plants=total_plants,
            ),
            top_plant_growers=plant_growers,
            top_posters=rank_entries(score_by_metric(activity, Metric.POSTS), self.top_count),
            top_liked=rank_entries(score_by_metric(activity, Metric.LIKES), self.top_count),
            top_commenters=rank_entries(score_by_metric(activity, Metric.COMMENTS), self.top_count),
        )

        self.logger.info(
            "Leaderboard statistics computed",
            extra={
                **context,
                "active_users": len(activity),
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            }
        )
        return stats

    def _rank_plant_counters(self, records: List[MetricRecord]) -> List[RankedEntry]:
        # Same ranking as the all-time plants leaderboard, zero counters included
        return rank_entries(score_records(records, LeaderboardCategory.PLANTS), self.top_count)
