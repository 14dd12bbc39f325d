# 📄 File: app/modules/community_social/infrastructure/database/metric_sources.py
# 🧭 Purpose (Layman Explanation):
# Counts what each grower has done - plants shared, posts, likes received and comments written -
# either from the running plant total stored on their account or by tallying activity in a time window
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of MetricSource: a counter-backed source over users.number_of_plants and a
# windowed source grouping posts/comments by user, with per-metric aggregates fanned out concurrently
#
# 🔗 Dependencies:
# - SQLAlchemy core select/func
# - app.shared.utils.concurrency (gather_or_cancel)
# - app.modules.community_social.domain (MetricSource, MetricRecord, Metric)
# - query_runner.py (session-per-query execution, RepositoryError wrapping, timing logs)
#
# 🔄 Connected Modules / Calls From:
# - LeaderboardService (through presentation dependencies)

from datetime import datetime
from typing import AbstractSet, Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, select

from app.shared.utils.concurrency import gather_or_cancel

from app.modules.community_social.domain.models.leaderboard import (
    UNKNOWN_PLANT_TYPE,
    Metric,
    MetricRecord,
)
from app.modules.community_social.domain.repositories.metric_source import MetricSource
from app.modules.community_social.infrastructure.database.models import (
    CommentModel,
    PostModel,
    UserModel,
    post_likes,
)
from app.modules.community_social.infrastructure.database.query_runner import ReadOnlyQueryRunner

# MetricRecord field filled by each metric
_METRIC_FIELDS: Dict[Metric, str] = {
    Metric.PLANTS: "plant_count",
    Metric.POSTS: "post_count",
    Metric.LIKES: "like_count",
    Metric.COMMENTS: "comment_count",
}


def _context(metrics: AbstractSet[Metric], since: Optional[datetime]) -> Dict[str, Any]:
    return {
        "metrics": sorted(metric.value for metric in metrics),
        "since": since.isoformat() if since else None,
    }


class CounterMetricSource(ReadOnlyQueryRunner, MetricSource):
    """
    Metric source backed by the lifetime plant counter on each user.

    Serves all-time plant rankings without touching the posts table. Every
    user is returned, including those with a zero counter.
    """

    @property
    def supported_metrics(self) -> AbstractSet[Metric]:
        return frozenset({Metric.PLANTS})

    @property
    def supports_windows(self) -> bool:
        return False

    async def collect(
        self,
        metrics: AbstractSet[Metric],
        since: Optional[datetime] = None,
        limit: Optional[int] = None
    ) -> List[MetricRecord]:
        if not self.supports(metrics, since):
            raise ValueError("Plant counters only provide all-time plant counts")

        # Same ordering as the ranker so a pushed-down limit keeps the right users
        stmt = (
            select(UserModel.id, UserModel.name, UserModel.avatar_url, UserModel.number_of_plants)
            .order_by(UserModel.number_of_plants.desc(), UserModel.id.asc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        rows = await self._fetch_all(
            stmt, "collect_plant_counters", "users", {**_context(metrics, since), "limit": limit}
        )

        return [
            MetricRecord(
                user_id=user_id,
                name=name or "",
                avatar_url=avatar_url,
                number_of_plants=plants or 0,
                plant_count=plants or 0,
            )
            for user_id, name, avatar_url, plants in rows
        ]


class WindowedMetricSource(ReadOnlyQueryRunner, MetricSource):
    """
    Metric source aggregating posts and comments created in a time window.

    Metrics:
    - plants: posts whose plant type is known
    - posts: all posts
    - likes: likes received on those posts
    - comments: comments the user wrote

    Each requested metric is one grouped query; the queries run concurrently
    and are merged per user afterwards. Users without any row in the requested
    aggregates are not returned.
    """

    @property
    def supported_metrics(self) -> AbstractSet[Metric]:
        return frozenset(Metric)

    @property
    def supports_windows(self) -> bool:
        return True

    async def collect(
        self,
        metrics: AbstractSet[Metric],
        since: Optional[datetime] = None,
        limit: Optional[int] = None
    ) -> List[MetricRecord]:
        if not self.supports(metrics, since):
            raise ValueError(f"Unsupported metrics: {set(metrics) - set(self.supported_metrics)}")

        requested = sorted(metrics, key=lambda metric: metric.value)
        context = _context(metrics, since)

        counts = await gather_or_cancel(
            *(self._count_by_user(metric, since, context) for metric in requested)
        )

        merged: Dict[UUID, Dict[str, int]] = {}
        for metric, per_user in zip(requested, counts):
            for user_id, count in per_user.items():
                merged.setdefault(user_id, {})[_METRIC_FIELDS[metric]] = count

        if not merged:
            return []

        users = await self._load_users(list(merged), context)

        records = []
        for user_id, values in merged.items():
            user = users.get(user_id)
            if user is None:
                # Activity left behind by a deleted account
                continue
            name, avatar_url, number_of_plants = user
            records.append(MetricRecord(
                user_id=user_id,
                name=name or "",
                avatar_url=avatar_url,
                number_of_plants=number_of_plants or 0,
                **values,
            ))

        return records

    async def _count_by_user(
        self,
        metric: Metric,
        since: Optional[datetime],
        context: Dict[str, Any]
    ) -> Dict[UUID, int]:
        if metric == Metric.COMMENTS:
            stmt = select(CommentModel.user_id, func.count(CommentModel.id))
            if since is not None:
                stmt = stmt.where(CommentModel.created_at >= since)
            stmt = stmt.group_by(CommentModel.user_id)
            table = "comments"

        elif metric == Metric.LIKES:
            # Outer join keeps authors whose posts have no likes yet
            stmt = (
                select(PostModel.user_id, func.count(post_likes.c.user_id))
                .select_from(PostModel)
                .outerjoin(post_likes, post_likes.c.post_id == PostModel.id)
            )
            if since is not None:
                stmt = stmt.where(PostModel.created_at >= since)
            stmt = stmt.group_by(PostModel.user_id)
            table = "post_likes"

        else:
            stmt = select(PostModel.user_id, func.count(PostModel.id))
            if metric == Metric.PLANTS:
                stmt = stmt.where(PostModel.plant_type != UNKNOWN_PLANT_TYPE)
            if since is not None:
                stmt = stmt.where(PostModel.created_at >= since)
            stmt = stmt.group_by(PostModel.user_id)
            table = "posts"

        rows = await self._fetch_all(
            stmt, f"count_{metric.value}_by_user", table, context
        )
        return {user_id: int(count or 0) for user_id, count in rows}

    async def _load_users(self, user_ids: List[UUID], context: Dict[str, Any]) -> Dict[UUID, tuple]:
        stmt = (
            select(UserModel.id, UserModel.name, UserModel.avatar_url, UserModel.number_of_plants)
            .where(UserModel.id.in_(user_ids))
        )
        rows = await self._fetch_all(stmt, "load_ranked_users", "users", context)
        return {user_id: (name, avatar_url, plants) for user_id, name, avatar_url, plants in rows}
