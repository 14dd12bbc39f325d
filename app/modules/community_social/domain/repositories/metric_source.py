# 📄 File: app/modules/community_social/domain/repositories/metric_source.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for "where do leaderboard numbers come from" - either the plant counters stored
# on each user, or counting up posts, likes and comments made during a time window
# 🧪 Purpose (Technical Summary):
# Repository interface for per-user metric aggregation, with a counter-backed and a windowed-aggregate
# implementation living in the infrastructure layer
# 🔗 Dependencies:
# Domain models (Metric, MetricRecord), typing, abc
# 🔄 Connected Modules / Calls From:
# leaderboard_service.py, infrastructure/database/metric_sources.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import AbstractSet, List, Optional

from ..models.leaderboard import Metric, MetricRecord


class MetricSource(ABC):
    """
    Repository interface producing per-user metric records.

    Implementations decide how the counts are obtained; the scoring and
    ranking stages treat every source the same way.

    Implementation Notes:
    - Only the requested metrics are aggregated, the rest stay at zero
    - Records for users that no longer exist are dropped
    - Failures surface as RepositoryError, never as partial results
    """

    @property
    @abstractmethod
    def supported_metrics(self) -> AbstractSet[Metric]:
        """Metrics this source can produce."""
        pass

    @property
    @abstractmethod
    def supports_windows(self) -> bool:
        """Whether the source can restrict counts to a time window."""
        pass

    @abstractmethod
    async def collect(
        self,
        metrics: AbstractSet[Metric],
        since: Optional[datetime] = None,
        limit: Optional[int] = None
    ) -> List[MetricRecord]:
        """
        Aggregate metrics per user.

        Args:
            metrics: Metrics to aggregate
            since: Inclusive lower bound on activity timestamps (None for all time)
            limit: Optional hint that only the top `limit` users by the
                requested metric are needed; sources may ignore it

        Returns:
            One MetricRecord per qualifying user, in no particular order

        Raises:
            ValueError: If a metric or window is not supported by this source
            RepositoryError: If the underlying query fails
        """
        pass

    def supports(self, metrics: AbstractSet[Metric], since: Optional[datetime] = None) -> bool:
        """Check whether this source can serve a request."""
        if since is not None and not self.supports_windows:
            return False
        return set(metrics) <= set(self.supported_metrics)
