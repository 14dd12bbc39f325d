# 📄 File: app/modules/community_social/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Contracts for where leaderboard and profile numbers come from
# 🧪 Purpose (Technical Summary):
# Repository interfaces: MetricSource, CommunityStatsRepository, PostFeedRepository
# 🔗 Dependencies:
# metric_source.py, community_stats_repository.py, post_feed_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations
