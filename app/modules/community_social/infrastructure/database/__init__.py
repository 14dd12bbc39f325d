# 📄 File: app/modules/community_social/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database tables and queries for growers, posts and comments
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models, metric sources, statistics and post feed repository implementations
# 🔗 Dependencies:
# models.py, metric_sources.py, community_stats_repository_impl.py, post_feed_repository_impl.py, query_runner.py
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, migrations/env.py, tests
