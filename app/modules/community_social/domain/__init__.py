# 📄 File: app/modules/community_social/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of our leaderboards - how growers are scored and put in order
# 🧪 Purpose (Technical Summary):
# Domain layer: leaderboard and profile models, repository interfaces and domain services
# 🔗 Dependencies:
# Domain models, repositories, services subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, infrastructure layer
