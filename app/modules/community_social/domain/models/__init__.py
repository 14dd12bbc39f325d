# 📄 File: app/modules/community_social/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of leaderboard rows, statistics, profiles and post listings
# 🧪 Purpose (Technical Summary):
# Domain value objects for ranking and profiles
# 🔗 Dependencies:
# leaderboard.py, profile.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, handlers, schemas
