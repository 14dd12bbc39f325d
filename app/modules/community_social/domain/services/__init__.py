# 📄 File: app/modules/community_social/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The scoring, ranking and assembling steps behind each leaderboard
# 🧪 Purpose (Technical Summary):
# Scoring/ranking functions and the leaderboard, profile and post feed domain services
# 🔗 Dependencies:
# scoring.py, ranking.py, leaderboard_service.py, profile_service.py, post_feed_service.py
# 🔄 Connected Modules / Calls From:
# Application query handlers
