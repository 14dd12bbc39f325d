# 📄 File: app/modules/community_social/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# Describes the leaderboard, profile and post listing requests the app can make
# 🧪 Purpose (Technical Summary):
# CQRS query definitions
# 🔗 Dependencies:
# get_leaderboard.py, get_user_profile.py, get_user_posts.py
# 🔄 Connected Modules / Calls From:
# Query handlers, API endpoints
