# 📄 File: app/modules/community_social/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the community web endpoints
# 🧪 Purpose (Technical Summary):
# FastAPI routers for leaderboards and public profiles
# 🔗 Dependencies:
# leaderboard.py, users.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

"""
Community API Version 1

- leaderboard_router: GET /leaderboard, GET /leaderboard/stats
- users_router: GET /{user_id}

leaderboard_router must be included before users_router so the static
leaderboard paths are not captured by the user id route.
"""
