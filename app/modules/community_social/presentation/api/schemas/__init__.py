# 📄 File: app/modules/community_social/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The response formats sent back to the app
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas with camelCase serialization
# 🔗 Dependencies:
# leaderboard_schemas.py, profile_schemas.py
# 🔄 Connected Modules / Calls From:
# v1 endpoints
