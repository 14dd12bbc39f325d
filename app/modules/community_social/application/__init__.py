# 📄 File: app/modules/community_social/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Handles incoming leaderboard and profile requests
# 🧪 Purpose (Technical Summary):
# Application layer with CQRS queries and handlers
# 🔗 Dependencies:
# queries, handlers subpackages
# 🔄 Connected Modules / Calls From:
# Presentation layer
