# 📄 File: app/modules/community_social/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the community web endpoints
# 🧪 Purpose (Technical Summary):
# API package for the community module
# 🔗 Dependencies:
# schemas, v1 subpackages
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
