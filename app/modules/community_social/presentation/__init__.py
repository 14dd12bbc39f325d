# 📄 File: app/modules/community_social/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the community features
# 🧪 Purpose (Technical Summary):
# Presentation layer: routers, schemas and dependency providers
# 🔗 Dependencies:
# api subpackage, dependencies.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
