# 📄 File: app/modules/community_social/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about the grower community - profiles, leaderboards and the statistics that celebrate active plant lovers
# 🧪 Purpose (Technical Summary):
# Community & social module: leaderboard ranking engine, platform statistics, public profiles and profile post listings
# 🔗 Dependencies:
# Domain, application, infrastructure and presentation subpackages
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

"""
Community & Social Module

Layers:
- domain: leaderboard/profile models, metric source interfaces, scoring, ranking and assembly services
- application: CQRS queries and query handlers
- infrastructure: SQLAlchemy models, metric sources, statistics and post feed repositories
- presentation: FastAPI routers, response schemas and dependency providers
"""
