# 📄 File: app/modules/community_social/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The request handlers that call the right service
# 🧪 Purpose (Technical Summary):
# CQRS query handlers
# 🔗 Dependencies:
# query_handlers.py
# 🔄 Connected Modules / Calls From:
# Presentation dependencies
