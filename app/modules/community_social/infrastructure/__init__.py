# 📄 File: app/modules/community_social/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connects the community features to the database
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for the community module
# 🔗 Dependencies:
# database subpackage
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, migrations
