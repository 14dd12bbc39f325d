# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every part
# of the Plant Share app can use, like settings, the database connection and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exceptions, database infrastructure
# and structured logging used by the feature modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.main
# - app.modules.community_social

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (config/)
- Application exceptions (core/)
- Database engine and sessions (infrastructure/database/)
- Structured logging (utils/)
"""

__all__ = []
