# 📄 File: app/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the code that opens and shares connections to the Plant Share database
# 🧪 Purpose (Technical Summary):
# Package initialization for the async SQLAlchemy engine (connection.py) and session factory (session.py)
# 🔗 Dependencies:
# SQLAlchemy async
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.health, community_social infrastructure and dependencies

from .connection import Base, close_database, init_database
from .session import read_only_database_session

__all__ = [
    "Base",
    "init_database",
    "close_database",
    "read_only_database_session",
]
