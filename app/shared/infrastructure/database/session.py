# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) so every leaderboard
# question gets its own clean, read-only session that is always closed afterwards.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management: a session factory bound to the shared engine,
# read-only sessions for concurrent aggregation queries, and a session health check.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/modules/community_social/presentation/dependencies.py (repository wiring)
# - Metric sources and statistics repositories (one read-only session per query)
# - app/api/v1/health.py (session health)

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import exc, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages read-only database sessions with automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize the session factory with database engine."""
        try:
            engine = await get_database_engine()

            self._session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Keep objects accessible after commit
                autoflush=True,
            )

            self._initialized = True
            logger.info("Database session factory initialized successfully")

        except RuntimeError as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}", operation="initialize")

    def reset(self) -> None:
        """Drop the session factory, e.g. after the engine was disposed."""
        self._session_factory = None
        self._initialized = False

    @asynccontextmanager
    async def get_read_only_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a read-only database session (no automatic commit).

        Each aggregation query of the leaderboard fan-out opens one of these,
        since a single AsyncSession cannot run statements concurrently.

        Yields:
            AsyncSession: Read-only database session
        """
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized", operation="get_read_only_session")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Read-only database session created")
            yield session

        finally:
            await session.close()
            logger.debug("Read-only database session closed")

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._initialized


# Global session manager instance
session_manager = DatabaseSessionManager()


async def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    await session_manager.initialize()


@asynccontextmanager
async def read_only_database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for read-only database session management.

    This is the session factory handed to metric sources and statistics
    repositories; every call yields an independent session.

    Yields:
        AsyncSession: Read-only database session
    """
    async with session_manager.get_read_only_session() as session:
        yield session


async def session_health_check() -> Dict[str, Any]:
    """
    Perform session health check by creating and closing a session.

    Returns:
        Dict containing session health information
    """
    try:
        async with session_manager.get_read_only_session() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()

        return {
            "status": "healthy",
            "initialized": session_manager.is_initialized(),
            "message": "Session factory working correctly"
        }

    except (DatabaseError, exc.SQLAlchemyError) as e:
        return {
            "status": "unhealthy",
            "initialized": session_manager.is_initialized(),
            "error": str(e),
            "message": "Session factory error"
        }
