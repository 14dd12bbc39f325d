# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, like making sure we can talk to our data storage
# and handling multiple connections efficiently without overwhelming the database.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy database connection management with connection pooling, health checks,
# and retry logic for robust database connectivity across all modules.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine and declarative base)
# - app/shared/config/settings.py (database configuration)
# - asyncpg (PostgreSQL async driver), aiosqlite for local/test databases
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - app/modules/community_social/infrastructure/database/models.py (declarative base)
# - app/api/v1/health.py (database health monitoring)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from app.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Shared declarative base for every module's ORM models
Base = declarative_base()


def build_engine_params(settings: Settings) -> Dict[str, Any]:
    """
    Build SQLAlchemy engine parameters from settings.

    Pool sizing and asyncpg connect args only apply to PostgreSQL; SQLite
    (used for local runs and tests) keeps SQLAlchemy's defaults.
    """
    params: Dict[str, Any] = {
        "url": settings.database_url,
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,  # Validate connections before use
    }

    if settings.is_postgres:
        params.update({
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "connect_args": {
                "server_settings": {
                    "application_name": "plant_share_backend",
                    "jit": "off"
                },
                "command_timeout": settings.DB_COMMAND_TIMEOUT,
                "statement_cache_size": 0,
            },
        })
    else:
        params["connect_args"] = {"timeout": settings.DB_COMMAND_TIMEOUT}

    return params


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    async def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """
        Initialize database engine with connection pooling.

        Args:
            engine: Pre-built engine to adopt instead of creating one from settings
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        settings = get_settings()
        try:
            logger.info("Initializing database connection pool...")
            self._engine = engine or create_async_engine(**build_engine_params(settings))

            self._register_connection_events()

            health = await self.health_check()
            if health["status"] != "healthy":
                raise ConnectionError(health.get("error", "Database unreachable"))

            logger.info("Database connection pool initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            if self._engine is not None and engine is None:
                await self._engine.dispose()
            self._engine = None
            raise

    def _register_connection_events(self) -> None:
        """Register SQLAlchemy connection event listeners."""
        if self._engine is None or not get_settings().debug:
            return

        @event.listens_for(self._engine.sync_engine, "checkout")
        def receive_checkout(dbapi_connection, connection_record, connection_proxy):
            logger.debug("Connection checked out from pool")

        @event.listens_for(self._engine.sync_engine, "checkin")
        def receive_checkin(dbapi_connection, connection_record):
            logger.debug("Connection checked in to pool")

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def get_connection_info(self) -> Dict[str, Any]:
        """
        Get current connection pool information for monitoring.

        Returns:
            Dict containing pool statistics
        """
        if self._engine is None:
            return {"status": "not_initialized"}

        return {
            "status": "initialized",
            "dialect": self._engine.dialect.name,
            "pool": self._engine.pool.status(),
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database connection manager."""
    logger.info("Starting database initialization...")
    await db_manager.initialize(engine)
    logger.info("Database initialization completed successfully.")


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


async def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Returns:
        AsyncEngine: SQLAlchemy async engine

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    return db_manager.engine


async def database_health_check() -> dict:
    """Perform database health check."""
    return await db_manager.health_check()


async def get_connection_info() -> Dict[str, Any]:
    """Get database connection pool information."""
    return await db_manager.get_connection_info()
