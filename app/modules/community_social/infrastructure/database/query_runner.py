# 📄 File: app/modules/community_social/infrastructure/database/query_runner.py
# 🧭 Purpose (Layman Explanation):
# A small helper that runs one read-only database question at a time, times how long it took,
# and turns database failures into our own clear error type
#
# 🧪 Purpose (Technical Summary):
# Base class for read-only repositories: opens an independent session per statement so callers can
# run statements concurrently, logs query timings and wraps SQLAlchemyError in RepositoryError
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - app.shared.core.exceptions (RepositoryError)
# - app.shared.utils.logging (StructuredLogger performance helper)
#
# 🔄 Connected Modules / Calls From:
# - metric_sources.py
# - community_stats_repository_impl.py

import time
from typing import Any, AsyncContextManager, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from app.shared.core.exceptions import RepositoryError
from app.shared.utils.logging import StructuredLogger

# Yields a fresh read-only session on every call
SessionFactory = Callable[[], AsyncContextManager[AsyncSession]]


class ReadOnlyQueryRunner:
    """
    Runs read-only statements, each on its own session.

    An AsyncSession cannot execute statements concurrently, so every
    statement gets a separate session from the factory.
    """

    def __init__(self, session_factory: SessionFactory, logger: StructuredLogger):
        self._session_factory = session_factory
        self._logger = logger

    async def _fetch_all(
        self,
        statement: Executable,
        operation: str,
        table: str,
        context: Optional[Dict[str, Any]] = None
    ) -> List[Any]:
        """Execute a statement and return all result rows."""
        started = time.perf_counter()
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                rows = list(result.all())

        except SQLAlchemyError as e:
            self._logger.error(
                f"Database error during {operation}: {e}",
                extra={"operation": operation, "table": table, **(context or {})}
            )
            raise RepositoryError(
                f"Failed to {operation.replace('_', ' ')}",
                operation=operation,
                entity=table,
                context=context,
            ) from e

        self._logger.performance.log_database_query(
            query_type=operation,
            table=table,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            rows_affected=len(rows),
            extra=context,
        )
        return rows

    async def _fetch_scalar(
        self,
        statement: Executable,
        operation: str,
        table: str,
        context: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Execute a statement returning a single value (None when no row)."""
        rows = await self._fetch_all(statement, operation, table, context)
        return rows[0][0] if rows else None
