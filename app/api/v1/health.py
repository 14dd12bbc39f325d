# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the Plant Share API is working properly,
# like a doctor's checkup for the database connection and the server itself
# 🧪 Purpose (Technical Summary):
# Health and readiness endpoints reporting database connectivity, session factory status,
# connection pool statistics and process/system resource metrics
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.infrastructure.database (connection and session health)
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import (
    database_health_check as db_health_check,
    get_connection_info,
)
from app.shared.infrastructure.database.session import session_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()

SERVICE_NAME = "plant-share-api"

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uptime_seconds() -> float:
    return (datetime.now(timezone.utc) - _app_start_time).total_seconds()


@health_router.get(
    "/health",
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring"
)
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status without touching the database.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
        }
    )


@health_router.get(
    "/health/detailed",
    summary="Detailed Health Check",
    description="Health of the database, session factory and host resources"
)
async def detailed_health_check() -> JSONResponse:
    """
    Comprehensive health check

    Checks:
    - Database connectivity and pool statistics
    - Session factory
    - System resources (psutil)

    Returns 503 when the database is unreachable, 200 otherwise.
    """
    start_time = datetime.now(timezone.utc)
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    db_health = await db_health_check()
    components["database"] = {**db_health, "connection": await get_connection_info()}
    if db_health["status"] != "healthy":
        overall_status = "unhealthy"

    session_health = await session_health_check()
    components["sessions"] = session_health
    if session_health["status"] != "healthy" and overall_status == "healthy":
        overall_status = "degraded"

    system_metrics = _get_system_metrics()
    components["system"] = system_metrics
    if (system_metrics["cpu_percent"] > 90 or
            system_metrics["memory_percent"] > 90 or
            system_metrics["disk_percent"] > 95):
        if overall_status == "healthy":
            overall_status = "degraded"

    response_time = (datetime.now(timezone.utc) - start_time).total_seconds()

    return JSONResponse(
        status_code=503 if overall_status == "unhealthy" else 200,
        content={
            "status": overall_status,
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "environment": get_settings().ENVIRONMENT,
            "uptime_seconds": _uptime_seconds(),
            "response_time_seconds": response_time,
            "components": components,
        }
    )


@health_router.get(
    "/health/ready",
    summary="Readiness Probe",
    description="Returns 200 once the database is reachable"
)
async def readiness_probe() -> JSONResponse:
    db_health = await db_health_check()

    if db_health["status"] == "healthy":
        return JSONResponse(status_code=200, content={"status": "ready", "timestamp": _now()})

    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": _now(),
        }
    )


def _get_system_metrics() -> Dict[str, Any]:
    """Get basic system and process metrics"""
    # interval=None compares against the previous call instead of blocking
    cpu_percent = psutil.cpu_percent(interval=None)
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage('/')
    process = psutil.Process()

    return {
        "status": "healthy",
        "cpu_percent": cpu_percent,
        "memory_percent": memory.percent,
        "disk_percent": (disk.used / disk.total) * 100,
        "process": {
            "pid": process.pid,
            "memory_info_bytes": process.memory_info().rss,
            "num_threads": process.num_threads(),
        },
        "uptime_seconds": _uptime_seconds(),
        "timestamp": _now(),
    }
