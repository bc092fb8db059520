"""Health & Readiness Checks — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the configured store is unreachable (readiness)
    - The in-memory store is always ready
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from user_api.config import get_settings
from user_api.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "user-api", "version": "1.0.0"}


@router.get("/ready")
async def readiness_check():
    """Readiness check, includes database connectivity when it is the store."""
    if get_settings().user_store == "memory":
        return {"status": "ready", "checks": {"store": "memory"}}
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Database unavailable", "status": 503},
        )
    return {"status": "ready", "checks": {"store": "database"}}
