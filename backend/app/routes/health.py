"""
Inkpost Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   The API is only usable when the post store is reachable.
How:   Runs SELECT 1 against the store and reports the result.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   store reachable
    - unhealthy: store unreachable
"""

import logging
import time

from fastapi import APIRouter

from app import __version__
from app import database
from app.schemas.post import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the backend service and its post store.",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await database.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
