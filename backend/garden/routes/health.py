"""
Community Garden Backend — Health Check Route
==============================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the database with SELECT 1 and reports version and uptime.
Who:   Docker health checks, load balancers, uptime monitors.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)

Not behind the admin credentials: probes carry no auth.
"""

import logging
import time

from fastapi import APIRouter, Request, Response, status

from garden import __version__
from garden.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    database = request.app.state.database
    connected = await database.ping()

    if not connected:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
