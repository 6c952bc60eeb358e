"""
RouteDemo Backend — Health Check Route
=======================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   Lets a process supervisor tell "running" apart from "able to serve".
How:   Reports the storage directory's writability, the debug flag and uptime.

Status levels:
    - healthy:   storage directory writable (HTTP 200)
    - degraded:  storage directory missing or read-only (HTTP 200; the
                 greeting, blog and user routes still work)
"""

import logging
import time

from fastapi import APIRouter, Depends

from routedemo import __version__
from routedemo.config import Settings
from routedemo.context import get_file_service, get_settings
from routedemo.schemas.responses import HealthResponse
from routedemo.services.file_service import FileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    file_service: FileService = Depends(get_file_service),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    storage = "writable"
    overall = "healthy"

    if not file_service.is_writable():
        storage = "unwritable"
        overall = "degraded"
        logger.warning("Health check: storage directory %s is not writable", file_service.storage_root)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage,
        debug=settings.debug,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
