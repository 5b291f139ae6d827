"""Health, Info & Metrics Probes: operational endpoints under /actuator.

Invariants:
    - GET /actuator/health returns 503 if the database is unreachable
    - GET /actuator/metrics reports uptime and the stored model count
    - All three endpoints are on the auth gate's public allow-list
"""

import logging
import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from model_service import __version__
from model_service.api.routes.models import get_model_service
from model_service.core.domain_types import PageRequest
from model_service.infrastructure import database
from model_service.services.model_service import ModelService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/actuator", tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/health")
async def health_check():
    """Readiness probe: includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "DOWN",
                "components": {"db": {"status": "DOWN"}},
            },
        )
    return {"status": "UP", "components": {"db": {"status": "UP"}}}


@router.get("/info")
async def info():
    return {"app": {"name": "model-service", "version": __version__}}


@router.get("/metrics")
async def metrics(service: ModelService = Depends(get_model_service)):
    # size=1: only the total count is needed
    page = await service.list_page(PageRequest(page=0, size=1))
    measurements = {
        "process.uptime": round(time.monotonic() - _STARTED_AT, 3),
        "models.count": page.total_items,
    }
    return {"names": sorted(measurements), "measurements": measurements}
