# WORKFLOW: Health check endpoints for monitoring and operational status.
# Used by: Load balancers, monitoring systems, operational dashboards
# Endpoints:
# 1. /healthz - Basic health check (always returns healthy)
# 2. /readyz - Readiness check (a packing list dataset has been loaded)
# 3. /livez - Liveness check for Kubernetes probes
#
# Readiness flow: Readiness check -> Dataset version/record count -> Ready/Not ready

from fastapi import APIRouter
import logging
from datetime import datetime

from core.config import settings
from services.dataset import packing_list_dataset

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/healthz")
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        Health status of the API
    """
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "version": settings.version,
        "environment": settings.environment
    }


@router.get("/readyz")
async def readiness_check():
    """
    Readiness check endpoint.

    The service is ready once a packing list has been parsed successfully.

    Returns:
        Readiness status with dataset details
    """
    dataset_version, records = packing_list_dataset.state()
    checks = {"dataset_loaded": dataset_version > 0}

    if not checks["dataset_loaded"]:
        logger.warning("Readiness check: no packing list dataset loaded yet")

    return {
        "status": "ready" if all(checks.values()) else "not_ready",
        "timestamp": datetime.utcnow().isoformat(),
        "checks": checks,
        "dataset_version": dataset_version,
        "record_count": len(records),
        "version": settings.version
    }


@router.get("/livez")
async def liveness_check():
    """
    Liveness check endpoint.

    Returns:
        Liveness status
    """
    return {
        "status": "alive",
        "timestamp": datetime.utcnow().isoformat()
    }
