"""
Health check router for liveness and readiness probes.
"""
import logging

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorClient

from passvault.database.connections import ping
from passvault.dependencies.database import get_mongo_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(client: AsyncIOMotorClient = Depends(get_mongo_client)):
    """
    Readiness check that verifies the database connection.
    Returns 200 with status "degraded" if MongoDB cannot be reached.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        await ping(client)
        checks["mongodb"] = "healthy"
    except Exception as e:
        # The error text can carry the connection string; keep it in the logs
        logger.warning("MongoDB readiness check failed: %s", e)
        checks["mongodb"] = "unhealthy"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
