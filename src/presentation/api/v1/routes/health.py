"""Health check endpoint for load balancers and monitoring"""

import time
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.database import get_db
from src.presentation.api.v1.schemas.problem import HealthCheckEntry, HealthCheckResponse
from src.shared.telemetry.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)

HEALTHY = "Healthy"
UNHEALTHY = "Unhealthy"


async def check_database(db: AsyncSession) -> HealthCheckEntry:
    started = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        return HealthCheckEntry(
            name="database",
            status=UNHEALTHY,
            duration=(time.perf_counter() - started) * 1000,
            description="Database connection failed",
            exception=str(e),
        )
    return HealthCheckEntry(
        name="database",
        status=HEALTHY,
        duration=(time.perf_counter() - started) * 1000,
        description="Database connection succeeded",
    )


@router.get(
    "",
    response_model=HealthCheckResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthCheckResponse}},
)
async def health_check(db: Annotated[AsyncSession, Depends(get_db)]):
    """
    Health check endpoint.

    Returns:
    - 200 OK if every check is healthy
    - 503 Service Unavailable otherwise
    """
    logger.info("Health check endpoint called")
    started = time.perf_counter()

    checks = [await check_database(db)]

    is_healthy = all(check.status == HEALTHY for check in checks)
    report = HealthCheckResponse(
        status=HEALTHY if is_healthy else UNHEALTHY,
        total_duration=(time.perf_counter() - started) * 1000,
        checks=checks,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=report.model_dump(),
    )
