"""
Health check router.

Provides the ``healthcheck`` procedure and a readiness endpoint that
also probes the database. No business logic.
"""

from fastapi import APIRouter, Depends

from amigos.core.config import Settings
from amigos.domain.chat.clock import utcnow
from amigos.infrastructure.persistence.database import Database
from amigos.interfaces.chat.dependencies import get_database, get_settings
from amigos.interfaces.chat.schemas import HealthcheckResponse, HealthResponse

router = APIRouter(tags=["health"])


@router.api_route(
    "/rpc/healthcheck",
    methods=["GET", "POST"],
    response_model=HealthcheckResponse,
    summary="Healthcheck procedure",
    description="Returns status and the current service time.",
)
def healthcheck(settings: Settings = Depends(get_settings)) -> HealthcheckResponse:
    """Return liveness status with the current time."""
    return HealthcheckResponse(status="ok", timestamp=utcnow(), version=settings.version)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health, version and database reachability.",
)
def health_check(
    settings: Settings = Depends(get_settings),
    database: Database = Depends(get_database),
) -> HealthResponse:
    """Return current application health status."""
    database_ok = database.health_check()
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        version=settings.version,
        database="ok" if database_ok else "unavailable",
    )
