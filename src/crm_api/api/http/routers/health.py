"""Liveness and readiness probes."""

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from crm_api.api.http.deps import get_database_service
from crm_api.core.services.database.db_session import DbSessionService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe; does not touch dependencies."""
    return {"status": "healthy"}


@router.get("/ready", response_model=None)
def readiness(
    database_service: DbSessionService = Depends(get_database_service),
) -> dict[str, str] | JSONResponse:
    """Readiness probe: 503 while the database does not answer."""
    if not database_service.health_check():
        return JSONResponse(status_code=503, content={"status": "not_ready"})
    return {"status": "ready"}
