"""
Health check endpoints.

Provides liveness and readiness probes. The service is ready once the card
catalog has been built.
"""

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check the catalog.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(request: Request, response: Response) -> HealthResponse:
    """
    Readiness probe.

    Returns 503 until a card catalog is loaded.
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready")
    return HealthResponse(status="ready", cards=len(catalog))
