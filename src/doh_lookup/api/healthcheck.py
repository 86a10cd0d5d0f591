"""Health check API endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from doh_lookup.core.config import Settings, get_settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    resolver_url: str
    sentry_enabled: bool


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Health check endpoint. Does not contact the resolver."""
    return HealthResponse(
        status="ok",
        resolver_url=settings.resolver_url,
        sentry_enabled=settings.sentry_enabled,
    )
