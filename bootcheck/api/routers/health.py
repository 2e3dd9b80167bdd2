"""Health endpoint."""

from fastapi import APIRouter, Depends

from bootcheck.api.models import HealthResponse
from bootcheck.config.settings import Settings, get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:  # noqa: B008
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=settings.app_version)
