"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from bootcheck.api.routers.health import router as health_router
from bootcheck.api.routers.targets import router as targets_router
from bootcheck.api.routers.validation import router as validation_router
from bootcheck.api.routers.verdicts import router as verdicts_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(targets_router, prefix="/targets", tags=["targets"])
api_router.include_router(verdicts_router, prefix="/verdicts", tags=["verdicts"])
api_router.include_router(validation_router, prefix="/validation", tags=["validation"])
