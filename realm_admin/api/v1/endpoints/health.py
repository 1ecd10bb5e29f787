"""Liveness endpoint. Touches neither Postgres nor Firebase."""

from fastapi import APIRouter

from realm_admin.core.config import get_settings
from realm_admin.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(version=get_settings().app_version)
