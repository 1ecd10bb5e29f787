"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from realm_admin.api.v1.dependencies.
"""

from fastapi import APIRouter

from realm_admin.api.v1.endpoints import audit_entries, health, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(
    audit_entries.router, prefix="/audit-entries", tags=["audit-entries"]
)
