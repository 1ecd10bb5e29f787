"""Audit entry API: list the realm's resolved audit trail and purge old entries."""

from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from realm_admin.api.v1.dependencies import (
    get_list_audit_entries_use_case,
    get_purge_audit_entries_use_case,
    get_realm,
    require_realm_admin,
)
from realm_admin.application.dtos.realm import RealmResult
from realm_admin.application.dtos.user import UserResult
from realm_admin.application.use_cases.audit import (
    ListRealmAuditEntriesUseCase,
    PurgeAuditEntriesUseCase,
)
from realm_admin.schemas.audit_entry import (
    AuditEntryResponse,
    AuditListResponse,
    RealmSummary,
    UserSummary,
)
from realm_admin.schemas.retention import AuditPurgeResponse

router = APIRouter()


@router.get("", response_model=AuditListResponse)
async def list_audit_entries(
    _: Annotated[UserResult, Depends(require_realm_admin)],
    realm: Annotated[RealmResult, Depends(get_realm)],
    use_case: Annotated[
        ListRealmAuditEntriesUseCase, Depends(get_list_audit_entries_use_case)
    ],
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """List audit entries that target or originate from the realm (newest first).

    Realms and users referenced by the page are returned once, keyed by id.
    """
    page = await use_case.execute(realm.id, skip=skip, limit=limit)
    audit_list = page.audit_list
    return AuditListResponse(
        items=[AuditEntryResponse.model_validate(e) for e in audit_list.entries],
        realms={k: RealmSummary.model_validate(v) for k, v in audit_list.realms.items()},
        users={k: UserSummary.model_validate(v) for k, v in audit_list.users.items()},
        skip=skip,
        limit=limit,
        total=page.total,
    )


@router.post("/purge", response_model=AuditPurgeResponse)
async def purge_audit_entries(
    _: Annotated[UserResult, Depends(require_realm_admin)],
    use_case: Annotated[PurgeAuditEntriesUseCase, Depends(get_purge_audit_entries_use_case)],
    max_age_days: int | None = Query(
        None, ge=1, description="Delete entries older than this many days (default: AUDIT_RETENTION_DAYS)"
    ),
):
    """Delete audit entries older than the retention period (all realms)."""
    max_age = timedelta(days=max_age_days) if max_age_days is not None else None
    result = await use_case.run(max_age)
    return AuditPurgeResponse(deleted=result.deleted, cutoff=result.cutoff)
