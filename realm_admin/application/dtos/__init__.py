"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from realm_admin.application.dtos.audit_entry import (
    AuditEntryCreate,
    AuditEntryResult,
    AuditList,
    AuditPurgeResult,
)
from realm_admin.application.dtos.batch_import import (
    BatchFailure,
    BatchImportResult,
    BatchUser,
)
from realm_admin.application.dtos.realm import RealmResult
from realm_admin.application.dtos.user import UserRecord, UserResult

__all__ = [
    "AuditEntryCreate",
    "AuditEntryResult",
    "AuditList",
    "AuditPurgeResult",
    "BatchFailure",
    "BatchImportResult",
    "BatchUser",
    "RealmResult",
    "UserRecord",
    "UserResult",
]
