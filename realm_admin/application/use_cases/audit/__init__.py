"""Audit use cases: list resolved entries and purge by age."""

from realm_admin.application.use_cases.audit.list_audit_entries import (
    ListRealmAuditEntriesUseCase,
    RealmAuditPage,
)
from realm_admin.application.use_cases.audit.purge_audit_entries import (
    PurgeAuditEntriesUseCase,
)

__all__ = [
    "ListRealmAuditEntriesUseCase",
    "PurgeAuditEntriesUseCase",
    "RealmAuditPage",
]
