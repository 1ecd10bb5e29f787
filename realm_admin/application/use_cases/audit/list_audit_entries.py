"""List a realm's audit entries with their targets and sources resolved."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from realm_admin.application.dtos.audit_entry import AuditList

if TYPE_CHECKING:
    from realm_admin.application.interfaces.repositories import IAuditEntryRepository
    from realm_admin.application.services.audit_list_resolver import AuditListResolver


@dataclass(frozen=True)
class RealmAuditPage:
    """One page of resolved audit entries plus the unpaginated total."""

    audit_list: AuditList
    total: int


class ListRealmAuditEntriesUseCase:
    """Loads a page of entries for a realm and resolves references in bulk."""

    def __init__(
        self,
        audit_repo: IAuditEntryRepository,
        resolver: AuditListResolver,
    ) -> None:
        self._audit_repo = audit_repo
        self._resolver = resolver

    async def execute(
        self, realm_id: str, *, skip: int = 0, limit: int = 100
    ) -> RealmAuditPage:
        entries = await self._audit_repo.list_for_realm(realm_id, skip=skip, limit=limit)
        total = await self._audit_repo.count_for_realm(realm_id)
        audit_list = await self._resolver.resolve(entries)
        return RealmAuditPage(audit_list=audit_list, total=total)
