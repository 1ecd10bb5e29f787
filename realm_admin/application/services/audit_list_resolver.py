"""Resolve polymorphic audit references (target/source) into preloaded entities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from realm_admin.application.dtos.audit_entry import AuditEntryResult, AuditList
from realm_admin.domain.enums import AuditKind
from realm_admin.domain.exceptions import UnknownAuditKindException

if TYPE_CHECKING:
    from realm_admin.application.interfaces.services import IBulkLoader


class AuditListResolver:
    """Builds an AuditList with one bulk load per referenced kind (no N+1).

    Loaders are registered per AuditKind; a kind that cannot be parsed or has
    no loader fails the whole resolve with UnknownAuditKindException.
    """

    def __init__(self, loaders: Mapping[AuditKind, IBulkLoader]) -> None:
        self._loaders = dict(loaders)

    def _parse_kind(self, value: str) -> AuditKind:
        try:
            kind = AuditKind(value)
        except ValueError:
            raise UnknownAuditKindException(value) from None
        if kind not in self._loaders:
            raise UnknownAuditKindException(value)
        return kind

    def collect_references(
        self, entries: Iterable[AuditEntryResult]
    ) -> dict[AuditKind, set[str]]:
        """Map each referenced kind to the distinct ids referenced by target or source."""
        lookups: dict[AuditKind, set[str]] = {}
        for e in entries:
            lookups.setdefault(self._parse_kind(e.target_type), set()).add(e.target_id)
            if e.has_source:
                lookups.setdefault(self._parse_kind(e.source_type), set()).add(
                    e.source_id
                )
        return lookups

    async def resolve(self, entries: list[AuditEntryResult]) -> AuditList:
        """Return entries with every referenced realm/user preloaded by id."""
        lookups = self.collect_references(entries)
        audit_list = AuditList(entries=list(entries))
        for kind in AuditKind:
            audit_list.preloaded[kind] = {}
        for kind, ids in lookups.items():
            loaded = await self._loaders[kind](sorted(ids))
            audit_list.preloaded[kind] = {obj.id: obj for obj in loaded}
        return audit_list
