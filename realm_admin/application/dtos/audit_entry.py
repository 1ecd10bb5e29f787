"""DTOs for audit entries and the resolved audit list."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from realm_admin.application.dtos.realm import RealmResult
from realm_admin.application.dtos.user import UserResult
from realm_admin.domain.enums import AuditKind


@dataclass(frozen=True)
class AuditEntryCreate:
    """Input for appending one audit entry. Target required, source optional."""

    user_id: str
    action: str
    target_type: str
    target_id: str
    source_type: str | None = None
    source_id: str | None = None

    def __post_init__(self) -> None:
        if (self.source_type is None) != (self.source_id is None):
            raise ValueError("source_type and source_id must be set together")


@dataclass(frozen=True)
class AuditEntryResult:
    """Single persisted audit entry (read-model)."""

    id: str
    user_id: str
    action: str
    target_type: str
    target_id: str
    source_type: str | None
    source_id: str | None
    created_at: datetime

    @property
    def has_source(self) -> bool:
        return self.source_type is not None and self.source_id is not None


@dataclass
class AuditList:
    """Audit entries plus the entities they reference, keyed by kind then id.

    Built by AuditListResolver; rebuilt per query, never persisted.
    """

    entries: list[AuditEntryResult]
    preloaded: dict[AuditKind, dict[str, Any]] = field(default_factory=dict)

    @property
    def realms(self) -> dict[str, RealmResult]:
        return self.preloaded.setdefault(AuditKind.REALMS, {})

    @property
    def users(self) -> dict[str, UserResult]:
        return self.preloaded.setdefault(AuditKind.USERS, {})

    def lookup(self, kind: str | None, entity_id: str | None) -> Any | None:
        """Return the preloaded entity for (kind, id), or None if absent."""
        if kind is None or entity_id is None:
            return None
        try:
            return self.preloaded.get(AuditKind(kind), {}).get(entity_id)
        except ValueError:
            return None

    def target_of(self, entry: AuditEntryResult) -> Any | None:
        return self.lookup(entry.target_type, entry.target_id)

    def source_of(self, entry: AuditEntryResult) -> Any | None:
        return self.lookup(entry.source_type, entry.source_id)


@dataclass(frozen=True)
class AuditPurgeResult:
    """Result of a retention purge."""

    deleted: int
    cutoff: datetime
