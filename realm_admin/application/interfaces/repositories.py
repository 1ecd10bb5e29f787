"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from realm_admin.application.dtos.audit_entry import (
        AuditEntryCreate,
        AuditEntryResult,
    )
    from realm_admin.application.dtos.realm import RealmResult
    from realm_admin.application.dtos.user import UserRecord, UserResult


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with exactly this email (any realm), or None if not found.

        Any other failure (e.g. storage unavailable) is raised.
        """

    async def get_by_ids(self, user_ids: Iterable[str]) -> list[UserResult]:
        """Bulk-load users by id. Unknown ids are skipped."""

    async def save(self, user: UserRecord) -> UserRecord:
        """Insert or update the user row and ensure every realm membership exists."""


class IRealmRepository(Protocol):
    """Protocol for realm repository."""

    async def get_by_id(self, realm_id: str) -> RealmResult | None:
        """Return realm by id, or None."""

    async def get_by_ids(self, realm_ids: Iterable[str]) -> list[RealmResult]:
        """Bulk-load realms by id. Unknown ids are skipped."""


class IAuditEntryRepository(Protocol):
    """Protocol for the append-only audit store."""

    async def save(self, entry: AuditEntryCreate) -> AuditEntryResult:
        """Append one entry in the repository's current transaction."""

    async def list_for_realm(
        self, realm_id: str, *, skip: int = 0, limit: int = 100
    ) -> list[AuditEntryResult]:
        """Entries whose target or source is the realm (newest first)."""

    async def count_for_realm(self, realm_id: str) -> int:
        """Total entries whose target or source is the realm."""

    async def purge_older_than(
        self, max_age: timedelta, *, now: datetime | None = None
    ) -> int:
        """Delete entries created strictly before (now or utc_now()) - |max_age|; return count."""


class ITransactionScope(Protocol):
    """Repositories bound to one open transaction."""

    users: IUserRepository
    audit_entries: IAuditEntryRepository


class IUnitOfWork(Protocol):
    """Scoped transactional context: commit on normal exit, roll back on exception."""

    def transaction(self) -> AbstractAsyncContextManager[ITransactionScope]:
        """Open a transaction and yield repositories bound to it."""
