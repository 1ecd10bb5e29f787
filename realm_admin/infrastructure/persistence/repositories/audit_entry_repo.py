"""Audit entry repository. Append-only; rows leave only through the age-based purge."""

from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from realm_admin.application.dtos.audit_entry import AuditEntryCreate, AuditEntryResult
from realm_admin.domain.enums import AuditKind
from realm_admin.infrastructure.persistence.models.audit_entry import AuditEntry
from realm_admin.shared.utils.datetime import ensure_utc, retention_cutoff
from realm_admin.shared.utils.generators import generate_cuid


def _orm_to_result(row: AuditEntry) -> AuditEntryResult:
    """Map ORM to application DTO."""
    created_at = ensure_utc(row.created_at)
    assert created_at is not None
    return AuditEntryResult(
        id=row.id,
        user_id=row.user_id,
        action=row.action,
        target_type=row.target_type,
        target_id=row.target_id,
        source_type=row.source_type,
        source_id=row.source_id,
        created_at=created_at,
    )


def _involves_realm(realm_id: str):
    return or_(
        and_(
            AuditEntry.target_type == AuditKind.REALMS.value,
            AuditEntry.target_id == realm_id,
        ),
        and_(
            AuditEntry.source_type == AuditKind.REALMS.value,
            AuditEntry.source_id == realm_id,
        ),
    )


class AuditEntryRepository:
    """Append-only audit store. No update; no single-row delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def save(self, entry: AuditEntryCreate) -> AuditEntryResult:
        """Append one entry in the session's current transaction; return created record."""
        row = AuditEntry(
            id=generate_cuid(),
            user_id=entry.user_id,
            action=entry.action,
            target_type=entry.target_type,
            target_id=entry.target_id,
            source_type=entry.source_type,
            source_id=entry.source_id,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return _orm_to_result(row)

    async def list_for_realm(
        self, realm_id: str, *, skip: int = 0, limit: int = 100
    ) -> list[AuditEntryResult]:
        """List entries whose target or source is the realm (newest first)."""
        stmt = (
            select(AuditEntry)
            .where(_involves_realm(realm_id))
            .order_by(AuditEntry.created_at.desc(), AuditEntry.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [_orm_to_result(r) for r in result.scalars().all()]

    async def count_for_realm(self, realm_id: str) -> int:
        stmt = select(func.count()).select_from(AuditEntry).where(_involves_realm(realm_id))
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def purge_older_than(
        self, max_age: timedelta, *, now: datetime | None = None
    ) -> int:
        """Bulk delete entries created strictly before now - |max_age|; return the count.

        The statement bypasses the ORM before_delete guard, which only covers
        single-row deletes through the session.
        """
        cutoff = retention_cutoff(max_age, now)
        result = await self.db.execute(
            delete(AuditEntry).where(AuditEntry.created_at < cutoff)
        )
        return int(result.rowcount or 0)
