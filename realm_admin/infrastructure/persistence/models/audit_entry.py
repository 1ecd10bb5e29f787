"""Audit entry ORM model. Append-only "who did what to whom, via what" record."""

from datetime import datetime
from typing import Any

from sqlalchemy import Connection, DateTime, ForeignKey, Index, String, event, text
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from realm_admin.infrastructure.persistence.database import Base
from realm_admin.shared.utils.generators import generate_cuid


class AuditEntry(Base):
    """Audit entry. target_type/source_type hold an AuditKind value.

    Target is always present. Source is optional: for "Susan deleted Seth"
    there is no source; for "Susan removed Seth from Narnia" the source is
    Narnia. Rows are only removed by the retention purge (bulk DELETE).
    """

    __tablename__ = "audit_entry"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    target_type: Mapped[str] = mapped_column(String(75), nullable=False)
    target_id: Mapped[str] = mapped_column(String, nullable=False)
    source_type: Mapped[str | None] = mapped_column(String(75), nullable=True)
    source_id: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("now()"), nullable=False, index=True
    )

    __table_args__ = (
        Index("ix_audit_entry_target", "target_type", "target_id"),
        Index("ix_audit_entry_source", "source_type", "source_id"),
    )


@event.listens_for(AuditEntry, "before_update")
def _prevent_audit_entry_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: AuditEntry
) -> None:
    """Audit entries are append-only; updates are forbidden."""
    raise ValueError("Audit entries are immutable and cannot be updated.")


@event.listens_for(AuditEntry, "before_delete")
def _prevent_audit_entry_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: AuditEntry
) -> None:
    """Single entries cannot be deleted; use the retention purge."""
    raise ValueError("Audit entries cannot be deleted individually.")
