"""Column mixins shared by realm and app_user.

audit_entry does not use them: it has no updated_at, since rows never change.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from realm_admin.shared.utils.generators import generate_cuid


class CuidMixin:
    """String primary key filled with a CUID2 on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """created_at/updated_at set by the database (timestamptz)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
        )


class CuidTimestampModel(CuidMixin, TimestampMixin):
    __abstract__ = True
