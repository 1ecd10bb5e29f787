"""User ORM model and the user_realm membership table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from realm_admin.infrastructure.persistence.database import Base
from realm_admin.infrastructure.persistence.models.mixins import CuidTimestampModel

if TYPE_CHECKING:
    from realm_admin.infrastructure.persistence.models.realm import Realm

# Composite primary key: a user belongs to a realm at most once.
user_realm = Table(
    "user_realm",
    Base.metadata,
    Column(
        "user_id",
        String,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "realm_id",
        String,
        ForeignKey("realm.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
    Column(
        "created_at",
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    ),
)


class User(CuidTimestampModel, Base):
    """User model. Table: app_user. Email is unique across all realms."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    realms: Mapped[list[Realm]] = relationship(
        secondary=user_realm, lazy="raise"
    )
