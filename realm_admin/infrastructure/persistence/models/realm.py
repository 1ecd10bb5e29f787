"""Realm ORM model. Tenant container; users join realms through user_realm."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from realm_admin.infrastructure.persistence.database import Base
from realm_admin.infrastructure.persistence.models.mixins import CuidTimestampModel


class Realm(CuidTimestampModel, Base):
    """Realm (tenant). Table: realm."""

    __tablename__ = "realm"

    code: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
