"""Persistence models: ORM entities and mixins."""

from realm_admin.infrastructure.persistence.models.audit_entry import AuditEntry
from realm_admin.infrastructure.persistence.models.mixins import (
    CuidMixin,
    CuidTimestampModel,
    TimestampMixin,
)
from realm_admin.infrastructure.persistence.models.realm import Realm
from realm_admin.infrastructure.persistence.models.user import User, user_realm

__all__ = [
    "AuditEntry",
    "Realm",
    "User",
    "user_realm",
    "CuidMixin",
    "TimestampMixin",
    "CuidTimestampModel",
]
