"""Persistence repositories. Re-exports for dependency injection."""

from realm_admin.infrastructure.persistence.repositories.audit_entry_repo import (
    AuditEntryRepository,
)
from realm_admin.infrastructure.persistence.repositories.base import BaseRepository
from realm_admin.infrastructure.persistence.repositories.realm_repo import RealmRepository
from realm_admin.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "AuditEntryRepository",
    "BaseRepository",
    "RealmRepository",
    "UserRepository",
]
