"""Domain enumerations: audit discriminators and well-known audit actions."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class AuditKind(_ValuesMixin, str, Enum):
    """Entity kinds an audit entry may reference as target or source.

    Values are the table-style discriminators stored in target_type and
    source_type.
    """

    REALMS = "realms"
    USERS = "users"


class AuditAction(_ValuesMixin, str, Enum):
    """Known audit action labels. The action column itself is free-form."""

    ADDED_USER = "added user"
