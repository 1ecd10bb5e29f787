"""DTOs for users (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserResult:
    """User read-model used for audit rendering and the acting user."""

    id: str
    email: str
    name: str


@dataclass
class UserRecord:
    """User being upserted by a batch import.

    id is None until the record has been saved. realm_ids holds every
    realm membership, loaded ones and those added in memory.
    """

    email: str
    name: str
    id: str | None = None
    realm_ids: set[str] = field(default_factory=set)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def ensure_realm(self, realm_id: str) -> bool:
        """Add membership in realm_id; return False when it was already present."""
        if realm_id in self.realm_ids:
            return False
        self.realm_ids.add(realm_id)
        return True
