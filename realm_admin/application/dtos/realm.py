"""DTOs for realms (tenants)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RealmResult:
    """Realm read-model. Opaque to batch import beyond its id."""

    id: str
    code: str
    name: str
