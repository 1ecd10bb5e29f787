"""Request/response schemas for the audit entry API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditEntryResponse(BaseModel):
    """Single audit entry (read)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    action: str
    target_type: str
    target_id: str
    source_type: str | None = None
    source_id: str | None = None
    created_at: datetime


class RealmSummary(BaseModel):
    """Realm referenced by an audit entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str


class UserSummary(BaseModel):
    """User referenced by an audit entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str


class AuditListResponse(BaseModel):
    """Paginated audit entries with referenced realms and users preloaded by id."""

    items: list[AuditEntryResponse]
    realms: dict[str, RealmSummary]
    users: dict[str, UserSummary]
    skip: int
    limit: int
    total: int
