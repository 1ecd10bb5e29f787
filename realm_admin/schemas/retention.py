"""Retention API schemas."""

from datetime import datetime

from pydantic import BaseModel


class AuditPurgeResponse(BaseModel):
    """Response after purging audit entries older than the cutoff."""

    deleted: int
    cutoff: datetime
