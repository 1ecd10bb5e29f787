"""Audit retention: delete entries older than the configured max age."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from realm_admin.application.dtos.audit_entry import AuditPurgeResult
from realm_admin.shared.utils.datetime import retention_cutoff, utc_now

if TYPE_CHECKING:
    from realm_admin.application.interfaces.repositories import IAuditEntryRepository

logger = logging.getLogger(__name__)


class PurgeAuditEntriesUseCase:
    """Maintenance operation; not itself audited.

    max_age is normalized to a positive duration, so timedelta(days=-30)
    and timedelta(days=30) purge the same entries.
    """

    def __init__(
        self,
        audit_repo: IAuditEntryRepository,
        default_max_age: timedelta,
    ) -> None:
        self._audit_repo = audit_repo
        self._default_max_age = abs(default_max_age)

    async def run(self, max_age: timedelta | None = None) -> AuditPurgeResult:
        age = self._default_max_age if max_age is None else max_age
        now = utc_now()
        deleted = await self._audit_repo.purge_older_than(age, now=now)
        cutoff = retention_cutoff(age, now)
        logger.info("Purged %d audit entries created before %s", deleted, cutoff.isoformat())
        return AuditPurgeResult(deleted=deleted, cutoff=cutoff)
