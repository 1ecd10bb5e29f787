"""Purge audit entries older than the retention window.

Usage:
    python -m scripts.purge_audit_entries [max_age_days]
If max_age_days is omitted, AUDIT_RETENTION_DAYS from config is used (default 30).
Requires Postgres (DATABASE_URL). Intended to run from cron.
"""

import asyncio
import sys
from datetime import timedelta

import realm_admin.infrastructure.persistence.database as database
from realm_admin.application.use_cases.audit import PurgeAuditEntriesUseCase
from realm_admin.core.config import get_settings
from realm_admin.infrastructure.persistence.repositories import AuditEntryRepository
from realm_admin.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Delete audit entries created before now - max_age in one transaction."""
    settings = get_settings()
    setup_logging()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    days = settings.audit_retention_days
    if len(sys.argv) > 1:
        try:
            days = int(sys.argv[1])
        except ValueError:
            print(f"max_age_days must be an integer, got: {sys.argv[1]}", file=sys.stderr)
            sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            use_case = PurgeAuditEntriesUseCase(
                AuditEntryRepository(session),
                default_max_age=timedelta(days=settings.audit_retention_days),
            )
            result = await use_case.run(timedelta(days=days))

    print(f"Done. Deleted {result.deleted} audit entr(ies) created before {result.cutoff.isoformat()}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
