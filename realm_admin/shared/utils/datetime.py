"""Timezone-aware UTC helpers. Stored timestamps are always UTC."""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    """Current time as an aware UTC datetime (retention cutoffs start here)."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a value read from the database to aware UTC.

    Naive values are taken to be UTC already; None passes through.
    """
    if dt is None:
        return None
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


def retention_cutoff(max_age: timedelta, now: datetime | None = None) -> datetime:
    """Oldest created_at that survives a purge; the sign of max_age is ignored."""
    return (now or utc_now()) - abs(max_age)
