"""Unit tests for PurgeAuditEntriesUseCase (cutoff computation and age normalization)."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

from realm_admin.application.use_cases.audit import PurgeAuditEntriesUseCase
from realm_admin.shared.utils.datetime import retention_cutoff, utc_now


async def test_run_uses_default_max_age() -> None:
    repo = AsyncMock()
    repo.purge_older_than.return_value = 4
    use_case = PurgeAuditEntriesUseCase(repo, default_max_age=timedelta(days=30))

    before = utc_now()
    result = await use_case.run()
    after = utc_now()

    assert result.deleted == 4
    max_age = repo.purge_older_than.await_args.args[0]
    now = repo.purge_older_than.await_args.kwargs["now"]
    assert max_age == timedelta(days=30)
    assert before <= now <= after
    assert result.cutoff == now - timedelta(days=30)


async def test_negative_max_age_is_normalized() -> None:
    """timedelta(days=-7) purges the same entries as timedelta(days=7)."""
    repo = AsyncMock()
    repo.purge_older_than.return_value = 0
    use_case = PurgeAuditEntriesUseCase(repo, default_max_age=timedelta(days=30))

    result = await use_case.run(timedelta(days=-7))

    now = repo.purge_older_than.await_args.kwargs["now"]
    assert result.cutoff == now - timedelta(days=7)


async def test_negative_default_is_normalized() -> None:
    repo = AsyncMock()
    repo.purge_older_than.return_value = 0
    use_case = PurgeAuditEntriesUseCase(repo, default_max_age=timedelta(days=-1))

    result = await use_case.run()

    assert result.cutoff < utc_now() - timedelta(hours=23)


def test_retention_cutoff_ignores_sign() -> None:
    now = datetime(2024, 5, 31, tzinfo=UTC)
    assert retention_cutoff(timedelta(days=30), now) == datetime(2024, 5, 1, tzinfo=UTC)
    assert retention_cutoff(timedelta(days=-30), now) == datetime(2024, 5, 1, tzinfo=UTC)
