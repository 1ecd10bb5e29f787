"""Audit entry repository integration tests. Require Postgres; session is rolled back after each test."""

from datetime import timedelta

import pytest
from sqlalchemy import select, update

from realm_admin.application.dtos.audit_entry import AuditEntryCreate
from realm_admin.application.dtos.user import UserRecord
from realm_admin.infrastructure.persistence.models import AuditEntry
from realm_admin.infrastructure.persistence.repositories import (
    AuditEntryRepository,
    RealmRepository,
    UserRepository,
)
from realm_admin.shared.utils.datetime import utc_now
from realm_admin.shared.utils.generators import generate_cuid


async def _actor_and_realm(db_session):
    realm = await RealmRepository(db_session).create_realm(generate_cuid(), "Narnia")
    actor = await UserRepository(db_session).save(
        UserRecord(email=f"{generate_cuid()}@test.local", name="Admin", realm_ids={realm.id})
    )
    return actor, realm


@pytest.mark.requires_db
async def test_save_and_list_for_realm(db_session) -> None:
    actor, realm = await _actor_and_realm(db_session)
    repo = AuditEntryRepository(db_session)

    saved = await repo.save(
        AuditEntryCreate(actor.id, "added user", "users", actor.id, "realms", realm.id)
    )
    await repo.save(AuditEntryCreate(actor.id, "renamed realm", "realms", realm.id))

    assert saved.id
    assert saved.created_at.tzinfo is not None
    entries = await repo.list_for_realm(realm.id)
    assert {e.action for e in entries} == {"added user", "renamed realm"}
    assert await repo.count_for_realm(realm.id) == 2
    assert await repo.count_for_realm("other-realm") == 0


@pytest.mark.requires_db
async def test_loaded_entry_cannot_be_modified_or_deleted(db_session) -> None:
    actor, realm = await _actor_and_realm(db_session)
    saved = await AuditEntryRepository(db_session).save(
        AuditEntryCreate(actor.id, "added user", "users", actor.id, "realms", realm.id)
    )
    row = (await db_session.execute(select(AuditEntry).where(AuditEntry.id == saved.id))).scalar_one()

    row.action = "tampered"
    with pytest.raises(ValueError, match="immutable"):
        await db_session.flush()
    await db_session.rollback()


@pytest.mark.requires_db
async def test_purge_deletes_only_entries_older_than_cutoff(db_session) -> None:
    actor, realm = await _actor_and_realm(db_session)
    repo = AuditEntryRepository(db_session)
    old = await repo.save(AuditEntryCreate(actor.id, "old", "realms", realm.id))
    recent = await repo.save(AuditEntryCreate(actor.id, "recent", "realms", realm.id))
    # Backdate with a Core UPDATE; the ORM guard only covers loaded rows.
    await db_session.execute(
        update(AuditEntry)
        .where(AuditEntry.id == old.id)
        .values(created_at=utc_now() - timedelta(days=45))
    )

    deleted = await repo.purge_older_than(timedelta(days=-30))

    assert deleted >= 1
    remaining = {e.id for e in await repo.list_for_realm(realm.id)}
    assert old.id not in remaining
    assert recent.id in remaining


@pytest.mark.requires_db
async def test_second_purge_in_a_row_deletes_nothing(db_session) -> None:
    """Purging twice with the same max age removes old entries once; recent ones stay."""
    actor, realm = await _actor_and_realm(db_session)
    repo = AuditEntryRepository(db_session)
    old = await repo.save(AuditEntryCreate(actor.id, "old", "realms", realm.id))
    recent = await repo.save(AuditEntryCreate(actor.id, "recent", "realms", realm.id))
    await db_session.execute(
        update(AuditEntry)
        .where(AuditEntry.id == old.id)
        .values(created_at=utc_now() - timedelta(days=45))
    )

    first = await repo.purge_older_than(timedelta(days=30))
    second = await repo.purge_older_than(timedelta(days=30))

    assert first >= 1
    assert second == 0
    remaining = {e.id for e in await repo.list_for_realm(realm.id)}
    assert remaining == {recent.id}
