"""SqlAlchemyUnitOfWork integration tests. Require Postgres.

These commit (or try to commit) through real transactions, so each one
uses its own session factory and checks results from a fresh session.
"""

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from realm_admin.application.dtos.audit_entry import AuditEntryCreate
from realm_admin.application.dtos.user import UserRecord
from realm_admin.infrastructure.persistence.models import AuditEntry, Realm, User, user_realm
from realm_admin.infrastructure.persistence.repositories import RealmRepository, UserRepository
from realm_admin.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from realm_admin.shared.utils.generators import generate_cuid


async def _audit_rows_targeting(session, target_id: str) -> int:
    result = await session.execute(
        select(func.count()).select_from(AuditEntry).where(AuditEntry.target_id == target_id)
    )
    return int(result.scalar_one())


@pytest.mark.requires_db
async def test_failed_audit_write_rolls_back_user_and_membership(session_factory) -> None:
    """An error inside audit_entries.save undoes the user insert and its membership."""
    uow = SqlAlchemyUnitOfWork(session_factory)
    email = f"{generate_cuid()}@test.local"
    realm_code = generate_cuid()
    saved_id: str | None = None

    with pytest.raises(IntegrityError):
        async with uow.transaction() as tx:
            realm = await RealmRepository(tx.session).create_realm(realm_code, "Narnia")
            saved = await tx.users.save(
                UserRecord(email=email, name="Ann", realm_ids={realm.id})
            )
            saved_id = saved.id
            # Unknown acting user: the audit insert violates its foreign key.
            await tx.audit_entries.save(
                AuditEntryCreate(generate_cuid(), "added user", "users", saved.id, "realms", realm.id)
            )

    assert saved_id is not None
    async with session_factory() as session:
        assert await UserRepository(session).get_by_email(email) is None
        assert await RealmRepository(session).get_by_code(realm_code) is None
        memberships = await session.execute(
            select(func.count()).select_from(user_realm).where(user_realm.c.user_id == saved_id)
        )
        assert memberships.scalar_one() == 0
        assert await _audit_rows_targeting(session, saved_id) == 0


@pytest.mark.requires_db
async def test_error_after_user_save_rolls_back(session_factory) -> None:
    uow = SqlAlchemyUnitOfWork(session_factory)
    email = f"{generate_cuid()}@test.local"

    with pytest.raises(RuntimeError):
        async with uow.transaction() as tx:
            await tx.users.save(UserRecord(email=email, name="Ann"))
            raise RuntimeError("audit store unavailable")

    async with session_factory() as session:
        assert await UserRepository(session).get_by_email(email) is None


@pytest.mark.requires_db
async def test_completed_transaction_commits_user_membership_and_entry(session_factory) -> None:
    uow = SqlAlchemyUnitOfWork(session_factory)
    email = f"{generate_cuid()}@test.local"
    async with session_factory() as session:
        async with session.begin():
            realm = await RealmRepository(session).create_realm(generate_cuid(), "Narnia")

    try:
        async with uow.transaction() as tx:
            saved = await tx.users.save(UserRecord(email=email, name="Ann", realm_ids={realm.id}))
            await tx.audit_entries.save(
                AuditEntryCreate(saved.id, "added user", "users", saved.id, "realms", realm.id)
            )

        async with session_factory() as session:
            found = await UserRepository(session).get_by_email(email)
            assert found is not None
            assert found.realm_ids == {realm.id}
            assert await _audit_rows_targeting(session, found.id) == 1
    finally:
        # Deleting the user cascades to memberships and its audit entries.
        async with session_factory() as session:
            async with session.begin():
                await session.execute(delete(User).where(User.email == email))
                await session.execute(delete(Realm).where(Realm.id == realm.id))
