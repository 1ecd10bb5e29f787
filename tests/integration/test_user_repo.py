"""User and realm repository integration tests. Require Postgres; session is rolled back after each test."""

import pytest
from sqlalchemy import select

from realm_admin.application.dtos.user import UserRecord
from realm_admin.infrastructure.persistence.models import User
from realm_admin.infrastructure.persistence.repositories import RealmRepository, UserRepository
from realm_admin.shared.utils.generators import generate_cuid


def _email() -> str:
    return f"{generate_cuid()}@test.local"


@pytest.mark.requires_db
async def test_get_by_email_not_found_returns_none(db_session) -> None:
    repo = UserRepository(db_session)
    assert await repo.get_by_email(_email()) is None


@pytest.mark.requires_db
async def test_save_new_user_with_membership(db_session) -> None:
    realm = await RealmRepository(db_session).create_realm(generate_cuid(), "Narnia")
    repo = UserRepository(db_session)
    email = _email()
    user = UserRecord(email=email, name="Ann")
    user.ensure_realm(realm.id)

    saved = await repo.save(user)

    assert saved.id
    found = await repo.get_by_email(email)
    assert found is not None
    assert found.id == saved.id
    assert found.realm_ids == {realm.id}
    assert await repo.is_member(saved.id, realm.id)


@pytest.mark.requires_db
async def test_saving_same_membership_twice_keeps_one(db_session) -> None:
    realm = await RealmRepository(db_session).create_realm(generate_cuid(), "Narnia")
    repo = UserRepository(db_session)
    user = UserRecord(email=_email(), name="Ann", realm_ids={realm.id})
    saved = await repo.save(user)

    again = await repo.save(UserRecord(email=saved.email, name="Ann", id=saved.id, realm_ids={realm.id}))

    assert again.id == saved.id
    found = await repo.get_by_email(saved.email)
    assert found is not None
    assert found.realm_ids == {realm.id}


@pytest.mark.requires_db
async def test_email_lookup_is_case_sensitive(db_session) -> None:
    repo = UserRepository(db_session)
    email = f"{generate_cuid()}@Test.Local"
    await repo.save(UserRecord(email=email, name="Ann"))
    assert await repo.get_by_email(email.lower()) is None


@pytest.mark.requires_db
async def test_get_by_ids_returns_known_ids_only(db_session) -> None:
    users = UserRepository(db_session)
    realms = RealmRepository(db_session)
    a = await users.save(UserRecord(email=_email(), name="A"))
    realm = await realms.create_realm(generate_cuid(), "Oz")

    found_users = await users.get_by_ids([a.id, "missing", a.id])
    found_realms = await realms.get_by_ids([realm.id, "missing"])

    assert [u.id for u in found_users] == [a.id]
    assert [r.id for r in found_realms] == [realm.id]
    assert await users.get_by_ids([]) == []
    assert (await realms.get_by_code(realm.code)) == realm


@pytest.mark.requires_db
async def test_save_existing_user_updates_row(db_session) -> None:
    repo = UserRepository(db_session)
    saved = await repo.save(UserRecord(email=_email(), name="Ann"))

    await repo.save(UserRecord(email=saved.email, name="Ann Lee", id=saved.id))

    row = (
        await db_session.execute(
            select(User.name, User.created_at, User.updated_at).where(User.id == saved.id)
        )
    ).one()
    assert row.name == "Ann Lee"
    assert row.updated_at >= row.created_at
    found = await repo.get_by_email(saved.email)
    assert found is not None
    assert found.name == "Ann Lee"
