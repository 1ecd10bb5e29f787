"""User repository: lookup by email across realms, bulk load, and save with memberships."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from realm_admin.application.dtos.user import UserRecord, UserResult
from realm_admin.infrastructure.persistence.models.user import User, user_realm
from realm_admin.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    return UserResult(id=u.id, email=u.email, name=u.name)


class UserRepository(BaseRepository[User]):
    """User repository. Emails are unique system-wide; memberships are per realm."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _realm_ids(self, user_id: str) -> set[str]:
        result = await self.db.execute(
            select(user_realm.c.realm_id).where(user_realm.c.user_id == user_id)
        )
        return set(result.scalars().all())

    async def get_by_email(self, email: str) -> UserRecord | None:
        """Exact (case-sensitive) email match; None when no user has this email."""
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return UserRecord(
            id=user.id,
            email=user.email,
            name=user.name,
            realm_ids=await self._realm_ids(user.id),
        )

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get_row(user_id)
        return _user_to_result(user) if user else None

    async def get_by_ids(self, user_ids: Iterable[str]) -> list[UserResult]:
        return [_user_to_result(u) for u in await self._get_rows(user_ids)]

    async def is_member(self, user_id: str, realm_id: str) -> bool:
        return realm_id in await self._realm_ids(user_id)

    async def save(self, user: UserRecord) -> UserRecord:
        """Insert the user if new, else update its row; then insert any missing realm memberships.

        Membership inserts are ON CONFLICT DO NOTHING on (user_id, realm_id),
        so saving the same membership twice never duplicates it.
        """
        if user.id is None:
            created = await self._create_row(User(email=user.email, name=user.name))
            user_id = created.id
        else:
            user_id = user.id
            await self.db.execute(
                update(User)
                .where(User.id == user_id)
                .values(name=user.name, updated_at=func.now())
            )
        if user.realm_ids:
            stmt = (
                pg_insert(user_realm)
                .values(
                    [
                        {"user_id": user_id, "realm_id": realm_id}
                        for realm_id in sorted(user.realm_ids)
                    ]
                )
                .on_conflict_do_nothing(index_elements=["user_id", "realm_id"])
            )
            await self.db.execute(stmt)
            await self.db.flush()
        return UserRecord(
            id=user_id,
            email=user.email,
            name=user.name,
            realm_ids=set(user.realm_ids),
        )
