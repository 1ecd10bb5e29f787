"""Realm repository. Interface methods return application DTOs."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from realm_admin.application.dtos.realm import RealmResult
from realm_admin.infrastructure.persistence.models.realm import Realm
from realm_admin.infrastructure.persistence.repositories.base import BaseRepository


def _realm_to_result(r: Realm) -> RealmResult:
    return RealmResult(id=r.id, code=r.code, name=r.name)


class RealmRepository(BaseRepository[Realm]):
    """Realm lookups (single and bulk)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Realm)

    async def get_by_id(self, realm_id: str) -> RealmResult | None:
        realm = await self._get_row(realm_id)
        return _realm_to_result(realm) if realm else None

    async def get_by_ids(self, realm_ids: Iterable[str]) -> list[RealmResult]:
        return [_realm_to_result(r) for r in await self._get_rows(realm_ids)]

    async def get_by_code(self, code: str) -> RealmResult | None:
        result = await self.db.execute(select(Realm).where(Realm.code == code))
        realm = result.scalar_one_or_none()
        return _realm_to_result(realm) if realm else None

    async def create_realm(self, code: str, name: str) -> RealmResult:
        created = await self._create_row(Realm(code=code, name=name))
        return _realm_to_result(created)
