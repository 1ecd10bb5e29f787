"""Unit of work: one short transaction per call, on a fresh session.

Each transaction() opens its own AsyncSession and commits on normal exit,
so work committed by earlier calls is unaffected by later failures in the
same request.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from realm_admin.infrastructure.persistence.repositories.audit_entry_repo import (
    AuditEntryRepository,
)
from realm_admin.infrastructure.persistence.repositories.user_repo import UserRepository


@dataclass(frozen=True)
class SqlTransactionScope:
    """Repositories sharing one session and transaction."""

    session: AsyncSession
    users: UserRepository
    audit_entries: AuditEntryRepository


class SqlAlchemyUnitOfWork:
    """IUnitOfWork backed by an async_sessionmaker."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[SqlTransactionScope]:
        """Begin; yield bound repositories; commit, or roll back if the body raises."""
        async with self._session_factory() as session:
            async with session.begin():
                yield SqlTransactionScope(
                    session=session,
                    users=UserRepository(session),
                    audit_entries=AuditEntryRepository(session),
                )
