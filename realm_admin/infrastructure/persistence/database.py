"""Async SQLAlchemy engine, session factory and declarative Base.

Schema is owned by Alembic (see migrations/). The engine is built on first
use rather than at import, so importing models or repositories never reads
settings. With an empty DATABASE_URL nothing is built and every session
dependency raises SqlNotConfiguredException (HTTP 503).
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from realm_admin.core.config import get_settings
from realm_admin.domain.exceptions import SqlNotConfiguredException

logger = logging.getLogger(__name__)

_DEFAULT_POOL_SIZE = 20
_DEFAULT_MAX_OVERFLOW = 30
_DEFAULT_COMMAND_TIMEOUT = 60

# Populated by _ensure_engine(); reset by dispose_engine().
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Declarative base for every ORM model."""


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value


def _ensure_engine() -> None:
    """Build engine and AsyncSessionLocal once, if DATABASE_URL is set."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=_or_default(settings.db_pool_size, _DEFAULT_POOL_SIZE),
        max_overflow=_or_default(settings.db_max_overflow, _DEFAULT_MAX_OVERFLOW),
        pool_recycle=3600,
        connect_args={
            "command_timeout": _or_default(settings.db_command_timeout, _DEFAULT_COMMAND_TIMEOUT)
        },
    )
    # expire_on_commit=False: DTOs are built from rows after the commit.
    AsyncSessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for callers that open their own transactions (unit of work, scripts).

    Raises:
        SqlNotConfiguredException: DATABASE_URL is empty.
    """
    _ensure_engine()
    if AsyncSessionLocal is None:
        logger.error("DATABASE_URL is not set; run `alembic upgrade head` once it is")
        raise SqlNotConfiguredException()
    return AsyncSessionLocal


async def get_db():
    """Request-scoped session for reads. Never commits."""
    async with get_session_factory()() as session:
        yield session


async def get_db_transactional():
    """Request-scoped session inside one transaction: commit on success, roll back on error."""
    async with get_session_factory()() as session:
        async with session.begin():
            yield session


async def dispose_engine() -> None:
    """Close pooled connections (app shutdown, end of a script)."""
    global engine, AsyncSessionLocal
    if engine is None:
        return
    await engine.dispose()
    engine = None
    AsyncSessionLocal = None
    logger.info("Database engine disposed")
