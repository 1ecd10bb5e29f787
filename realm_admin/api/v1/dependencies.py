"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the acting user, the target
realm, and application use cases. All use cases are built from
infrastructure implementations here; routes depend only on these
dependencies, not on infra directly.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from realm_admin.application.dtos.realm import RealmResult
from realm_admin.application.dtos.user import UserResult
from realm_admin.application.interfaces.services import (
    ICredentialNotifier,
    IIdentityProvisioner,
)
from realm_admin.application.services.audit_list_resolver import AuditListResolver
from realm_admin.application.services.user_upsert_service import UserUpsertService
from realm_admin.application.use_cases.audit import (
    ListRealmAuditEntriesUseCase,
    PurgeAuditEntriesUseCase,
)
from realm_admin.application.use_cases.users import ImportUserBatchUseCase
from realm_admin.core.config import get_settings
from realm_admin.domain.enums import AuditKind
from realm_admin.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    IdentityProviderNotConfiguredException,
    RealmNotFoundException,
    ValidationException,
)
from realm_admin.infrastructure.firebase.client import get_identity_client
from realm_admin.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
    get_session_factory,
)
from realm_admin.infrastructure.persistence.repositories import (
    AuditEntryRepository,
    RealmRepository,
    UserRepository,
)
from realm_admin.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from realm_admin.infrastructure.security.jwt import decode_access_token
from realm_admin.infrastructure.services import LogOnlyCredentialNotifier

# CUID/UUID-style: alphanumeric, hyphen, underscore.
_REALM_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")

_http_bearer = HTTPBearer(auto_error=False)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


async def get_realm_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RealmRepository:
    return RealmRepository(db)


async def get_audit_entry_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuditEntryRepository:
    """Audit entry repository for reads. Writes go through the unit of work."""
    return AuditEntryRepository(db)


def get_realm_id(request: Request) -> str:
    """Resolve realm ID from the realm header; raise 400 if missing or malformed."""
    name = get_settings().realm_header_name
    value = request.headers.get(name)
    if not value:
        raise ValidationException(f"Missing required header: {name}", field=name)
    if not _REALM_ID_RE.fullmatch(value):
        raise ValidationException(
            "Invalid realm ID format (use alphanumeric, hyphen, underscore; max 64 characters)",
            field=name,
        )
    return value


async def get_realm(
    realm_id: Annotated[str, Depends(get_realm_id)],
    realm_repo: Annotated[RealmRepository, Depends(get_realm_repo)],
) -> RealmResult:
    realm = await realm_repo.get_by_id(realm_id)
    if realm is None:
        raise RealmNotFoundException(realm_id)
    return realm


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult:
    """Return the acting user from the bearer JWT; raise 401 if missing or invalid."""
    if not credentials:
        raise AuthenticationException("Not authenticated")
    try:
        claims = decode_access_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e
    user = await user_repo.get_by_id(claims.user_id)
    if user is None:
        raise AuthenticationException("Unknown user")
    return user


async def require_realm_admin(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    realm: Annotated[RealmResult, Depends(get_realm)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult:
    """Require the acting user to be a member of the target realm."""
    if not await user_repo.is_member(current_user.id, realm.id):
        raise AuthorizationException(realm_id=realm.id)
    return current_user


def get_identity_provisioner() -> IIdentityProvisioner:
    client = get_identity_client()
    if client is None:
        raise IdentityProviderNotConfiguredException()
    return client


def get_credential_notifier() -> ICredentialNotifier:
    """Firebase reset emails when an API key is configured; otherwise log only."""
    client = get_identity_client()
    if client is not None and client.can_send_email:
        return client
    return LogOnlyCredentialNotifier()


def get_unit_of_work() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(get_session_factory())


async def get_import_user_batch_use_case(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    provisioner: Annotated[IIdentityProvisioner, Depends(get_identity_provisioner)],
    notifier: Annotated[ICredentialNotifier, Depends(get_credential_notifier)],
    unit_of_work: Annotated[SqlAlchemyUnitOfWork, Depends(get_unit_of_work)],
) -> ImportUserBatchUseCase:
    return ImportUserBatchUseCase(
        upsert_service=UserUpsertService(user_repo),
        provisioner=provisioner,
        notifier=notifier,
        unit_of_work=unit_of_work,
    )


async def get_audit_list_resolver(
    realm_repo: Annotated[RealmRepository, Depends(get_realm_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> AuditListResolver:
    """Resolver with one bulk loader per audit kind."""
    return AuditListResolver(
        {
            AuditKind.REALMS: realm_repo.get_by_ids,
            AuditKind.USERS: user_repo.get_by_ids,
        }
    )


async def get_list_audit_entries_use_case(
    audit_repo: Annotated[AuditEntryRepository, Depends(get_audit_entry_repo)],
    resolver: Annotated[AuditListResolver, Depends(get_audit_list_resolver)],
) -> ListRealmAuditEntriesUseCase:
    return ListRealmAuditEntriesUseCase(audit_repo=audit_repo, resolver=resolver)


async def get_purge_audit_entries_use_case(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PurgeAuditEntriesUseCase:
    """Purge runs in its own transaction (separate from the read session)."""
    return PurgeAuditEntriesUseCase(
        audit_repo=AuditEntryRepository(db),
        default_max_age=timedelta(days=get_settings().audit_retention_days),
    )
