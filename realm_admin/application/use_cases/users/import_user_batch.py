"""Batch user import: upsert, provision identity, notify, persist with audit entry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from realm_admin.application.dtos.audit_entry import AuditEntryCreate
from realm_admin.application.dtos.batch_import import BatchImportResult, BatchUser
from realm_admin.application.services.batch_errors import BatchErrors
from realm_admin.application.services.user_upsert_service import UserUpsertService
from realm_admin.domain.enums import AuditAction, AuditKind
from realm_admin.domain.exceptions import (
    CredentialNotificationException,
    IdentityProvisioningException,
    RealmAdminException,
    UserPersistenceException,
)

if TYPE_CHECKING:
    from realm_admin.application.dtos.realm import RealmResult
    from realm_admin.application.dtos.user import UserRecord
    from realm_admin.application.interfaces.repositories import IUnitOfWork
    from realm_admin.application.interfaces.services import (
        ICredentialNotifier,
        IIdentityProvisioner,
    )

logger = logging.getLogger(__name__)


def _reason(e: Exception) -> str:
    if isinstance(e, RealmAdminException):
        return e.message
    return str(e) or type(e).__name__


def _wrap(
    exc_type: type[IdentityProvisioningException]
    | type[CredentialNotificationException]
    | type[UserPersistenceException],
    email: str,
    e: Exception,
) -> RealmAdminException:
    """Wrap e in exc_type unless it already is one."""
    if isinstance(e, exc_type):
        return e
    return exc_type(email, _reason(e))


class ImportUserBatchUseCase:
    """Imports a list of users into one realm, tolerating per-user failures.

    Descriptors are processed sequentially in input order. A failure in one
    descriptor is recorded and never stops the batch. Each successful
    descriptor commits its user row and its "added user" audit entry in its
    own transaction, so earlier commits survive later failures or timeouts.
    """

    def __init__(
        self,
        upsert_service: UserUpsertService,
        provisioner: IIdentityProvisioner,
        notifier: ICredentialNotifier,
        unit_of_work: IUnitOfWork,
    ) -> None:
        self._upsert = upsert_service
        self._provisioner = provisioner
        self._notifier = notifier
        self._uow = unit_of_work

    async def execute(
        self,
        actor_id: str,
        realm: RealmResult,
        users: list[BatchUser],
    ) -> BatchImportResult:
        """Run the import for every descriptor and return new users plus failures."""
        new_users: list[BatchUser] = []
        errors = BatchErrors()

        for index, batch_user in enumerate(users, start=1):
            try:
                user, _ = await self._upsert.find_or_build(
                    batch_user.email, batch_user.name
                )
            except Exception as e:
                logger.error("Error finding user %s: %s", batch_user.email, e)
                errors.add(index, batch_user.email, e)
                continue

            user.ensure_realm(realm.id)

            try:
                created = await self._provisioner.ensure_account(user)
            except Exception as e:
                logger.error("Error creating identity account for %s: %s", user.email, e)
                errors.add(
                    index,
                    batch_user.email,
                    _wrap(IdentityProvisioningException, user.email, e),
                )
                continue

            if created:
                new_users.append(batch_user)
                try:
                    await self._notifier.send_credential_reset(user.email)
                except Exception as e:
                    logger.error("Error sending password reset to %s: %s", user.email, e)
                    errors.add(
                        index,
                        batch_user.email,
                        _wrap(CredentialNotificationException, user.email, e),
                    )
                    continue

            try:
                await self._persist(actor_id, realm, user)
            except Exception as e:
                logger.error("Error saving user %s: %s", user.email, e)
                errors.add(
                    index,
                    batch_user.email,
                    _wrap(UserPersistenceException, user.email, e),
                )
                continue
            logger.debug("Imported user %s into realm %s", user.email, realm.id)

        logger.info(
            "Batch import into realm %s: %d descriptors, %d new users, %d errors",
            realm.id,
            len(users),
            len(new_users),
            len(errors),
        )
        return BatchImportResult(
            new_users=new_users,
            failures=errors.failures,
            error_summary=errors.summarize(),
        )

    async def _persist(self, actor_id: str, realm: RealmResult, user: UserRecord) -> None:
        """Save the user and its audit entry atomically."""
        async with self._uow.transaction() as tx:
            saved = await tx.users.save(user)
            if saved.id is None:
                raise RuntimeError("user has no id after save")
            await tx.audit_entries.save(
                AuditEntryCreate(
                    user_id=actor_id,
                    action=AuditAction.ADDED_USER.value,
                    target_type=AuditKind.USERS.value,
                    target_id=saved.id,
                    source_type=AuditKind.REALMS.value,
                    source_id=realm.id,
                )
            )
