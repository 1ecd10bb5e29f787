"""Application ports (Protocols). Infrastructure implements these."""

from realm_admin.application.interfaces.repositories import (
    IAuditEntryRepository,
    IRealmRepository,
    ITransactionScope,
    IUnitOfWork,
    IUserRepository,
)
from realm_admin.application.interfaces.services import (
    IBulkLoader,
    ICredentialNotifier,
    IIdentityProvisioner,
)

__all__ = [
    "IAuditEntryRepository",
    "IBulkLoader",
    "ICredentialNotifier",
    "IIdentityProvisioner",
    "IRealmRepository",
    "ITransactionScope",
    "IUnitOfWork",
    "IUserRepository",
]
