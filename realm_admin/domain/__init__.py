"""Domain layer: enums and exceptions shared by every other layer."""

from realm_admin.domain.enums import AuditAction, AuditKind
from realm_admin.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CredentialNotificationException,
    IdentityProviderNotConfiguredException,
    IdentityProvisioningException,
    RealmAdminException,
    RealmNotFoundException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UnknownAuditKindException,
    UserLookupException,
    UserPersistenceException,
    ValidationException,
)

__all__ = [
    "AuditAction",
    "AuditKind",
    "AuthenticationException",
    "AuthorizationException",
    "CredentialNotificationException",
    "IdentityProviderNotConfiguredException",
    "IdentityProvisioningException",
    "RealmAdminException",
    "RealmNotFoundException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UnknownAuditKindException",
    "UserLookupException",
    "UserPersistenceException",
    "ValidationException",
]
