"""Firebase Identity Toolkit integration (account provisioning, reset emails)."""

from realm_admin.infrastructure.firebase._identity_toolkit import (
    FirebaseIdentityClient,
    IdentityToolkitError,
)
from realm_admin.infrastructure.firebase.client import (
    close_identity_client,
    get_identity_client,
    init_identity_client,
)

__all__ = [
    "FirebaseIdentityClient",
    "IdentityToolkitError",
    "close_identity_client",
    "get_identity_client",
    "init_identity_client",
]
