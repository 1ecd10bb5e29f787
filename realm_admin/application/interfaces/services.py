"""Service interfaces (ports) for external collaborators."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from realm_admin.application.dtos.user import UserRecord


class IIdentityProvisioner(Protocol):
    """Creates the external authentication account for a user."""

    async def ensure_account(self, user: UserRecord) -> bool:
        """Create the account if missing. Return True if it was created, False if it already existed."""


class ICredentialNotifier(Protocol):
    """Sends credential-reset (set password) notifications."""

    async def send_credential_reset(self, email: str) -> None:
        """Send a password reset to email; raise on failure."""


class IBulkLoader(Protocol):
    """Loads entities of one audit kind by id in a single query."""

    async def __call__(self, ids: Iterable[str]) -> Iterable[Any]:
        """Return entities (each with an id attribute) for the given ids."""
