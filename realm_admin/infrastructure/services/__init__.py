"""Infrastructure implementations of application service interfaces."""

from realm_admin.infrastructure.services.credential_notification_service import (
    LogOnlyCredentialNotifier,
)

__all__ = ["LogOnlyCredentialNotifier"]
