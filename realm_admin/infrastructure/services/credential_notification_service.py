"""Credential notification: log-only sender for environments without Firebase email."""

from __future__ import annotations

import logging

from realm_admin.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class LogOnlyCredentialNotifier:
    """ICredentialNotifier implementation that logs instead of sending email.

    Used when FIREBASE_API_KEY is not configured. Accounts are still created;
    administrators send resets from the Firebase console.
    """

    async def send_credential_reset(self, email: str) -> None:
        logger.info("Password reset: would email %s", email)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Password reset for %s logged at %s", email, utc_now().isoformat())
