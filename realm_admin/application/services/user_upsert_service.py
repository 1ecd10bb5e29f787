"""User upsert: find a user by email across realms, or build a new one in memory."""

from __future__ import annotations

import logging

from realm_admin.application.dtos.user import UserRecord
from realm_admin.application.interfaces.repositories import IUserRepository
from realm_admin.domain.exceptions import UserLookupException

logger = logging.getLogger(__name__)


class UserUpsertService:
    """Finds or builds users for batch import. Never persists."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    async def find_or_build(self, email: str, name: str) -> tuple[UserRecord, bool]:
        """Return (user, was_existing).

        Emails match exactly (case-sensitive). A missing user is built from
        email and name with no id; any lookup error is raised as
        UserLookupException.
        """
        try:
            existing = await self._user_repo.get_by_email(email)
        except Exception as e:
            raise UserLookupException(email, str(e) or type(e).__name__) from e
        if existing is not None:
            return existing, True
        logger.debug("No user for %s; building a new one", email)
        return UserRecord(email=email, name=name), False
