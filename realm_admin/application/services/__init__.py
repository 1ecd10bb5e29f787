"""Application services used by the use cases."""

from realm_admin.application.services.audit_list_resolver import AuditListResolver
from realm_admin.application.services.batch_errors import BatchErrors
from realm_admin.application.services.user_upsert_service import UserUpsertService

__all__ = [
    "AuditListResolver",
    "BatchErrors",
    "UserUpsertService",
]
