"""User use cases."""

from realm_admin.application.use_cases.users.import_user_batch import (
    ImportUserBatchUseCase,
)

__all__ = ["ImportUserBatchUseCase"]
