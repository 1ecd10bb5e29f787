"""User API: batch import into the current realm."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from realm_admin.api.v1.dependencies import (
    get_import_user_batch_use_case,
    get_realm,
    require_realm_admin,
)
from realm_admin.application.dtos.batch_import import BatchUser
from realm_admin.application.dtos.realm import RealmResult
from realm_admin.application.dtos.user import UserResult
from realm_admin.application.use_cases.users import ImportUserBatchUseCase
from realm_admin.core.config import get_settings
from realm_admin.domain.exceptions import ValidationException
from realm_admin.schemas.user import BatchUserSchema, UserBatchRequest, UserBatchResponse

router = APIRouter()

# Response error code when any descriptor failed.
BATCH_ERROR_CODE = "INTERNAL_ERROR"


@router.post(
    "/import",
    response_model=UserBatchResponse,
    response_model_exclude_none=True,
    responses={500: {"description": "No user was imported", "model": UserBatchResponse}},
)
async def import_users(
    body: UserBatchRequest,
    current_user: Annotated[UserResult, Depends(require_realm_admin)],
    realm: Annotated[RealmResult, Depends(get_realm)],
    use_case: Annotated[ImportUserBatchUseCase, Depends(get_import_user_batch_use_case)],
):
    """Import users into the realm.

    Returns 200 with the newly provisioned users (and an aggregated error
    message when some users failed). Returns 500 only when no user was newly
    provisioned and at least one user failed.
    """
    max_users = get_settings().batch_import_max_users
    if len(body.users) > max_users:
        raise ValidationException(
            f"At most {max_users} users can be imported per request", field="users"
        )
    result = await use_case.execute(
        actor_id=current_user.id,
        realm=realm,
        users=[BatchUser(email=u.email, name=u.name) for u in body.users],
    )
    response = UserBatchResponse(
        new_users=[BatchUserSchema(email=u.email, name=u.name) for u in result.new_users],
    )
    if result.has_errors:
        response.error = result.error_summary
        response.error_code = BATCH_ERROR_CODE
        if not result.succeeded:
            return JSONResponse(
                status_code=500,
                content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
            )
    return response
