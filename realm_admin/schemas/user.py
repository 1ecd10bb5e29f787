"""User batch import API schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from realm_admin.shared.utils.emails import check_email_address


class BatchUserSchema(BaseModel):
    """One user descriptor in a batch import request.

    The email is validated but kept exactly as sent: it is the lookup key
    for an exact, case-sensitive match, so it must not be normalized.
    """

    email: str = Field(..., max_length=320)
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return check_email_address(v)


class UserBatchRequest(BaseModel):
    """Request body for POST /users/import."""

    users: list[BatchUserSchema] = Field(..., min_length=1)


class UserBatchResponse(BaseModel):
    """Batch import response: users whose identity account was created, plus aggregated errors."""

    model_config = ConfigDict(populate_by_name=True)

    new_users: list[BatchUserSchema] = Field(default_factory=list, alias="newUsers")
    error: str | None = None
    error_code: str | None = Field(default=None, alias="errorCode")
