from typing import TypeVar

from fastapi import HTTPException
from starlette import status

from teamhub import models, schemas
from teamhub.enums import TeamErrorCode

DataType = TypeVar("DataType")

ERROR_STATUS_CODES = {
    TeamErrorCode.not_found: status.HTTP_404_NOT_FOUND,
    TeamErrorCode.already_exists: status.HTTP_409_CONFLICT,
    TeamErrorCode.name_exists: status.HTTP_409_CONFLICT,
    TeamErrorCode.user_in_team: status.HTTP_409_CONFLICT,
    TeamErrorCode.not_a_member: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TeamErrorCode.same_team: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TeamErrorCode.admin_required: status.HTTP_422_UNPROCESSABLE_ENTITY,
    TeamErrorCode.create_failure: status.HTTP_500_INTERNAL_SERVER_ERROR,
    TeamErrorCode.transaction_failure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unwrap(result: schemas.Ok[DataType] | schemas.Err) -> schemas.Ok[DataType]:
    """Return the success value or raise the error envelope as an `HTTPException`."""
    if isinstance(result, schemas.Err):
        envelope = schemas.ErrorResponse(code=result.code, message=result.message)
        raise HTTPException(ERROR_STATUS_CODES[result.code], envelope.model_dump(mode="json"))
    return result


def user_info(user: models.User) -> schemas.UserInfo:
    return schemas.UserInfo(
        id=user.id,  # type: ignore
        email=user.email,
        role=user.role,
        team_id=user.team_id,
        is_active=user.is_active,
    )
