from collections.abc import Sequence

from fastapi import APIRouter

from teamhub import crud, schemas
from teamhub.api import deps
from teamhub.api.api_v1.endpoints import utils

router = APIRouter()


@router.get("/", response_model=Sequence[schemas.UserInfo])
async def read_users(skip: int = 0, limit: int = 100) -> list[schemas.UserInfo]:
    """
    Retrieve users.
    """
    users = await crud.user.get_multi(skip=skip, limit=limit)
    return [utils.user_info(user) for user in users]


@router.get("/{user_id}", response_model=schemas.UserInfo)
async def read_user_by_id(user: deps.UserDep) -> schemas.UserInfo:
    """
    Get a specific user by id.
    """
    return utils.user_info(user)
