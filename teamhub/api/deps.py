from typing import Annotated

from beanie import PydanticObjectId
from fastapi import Depends, HTTPException
from starlette import status

from teamhub import crud, models
from teamhub.internals.team_manager import TeamMembershipManager, team_manager


def get_team_manager() -> TeamMembershipManager:
    return team_manager


async def get_user(user_id: PydanticObjectId) -> models.User:
    user = await crud.user.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


TeamManagerDep = Annotated[TeamMembershipManager, Depends(get_team_manager)]
UserDep = Annotated[models.User, Depends(get_user)]
