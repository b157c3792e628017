from typing import Annotated, Literal

from beanie import PydanticObjectId
from pydantic import BaseModel, Field, StringConstraints

from teamhub.config import settings
from teamhub.enums import TeamErrorCode, UserRole

TeamName = Annotated[str, StringConstraints(min_length=1, max_length=settings.max_team_name_length)]
MemberIds = Annotated[list[PydanticObjectId], Field(max_length=settings.max_team_members)]


class TeamBase(BaseModel):
    name: TeamName
    description: str | None = None


# Properties to receive via API on creation
class TeamCreate(TeamBase):
    super_admin_user_id: PydanticObjectId
    members: MemberIds = []


# Properties to receive via API on update. Unset fields are left untouched,
# an explicit `description: null` clears the description.
class TeamUpdate(BaseModel):
    name: TeamName | None = None
    description: str | None = None


class MemberInfo(BaseModel):
    id: PydanticObjectId
    # Stored as given by the identity provider, not revalidated here.
    email: str
    role: UserRole


class TeamInfo(TeamBase):
    id: PydanticObjectId
    members: list[MemberInfo] = []


class TeamCreationResponse(BaseModel):
    success: bool = True
    message: str
    data: TeamInfo


class TeamEditUserRequest(BaseModel):
    users: Annotated[list[PydanticObjectId], Field(min_length=1, max_length=settings.max_team_members)]


class TeamMoveUserRequest(BaseModel):
    user_id: PydanticObjectId
    source_team_id: PydanticObjectId
    target_team_id: PydanticObjectId


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    code: TeamErrorCode
    message: str
