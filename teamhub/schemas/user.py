from beanie import PydanticObjectId
from pydantic import BaseModel, EmailStr

from teamhub.enums import UserRole


class UserBase(BaseModel):
    email: EmailStr
    role: UserRole = UserRole.external_user
    is_active: bool = True


# Properties to receive on creation
class UserCreate(UserBase):
    pass


# Properties to receive on update
class UserUpdate(BaseModel):
    role: UserRole | None = None
    team_id: PydanticObjectId | None = None
    is_active: bool | None = None


class UserInfo(BaseModel):
    id: PydanticObjectId
    email: str
    role: UserRole
    team_id: PydanticObjectId | None = None
    is_active: bool
