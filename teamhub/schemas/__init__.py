from .result import Err, Ok
from .team import (
    ErrorResponse,
    MemberInfo,
    TeamCreate,
    TeamCreationResponse,
    TeamEditUserRequest,
    TeamInfo,
    TeamMoveUserRequest,
    TeamUpdate,
)
from .user import UserCreate, UserInfo, UserUpdate

__all__ = [
    "Err",
    "ErrorResponse",
    "MemberInfo",
    "Ok",
    "TeamCreate",
    "TeamCreationResponse",
    "TeamEditUserRequest",
    "TeamInfo",
    "TeamMoveUserRequest",
    "TeamUpdate",
    "UserCreate",
    "UserInfo",
    "UserUpdate",
]
