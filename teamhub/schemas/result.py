from typing import Generic, TypeVar

from pydantic import BaseModel

from teamhub.enums import TeamErrorCode

DataType = TypeVar("DataType")


class Ok(BaseModel, Generic[DataType]):
    """Successful outcome of a manager operation."""

    data: DataType
    message: str = ""


class Err(BaseModel):
    """Expected failure of a manager operation: a machine-readable code and a human message."""

    code: TeamErrorCode
    message: str
