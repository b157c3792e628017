from .base import CRUDBase, CRUDError, DuplicateTeamNameError
from .crud_team import CRUDTeam, team
from .crud_user import CRUDUser, user
from .unit_of_work import UnitOfWork

__all__ = [
    "CRUDBase",
    "CRUDError",
    "CRUDTeam",
    "CRUDUser",
    "DuplicateTeamNameError",
    "UnitOfWork",
    "team",
    "user",
]
