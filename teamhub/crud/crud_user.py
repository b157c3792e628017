from collections.abc import Iterable

from beanie import PydanticObjectId
from beanie.operators import In

from teamhub import models, schemas

from .base import CRUDBase


class CRUDUser(CRUDBase[models.User, schemas.UserCreate, schemas.UserUpdate]):
    async def get_many(self, *, ids: Iterable[PydanticObjectId]) -> list[models.User]:
        """Return the users matching `ids`. Unknown ids are skipped, so callers compare counts."""
        ids = list(dict.fromkeys(ids))
        if not ids:
            return []
        return await self.model.find(In(self.model.id, ids)).to_list()

    async def get_by_team(self, *, team_id: PydanticObjectId) -> list[models.User]:
        return await self.model.find(self.model.team_id == team_id).to_list()

    async def get_by_teams(self, *, team_ids: Iterable[PydanticObjectId]) -> dict[PydanticObjectId, list[models.User]]:
        team_ids = list(team_ids)
        members: dict[PydanticObjectId, list[models.User]] = {team_id: [] for team_id in team_ids}
        if not team_ids:
            return members
        for user in await self.model.find(In(self.model.team_id, team_ids)).to_list():
            members[user.team_id].append(user)  # type: ignore
        return members


user = CRUDUser(models.User)
