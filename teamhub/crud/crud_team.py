from pymongo.errors import DuplicateKeyError

from teamhub import models, schemas

from .base import CRUDBase, DuplicateTeamNameError, ModelType
from .unit_of_work import UnitOfWork


class CRUDTeam(CRUDBase[models.Team, schemas.TeamCreate, schemas.TeamUpdate]):
    async def create(self, *, obj_in: schemas.TeamCreate, uow: UnitOfWork | None = None) -> models.Team:
        db_obj = self.model(name=obj_in.name, description=obj_in.description)
        try:
            return await self.insert(db_obj, uow=uow)
        except DuplicateKeyError:
            raise DuplicateTeamNameError(f"Duplicate team name: team name '{obj_in.name}' already exists")

    async def save(self, db_obj: ModelType, *, uow: UnitOfWork | None = None) -> ModelType:
        try:
            return await super().save(db_obj, uow=uow)
        except DuplicateKeyError:
            raise DuplicateTeamNameError(f"Duplicate team name: team name '{db_obj.name}' already exists")

    async def get_by_name(self, *, name: str) -> models.Team | None:
        return await self.model.find_one(self.model.name == name)

    async def name_taken(self, *, name: str, exclude: models.Team | None = None) -> bool:
        existing = await self.get_by_name(name=name)
        if existing is None:
            return False
        return exclude is None or existing.id != exclude.id


team = CRUDTeam(models.Team)
