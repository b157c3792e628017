from typing import Any, Generic, TypeVar

from beanie import Document
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from .unit_of_work import UnitOfWork

ModelType = TypeVar("ModelType", bound=Document)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDError(Exception):
    pass


class DuplicateTeamNameError(CRUDError):
    pass


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: type[ModelType]):
        """
        CRUD object with default methods to Create, Read, Update, Delete (CRUD).

        Every write method accepts an optional `uow`. When given, the write is recorded in that
        unit of work and undone if the unit of work fails.

        **Parameters**

        * `model`: A Beanie model class
        """
        self.model = model

    async def get(self, id: Any) -> ModelType | None:
        return await self.model.get(id)

    async def get_multi(self, *, skip: int = 0, limit: int = 100) -> list[ModelType]:
        return await self.model.find_all().skip(skip).limit(limit).to_list()

    async def get_all(self) -> list[ModelType]:
        return await self.model.find_all().to_list()

    async def create(self, *, obj_in: CreateSchemaType, uow: UnitOfWork | None = None) -> ModelType:
        obj_in_data = jsonable_encoder(obj_in)
        db_obj = self.model(**obj_in_data)  # type: ignore
        return await self.insert(db_obj, uow=uow)

    async def update(
        self,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | dict[str, Any],
        uow: UnitOfWork | None = None,
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field in self.model.model_fields:
            if field in update_data:
                setattr(db_obj, field, update_data[field])
        return await self.save(db_obj, uow=uow)

    async def insert(self, db_obj: ModelType, *, uow: UnitOfWork | None = None) -> ModelType:
        if uow is not None:
            return await uow.insert(db_obj)
        await db_obj.insert()
        return db_obj

    async def save(self, db_obj: ModelType, *, uow: UnitOfWork | None = None) -> ModelType:
        if uow is not None:
            return await uow.save(db_obj)
        await db_obj.save()
        return db_obj

    async def save_all(self, db_objs: list[ModelType], *, uow: UnitOfWork | None = None) -> list[ModelType]:
        return [await self.save(db_obj, uow=uow) for db_obj in db_objs]

    async def remove_document(self, db_obj: ModelType, *, uow: UnitOfWork | None = None) -> None:
        if uow is not None:
            await uow.delete(db_obj)
            return
        await db_obj.delete()
