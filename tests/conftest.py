import pytest_asyncio
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from teamhub import crud, models, schemas
from teamhub.internals.team_manager import TeamMembershipManager


@pytest_asyncio.fixture
async def db():
    client = AsyncMongoMockClient()
    database = client["teamhub_test"]
    await init_beanie(database=database, document_models=[models.Team, models.User])
    yield database


@pytest_asyncio.fixture
async def users(db) -> list[models.User]:
    return [await crud.user.create(obj_in=schemas.UserCreate(email=f"user{i}@example.com")) for i in range(5)]


@pytest_asyncio.fixture
async def manager(db) -> TeamMembershipManager:
    return TeamMembershipManager()