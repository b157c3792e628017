import pytest

from teamhub import crud, models
from teamhub.enums import UserRole


class WriteFailed(Exception):
    pass


@pytest.mark.asyncio
async def test_commit_keeps_writes(users):
    async with crud.UnitOfWork() as uow:
        team = await uow.insert(models.Team(name="Alpha"))
        users[0].team_id = team.id
        await uow.save(users[0])
        assert uow.pending == 2
    assert uow.pending == 0

    assert await models.Team.get(team.id) is not None
    assert (await models.User.get(users[0].id)).team_id == team.id


@pytest.mark.asyncio
async def test_exception_undoes_writes_in_reverse_order(users):
    existing = await models.Team(name="Existing").insert()
    with pytest.raises(WriteFailed):
        async with crud.UnitOfWork() as uow:
            team = await uow.insert(models.Team(name="Alpha"))
            users[0].team_id = team.id
            users[0].role = UserRole.external_super_admin
            await uow.save(users[0])
            users[0].role = UserRole.external_member
            await uow.save(users[0])
            await uow.delete(existing)
            raise WriteFailed()

    assert await models.Team.get(team.id) is None
    restored = await models.User.get(users[0].id)
    assert restored.team_id is None
    assert restored.role == UserRole.external_user
    assert (await models.Team.get(existing.id)).name == "Existing"


@pytest.mark.asyncio
async def test_save_of_new_document_is_undone(db):
    with pytest.raises(WriteFailed):
        async with crud.UnitOfWork() as uow:
            user = await uow.save(models.User(email="new@example.com"))
            raise WriteFailed()
    assert await models.User.get(user.id) is None


@pytest.mark.asyncio
async def test_writes_outside_block_are_rejected(db):
    uow = crud.UnitOfWork()
    with pytest.raises(RuntimeError):
        await uow.insert(models.Team(name="Alpha"))
    assert await models.Team.find_all().to_list() == []
