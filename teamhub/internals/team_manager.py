import logging
from collections.abc import Sequence

from beanie import PydanticObjectId
from pymongo.errors import PyMongoError

from teamhub import crud, models, schemas
from teamhub.enums import TeamErrorCode, UserRole

logger = logging.getLogger(__name__)

TEAM_ROLES = {UserRole.external_super_admin, UserRole.external_member}

TeamResult = schemas.Ok[schemas.TeamInfo] | schemas.Err


def member_info(user: models.User) -> schemas.MemberInfo:
    return schemas.MemberInfo(id=user.id, email=user.email, role=user.role)  # type: ignore


def team_info(team: models.Team, members: Sequence[models.User]) -> schemas.TeamInfo:
    return schemas.TeamInfo(
        id=team.id,  # type: ignore
        name=team.name,
        description=team.description,
        members=[member_info(member) for member in members],
    )


def _attach(user: models.User, team: models.Team, role: UserRole) -> None:
    user.role = role
    user.team_id = team.id


def _detach(user: models.User) -> None:
    user.team_id = None
    if user.role in TEAM_ROLES:
        user.role = UserRole.external_user


def _err(code: TeamErrorCode, message: str) -> schemas.Err:
    logger.warning("Team operation rejected (%s): %s", code.value, message)
    return schemas.Err(code=code, message=message)


class TeamMembershipManager:
    """Creates, reads, updates and deletes teams and keeps their members' roles consistent.

    Expected failures are returned as `schemas.Err` values, successes as `schemas.Ok`. Every
    operation that writes more than one document does so inside a `crud.UnitOfWork`, so either all of
    its writes are visible afterwards or none are.
    """

    def __init__(self, teams: crud.CRUDTeam = crud.team, users: crud.CRUDUser = crud.user):
        self.teams = teams
        self.users = users

    async def _get_team(
        self, id: PydanticObjectId
    ) -> tuple[models.Team, list[models.User]] | schemas.Err:
        team = await self.teams.get(id)
        if team is None:
            return _err(TeamErrorCode.not_found, "Team not found")
        assert team.id is not None
        return team, await self.users.get_by_team(team_id=team.id)

    async def _reload(self, team: models.Team) -> schemas.TeamInfo:
        assert team.id is not None
        return team_info(team, await self.users.get_by_team(team_id=team.id))

    async def create_team(self, *, obj_in: schemas.TeamCreate) -> TeamResult:
        if await self.teams.get_by_name(name=obj_in.name) is not None:
            return _err(TeamErrorCode.already_exists, f"Team name '{obj_in.name}' already exists")

        super_admin = await self.users.get(obj_in.super_admin_user_id)
        if super_admin is None:
            return _err(TeamErrorCode.not_found, "Super admin user not found")

        members = await self.users.get_many(ids=obj_in.members)
        if len(members) != len(obj_in.members):
            return _err(TeamErrorCode.not_found, "One or more team members not found")

        try:
            async with crud.UnitOfWork() as uow:
                team = await self.teams.create(obj_in=obj_in, uow=uow)
                _attach(super_admin, team, UserRole.external_super_admin)
                await self.users.save(super_admin, uow=uow)

                members = [member for member in members if member.id != super_admin.id]
                for member in members:
                    _attach(member, team, UserRole.external_member)
                await self.users.save_all(members, uow=uow)

                created = await self.teams.get(team.id)
                if created is None:
                    raise crud.CRUDError(f"Team '{obj_in.name}' disappeared while being created")
                info = await self._reload(created)
        except crud.DuplicateTeamNameError as e:
            return _err(TeamErrorCode.already_exists, str(e))
        except (crud.CRUDError, PyMongoError) as e:
            logger.exception("Failed to create team '%s'", obj_in.name)
            return schemas.Err(code=TeamErrorCode.create_failure, message=str(e) or "Failed to create team")

        logger.info("Created team '%s' (%s) with %d member(s)", info.name, info.id, len(info.members))
        return schemas.Ok[schemas.TeamInfo](data=info, message="Team created")

    async def find_all(self) -> schemas.Ok[list[schemas.TeamInfo]]:
        teams = await self.teams.get_all()
        members = await self.users.get_by_teams(team_ids=[team.id for team in teams])  # type: ignore
        return schemas.Ok[list[schemas.TeamInfo]](data=[team_info(team, members[team.id]) for team in teams])  # type: ignore

    async def find_one(self, id: PydanticObjectId) -> TeamResult:
        found = await self._get_team(id)
        if isinstance(found, schemas.Err):
            return found
        team, members = found
        return schemas.Ok[schemas.TeamInfo](data=team_info(team, members))

    async def update_team(self, id: PydanticObjectId, *, obj_in: schemas.TeamUpdate) -> TeamResult:
        team = await self.teams.get(id)
        if team is None:
            return _err(TeamErrorCode.not_found, "Team not found")

        update_data = obj_in.model_dump(exclude_unset=True)
        if update_data.get("name") is None:
            update_data.pop("name", None)
        new_name = update_data.get("name")
        if new_name is not None and new_name != team.name:
            if await self.teams.name_taken(name=new_name, exclude=team):
                return _err(TeamErrorCode.name_exists, f"Team name '{new_name}' already exists")

        try:
            team = await self.teams.update(db_obj=team, obj_in=update_data)
        except crud.DuplicateTeamNameError as e:
            return _err(TeamErrorCode.name_exists, str(e))
        except PyMongoError as e:
            logger.exception("Failed to update team %s", id)
            return schemas.Err(code=TeamErrorCode.transaction_failure, message=str(e) or "Failed to update team")

        logger.info("Updated team %s: %s", id, sorted(update_data))
        return schemas.Ok[schemas.TeamInfo](data=await self._reload(team), message="Team updated")

    async def delete_team(self, id: PydanticObjectId) -> schemas.Ok[None] | schemas.Err:
        found = await self._get_team(id)
        if isinstance(found, schemas.Err):
            return found
        team, members = found

        try:
            async with crud.UnitOfWork() as uow:
                for member in members:
                    _detach(member)
                await self.users.save_all(members, uow=uow)
                await self.teams.remove_document(team, uow=uow)
        except (crud.CRUDError, PyMongoError) as e:
            logger.exception("Failed to delete team %s", id)
            return schemas.Err(code=TeamErrorCode.transaction_failure, message=str(e) or "Failed to delete team")

        logger.info("Deleted team '%s' (%s), released %d member(s)", team.name, id, len(members))
        return schemas.Ok[None](data=None, message=f"Team with id '{id}' and name '{team.name}' deleted")

    async def add_team_members(self, id: PydanticObjectId, *, user_ids: Sequence[PydanticObjectId]) -> TeamResult:
        team = await self.teams.get(id)
        if team is None:
            return _err(TeamErrorCode.not_found, "Team not found")

        requested = list(dict.fromkeys(user_ids))
        users = await self.users.get_many(ids=requested)
        if len(users) != len(requested):
            return _err(TeamErrorCode.not_found, "One or more users not found")

        in_other_team = [str(user.id) for user in users if user.team_id is not None and user.team_id != team.id]
        if in_other_team:
            return _err(TeamErrorCode.user_in_team, f"Users already in another team: {', '.join(in_other_team)}")

        new_members = [user for user in users if user.team_id != team.id]
        for user in new_members:
            _attach(user, team, UserRole.external_member)
        try:
            async with crud.UnitOfWork() as uow:
                await self.users.save_all(new_members, uow=uow)
        except (crud.CRUDError, PyMongoError) as e:
            logger.exception("Failed to add members to team %s", id)
            return schemas.Err(code=TeamErrorCode.transaction_failure, message=str(e) or "Failed to add members")

        logger.info("Added %d member(s) to team %s", len(new_members), id)
        return schemas.Ok[schemas.TeamInfo](data=await self._reload(team), message="Members added")

    async def remove_team_member(self, id: PydanticObjectId, *, user_id: PydanticObjectId) -> TeamResult:
        team = await self.teams.get(id)
        if team is None:
            return _err(TeamErrorCode.not_found, "Team not found")
        user = await self.users.get(user_id)
        if user is None:
            return _err(TeamErrorCode.not_found, "User not found")
        if user.team_id != team.id:
            return _err(TeamErrorCode.not_a_member, "User is not a member of this team")
        if user.role == UserRole.external_super_admin:
            return _err(TeamErrorCode.admin_required, "The team's super admin cannot be removed")

        _detach(user)
        try:
            async with crud.UnitOfWork() as uow:
                await self.users.save(user, uow=uow)
        except (crud.CRUDError, PyMongoError) as e:
            logger.exception("Failed to remove user %s from team %s", user_id, id)
            return schemas.Err(code=TeamErrorCode.transaction_failure, message=str(e) or "Failed to remove member")

        logger.info("Removed user %s from team %s", user_id, id)
        return schemas.Ok[schemas.TeamInfo](data=await self._reload(team), message="Member removed")

    async def move_user_to_another_team(
        self,
        *,
        user_id: PydanticObjectId,
        source_team_id: PydanticObjectId,
        target_team_id: PydanticObjectId,
    ) -> TeamResult:
        source = await self.teams.get(source_team_id)
        target = await self.teams.get(target_team_id)
        if source is None or target is None:
            return _err(TeamErrorCode.not_found, "Team not found")
        if source.id == target.id:
            return _err(TeamErrorCode.same_team, "Source and target team are the same")
        user = await self.users.get(user_id)
        if user is None:
            return _err(TeamErrorCode.not_found, "User not found")
        if user.team_id != source.id:
            return _err(TeamErrorCode.not_a_member, "User is not a member of the source team")
        if user.role == UserRole.external_super_admin:
            return _err(TeamErrorCode.admin_required, "The team's super admin cannot be moved")

        _attach(user, target, UserRole.external_member)
        try:
            async with crud.UnitOfWork() as uow:
                await self.users.save(user, uow=uow)
        except (crud.CRUDError, PyMongoError) as e:
            logger.exception("Failed to move user %s to team %s", user_id, target_team_id)
            return schemas.Err(code=TeamErrorCode.transaction_failure, message=str(e) or "Failed to move member")

        logger.info("Moved user %s from team %s to team %s", user_id, source_team_id, target_team_id)
        return schemas.Ok[schemas.TeamInfo](data=await self._reload(target), message="Member moved")


team_manager = TeamMembershipManager()
