from beanie import PydanticObjectId
from fastapi import APIRouter

from teamhub import schemas
from teamhub.api import deps
from teamhub.api.api_v1.endpoints.utils import unwrap

router = APIRouter()


@router.post("/create", response_model=schemas.TeamCreationResponse)
async def create_team(
    creation_request: schemas.TeamCreate, manager: deps.TeamManagerDep
) -> schemas.TeamCreationResponse:
    result = unwrap(await manager.create_team(obj_in=creation_request))
    return schemas.TeamCreationResponse(message=result.message, data=result.data)


@router.get("/", response_model=list[schemas.TeamInfo])
async def list_teams(manager: deps.TeamManagerDep) -> list[schemas.TeamInfo]:
    return (await manager.find_all()).data


@router.post("/move-user", response_model=schemas.TeamInfo)
async def move_user(move_request: schemas.TeamMoveUserRequest, manager: deps.TeamManagerDep) -> schemas.TeamInfo:
    result = await manager.move_user_to_another_team(
        user_id=move_request.user_id,
        source_team_id=move_request.source_team_id,
        target_team_id=move_request.target_team_id,
    )
    return unwrap(result).data


@router.get("/{id}", response_model=schemas.TeamInfo)
async def get_team_by_id(id: PydanticObjectId, manager: deps.TeamManagerDep) -> schemas.TeamInfo:
    return unwrap(await manager.find_one(id)).data


@router.post("/{id}/update", response_model=schemas.TeamInfo)
async def update_team(
    id: PydanticObjectId, update_request: schemas.TeamUpdate, manager: deps.TeamManagerDep
) -> schemas.TeamInfo:
    return unwrap(await manager.update_team(id, obj_in=update_request)).data


@router.post("/{id}/delete", response_model=dict[str, str])
async def delete_team(id: PydanticObjectId, manager: deps.TeamManagerDep) -> dict[str, str]:
    result = unwrap(await manager.delete_team(id))
    return {"detail": result.message}


@router.post("/{id}/add-users", response_model=schemas.TeamInfo)
async def add_users(
    id: PydanticObjectId, edit_request: schemas.TeamEditUserRequest, manager: deps.TeamManagerDep
) -> schemas.TeamInfo:
    return unwrap(await manager.add_team_members(id, user_ids=edit_request.users)).data


@router.post("/{id}/remove-user/{user_id}", response_model=schemas.TeamInfo)
async def remove_user(id: PydanticObjectId, user_id: PydanticObjectId, manager: deps.TeamManagerDep) -> schemas.TeamInfo:
    return unwrap(await manager.remove_team_member(id, user_id=user_id)).data
