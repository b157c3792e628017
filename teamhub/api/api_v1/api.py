from fastapi import APIRouter

from teamhub.api.api_v1.endpoints import teams, users

api_router = APIRouter()
api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
