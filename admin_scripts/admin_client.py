import requests
from beanie import PydanticObjectId
from pydantic import model_validator
from pydantic_settings import BaseSettings

from teamhub import schemas


class AdminClientSettings(BaseSettings):
    hostname: str = "localhost"
    port: int = 8008
    api_v1_str: str = "/api/v1"
    base_url: str = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}:{port}"
    api_url: str = f"{base_url}{api_v1_str}"

    @model_validator(mode="after")
    def _set_base_url(self) -> "AdminClientSettings":
        hostname = self.hostname
        port = self.port
        self.base_url = f"https://{hostname}" if hostname != "localhost" else f"http://{hostname}:{port}"
        self.api_url = f"{self.base_url}{self.api_v1_str}"
        return self


class AdminClient:
    def __init__(self, settings: AdminClientSettings | None = None, session: requests.Session | None = None):
        settings = settings or AdminClientSettings()
        self.api_url = settings.api_url
        self.session = session or requests.Session()
        self.json_headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
        }

    def get_teams(self) -> list[schemas.TeamInfo]:
        url = f"{self.api_url}/teams/"
        response = self.session.get(url, headers=self.json_headers)
        response.raise_for_status()
        return [schemas.TeamInfo(**team) for team in response.json()]

    def create_team(
        self,
        name: str,
        super_admin_user_id: PydanticObjectId,
        members: list[PydanticObjectId],
        description: str | None = None,
    ) -> schemas.TeamCreationResponse:
        url = f"{self.api_url}/teams/create"
        data = schemas.TeamCreate(
            name=name, description=description, super_admin_user_id=super_admin_user_id, members=members
        )
        response = self.session.post(url, json=data.model_dump(mode="json"), headers=self.json_headers)
        response.raise_for_status()
        return schemas.TeamCreationResponse(**response.json())
