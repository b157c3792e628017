from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(secrets_dir="/run/secrets")

    project_name: str = "teamhub"
    api_v1_str: str = "/api/v1"
    log_level: str = "INFO"

    # Database
    database_url: str | None = None
    mongodb_root_username: str | None = None
    mongodb_root_password: SecretStr = "TODO generate with `openssl rand -hex 32`"  # type: ignore

    # Teams
    max_team_name_length: int = 64
    max_team_members: int = 100

    def mongodb_url(self) -> str:
        if self.mongodb_root_username is None:
            return f"mongodb://{self.database_url}"
        password = self.mongodb_root_password.get_secret_value()
        return f"mongodb://{self.mongodb_root_username}:{password}@{self.database_url}"


settings = Settings()
