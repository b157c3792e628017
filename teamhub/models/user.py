from beanie import Document, Indexed, PydanticObjectId

from teamhub.enums import UserRole


class User(Document):
    email: Indexed(str, unique=True)  # type: ignore
    role: UserRole = UserRole.external_user
    team_id: PydanticObjectId | None = None
    is_active: bool = True

    class Settings:
        name = "user"
