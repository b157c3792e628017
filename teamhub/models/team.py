from beanie import Document, Indexed


class Team(Document):
    name: Indexed(str, unique=True)  # type: ignore
    description: str | None = None

    class Settings:
        name = "team"
