import csv
from pathlib import Path

import click
import pandas as pd
from beanie import PydanticObjectId

from .admin_client import AdminClient, AdminClientSettings

MAX_MEMBERS_PER_ROW = 5


def _member_ids(row: pd.Series) -> list[PydanticObjectId]:
    columns = [f"Team member {i} user ID" for i in range(1, MAX_MEMBERS_PER_ROW + 1)]
    return [PydanticObjectId(row[column]) for column in columns if column in row and not pd.isna(row[column])]


def create_teams(filename: Path, client: AdminClient) -> list[dict[str, str]]:
    df = pd.read_csv(filename, dtype=str)
    existing_names = {team.name for team in client.get_teams()}
    teams_created = []
    for _, row in df.iterrows():
        team_name = row["Team name"]
        if team_name in existing_names:
            click.echo(f"Team {team_name} already exists")
            continue
        description = row.get("Description")
        created = client.create_team(
            team_name,
            super_admin_user_id=PydanticObjectId(row["Admin user ID"]),
            members=_member_ids(row),
            description=None if pd.isna(description) else description,
        )
        existing_names.add(team_name)
        for member in created.data.members:
            teams_created.append(
                {
                    "team": team_name,
                    "email": member.email,
                    "role": member.role.value,
                }
            )
    return teams_created


def write_results(filename: Path, teams_created: list[dict[str, str]]) -> Path:
    result_path = filename.parent / "created" / f"{filename.stem}-created.csv"
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with open(result_path, "w") as f:
        writer = csv.DictWriter(f, fieldnames=["team", "email", "role"])
        writer.writeheader()
        writer.writerows(teams_created)
    return result_path


@click.command()
@click.option("--file_path", help="CSV file with one team per row", type=Path)
@click.option("--env_file", help=".env file to use", default=".env.admin", type=str)
def cli(file_path: Path, env_file: str):
    teams_created = create_teams(file_path, AdminClient(AdminClientSettings(_env_file=env_file)))  # type: ignore
    click.echo(f"Results written to {write_results(file_path, teams_created)}")


if __name__ == "__main__":
    cli()
