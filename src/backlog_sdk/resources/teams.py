from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient, ByteSink
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import (
    AddProjectTeamInput,
    CreateTeamInput,
    DeleteProjectTeamInput,
    UpdateTeamInput,
)
from backlog_sdk.models import Team
from backlog_sdk.options import GetTeamsOptions


async def get_teams(
    client: BacklogClient, *, options: Optional[GetTeamsOptions] = None
) -> List[Team]:
    return await client.request("GET", api_path("teams"), List[Team], options=options)


async def create_team(client: BacklogClient, body: CreateTeamInput) -> Team:
    # not available on backlog.com spaces
    return await client.request("POST", api_path("teams"), Team, body=body)


async def get_team(client: BacklogClient, team_id: int) -> Team:
    return await client.request("GET", api_path("teams", team_id), Team)


async def update_team(
    client: BacklogClient, team_id: int, body: UpdateTeamInput
) -> Team:
    return await client.request("PATCH", api_path("teams", team_id), Team, body=body)


async def delete_team(client: BacklogClient, team_id: int) -> Team:
    return await client.request("DELETE", api_path("teams", team_id), Team)


async def get_team_icon(client: BacklogClient, team_id: int, sink: ByteSink) -> None:
    await client.request("GET", api_path("teams", team_id, "icon"), sink=sink)


async def get_project_teams(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[Team]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "teams"), List[Team]
    )


async def add_project_team(
    client: BacklogClient, project_id_or_key: IDOrKey, body: AddProjectTeamInput
) -> Team:
    return await client.request(
        "POST", api_path("projects", project_id_or_key, "teams"), Team, body=body
    )


async def delete_project_team(
    client: BacklogClient, project_id_or_key: IDOrKey, body: DeleteProjectTeamInput
) -> Team:
    return await client.request(
        "DELETE", api_path("projects", project_id_or_key, "teams"), Team, body=body
    )
