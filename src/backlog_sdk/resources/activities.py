from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.models import Activity
from backlog_sdk.options import GetProjectActivitiesOptions, GetUserActivitiesOptions


async def get_user_activities(
    client: BacklogClient,
    user_id: int,
    *,
    options: Optional[GetUserActivitiesOptions] = None,
) -> List[Activity]:
    """GET users/{id}/activities"""
    return await client.request(
        "GET",
        api_path("users", user_id, "activities"),
        List[Activity],
        options=options,
    )


async def get_project_activities(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    *,
    options: Optional[GetProjectActivitiesOptions] = None,
) -> List[Activity]:
    """GET projects/{idOrKey}/activities"""
    return await client.request(
        "GET",
        api_path("projects", project_id_or_key, "activities"),
        List[Activity],
        options=options,
    )
