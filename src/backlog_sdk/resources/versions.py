from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import CreateVersionInput, UpdateVersionInput
from backlog_sdk.models import Version


async def get_versions(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[Version]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "versions"), List[Version]
    )


async def create_version(
    client: BacklogClient, project_id_or_key: IDOrKey, body: CreateVersionInput
) -> Version:
    return await client.request(
        "POST", api_path("projects", project_id_or_key, "versions"), Version, body=body
    )


async def update_version(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    version_id: int,
    body: UpdateVersionInput,
) -> Version:
    return await client.request(
        "PATCH",
        api_path("projects", project_id_or_key, "versions", version_id),
        Version,
        body=body,
    )


async def delete_version(
    client: BacklogClient, project_id_or_key: IDOrKey, version_id: int
) -> Version:
    return await client.request(
        "DELETE",
        api_path("projects", project_id_or_key, "versions", version_id),
        Version,
    )
