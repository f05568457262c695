from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.models import GitRepository


async def get_git_repositories(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[GitRepository]:
    return await client.request(
        "GET",
        api_path("projects", project_id_or_key, "git", "repositories"),
        List[GitRepository],
    )


async def get_git_repository(
    client: BacklogClient, project_id_or_key: IDOrKey, repo_id_or_name: IDOrKey
) -> GitRepository:
    return await client.request(
        "GET",
        api_path("projects", project_id_or_key, "git", "repositories", repo_id_or_name),
        GitRepository,
    )
