from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import CreatePullRequestInput, UpdatePullRequestInput
from backlog_sdk.models import CountResponse, PullRequest, PullRequestComment
from backlog_sdk.options import GetPullRequestCommentsOptions, GetPullRequestsOptions


def _pulls(project_id_or_key: IDOrKey, repo_id_or_name: IDOrKey, *rest) -> str:
    return api_path(
        "projects",
        project_id_or_key,
        "git",
        "repositories",
        repo_id_or_name,
        "pullRequests",
        *rest,
    )


async def get_pull_requests(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    *,
    options: Optional[GetPullRequestsOptions] = None,
) -> List[PullRequest]:
    return await client.request(
        "GET",
        _pulls(project_id_or_key, repo_id_or_name),
        List[PullRequest],
        options=options,
    )


async def get_pull_requests_count(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    *,
    options: Optional[GetPullRequestsOptions] = None,
) -> int:
    resp = await client.request(
        "GET",
        _pulls(project_id_or_key, repo_id_or_name, "count"),
        CountResponse,
        options=options,
    )
    return resp.count if resp else 0


async def get_pull_request(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    number: int,
) -> PullRequest:
    return await client.request(
        "GET", _pulls(project_id_or_key, repo_id_or_name, number), PullRequest
    )


async def create_pull_request(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    body: CreatePullRequestInput,
) -> PullRequest:
    return await client.request(
        "POST", _pulls(project_id_or_key, repo_id_or_name), PullRequest, body=body
    )


async def update_pull_request(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    number: int,
    body: UpdatePullRequestInput,
) -> PullRequest:
    return await client.request(
        "PATCH",
        _pulls(project_id_or_key, repo_id_or_name, number),
        PullRequest,
        body=body,
    )


async def get_pull_request_comments(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    number: int,
    *,
    options: Optional[GetPullRequestCommentsOptions] = None,
) -> List[PullRequestComment]:
    return await client.request(
        "GET",
        _pulls(project_id_or_key, repo_id_or_name, number, "comments"),
        List[PullRequestComment],
        options=options,
    )


async def get_pull_request_comments_count(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    repo_id_or_name: IDOrKey,
    number: int,
) -> int:
    resp = await client.request(
        "GET",
        _pulls(project_id_or_key, repo_id_or_name, number, "comments", "count"),
        CountResponse,
    )
    return resp.count if resp else 0
