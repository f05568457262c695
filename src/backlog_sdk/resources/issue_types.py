from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import (
    CreateIssueTypeInput,
    DeleteIssueTypeInput,
    UpdateIssueTypeInput,
)
from backlog_sdk.models import IssueType


async def get_issue_types(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[IssueType]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "issueTypes"), List[IssueType]
    )


async def create_issue_type(
    client: BacklogClient, project_id_or_key: IDOrKey, body: CreateIssueTypeInput
) -> IssueType:
    return await client.request(
        "POST",
        api_path("projects", project_id_or_key, "issueTypes"),
        IssueType,
        body=body,
    )


async def update_issue_type(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    issue_type_id: int,
    body: UpdateIssueTypeInput,
) -> IssueType:
    return await client.request(
        "PATCH",
        api_path("projects", project_id_or_key, "issueTypes", issue_type_id),
        IssueType,
        body=body,
    )


async def delete_issue_type(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    issue_type_id: int,
    body: DeleteIssueTypeInput,
) -> IssueType:
    """Issues of the deleted type move to ``body.substitute_issue_type_id``."""
    return await client.request(
        "DELETE",
        api_path("projects", project_id_or_key, "issueTypes", issue_type_id),
        IssueType,
        body=body,
    )
