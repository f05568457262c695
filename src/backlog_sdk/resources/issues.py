from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient, ByteSink
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.core.query import append_query
from backlog_sdk.inputs import (
    CreateIssueCommentInput,
    CreateIssueCommentsNotificationInput,
    CreateIssueInput,
    CreateIssueSharedFilesInput,
    UpdateIssueCommentInput,
    UpdateIssueInput,
    custom_field_params,
)
from backlog_sdk.models import (
    Attachment,
    CountResponse,
    Issue,
    IssueComment,
    Notification,
    RecentlyViewedIssue,
    SharedFile,
    User,
)
from backlog_sdk.options import (
    GetIssueCommentsOptions,
    GetIssuesCountOptions,
    GetIssuesOptions,
    GetRecentlyViewedIssuesOptions,
)


async def get_issues(
    client: BacklogClient, *, options: Optional[GetIssuesOptions] = None
) -> List[Issue]:
    return await client.request("GET", api_path("issues"), List[Issue], options=options)


async def get_issue_count(
    client: BacklogClient, *, options: Optional[GetIssuesCountOptions] = None
) -> int:
    resp = await client.request(
        "GET", api_path("issues", "count"), CountResponse, options=options
    )
    return resp.count if resp else 0


async def create_issue(client: BacklogClient, body: CreateIssueInput) -> Issue:
    """
    POST issues.
    Custom field values travel as ``customField_{id}`` query parameters.
    """
    path = append_query(api_path("issues"), custom_field_params(body.custom_fields))
    return await client.request("POST", path, Issue, body=body)


async def get_issue(client: BacklogClient, issue_id_or_key: IDOrKey) -> Issue:
    return await client.request("GET", api_path("issues", issue_id_or_key), Issue)


async def update_issue(
    client: BacklogClient, issue_id_or_key: IDOrKey, body: UpdateIssueInput
) -> Issue:
    path = append_query(
        api_path("issues", issue_id_or_key), custom_field_params(body.custom_fields)
    )
    return await client.request("PATCH", path, Issue, body=body)


async def get_my_recently_viewed_issues(
    client: BacklogClient,
    *,
    options: Optional[GetRecentlyViewedIssuesOptions] = None,
) -> List[RecentlyViewedIssue]:
    return await client.request(
        "GET",
        api_path("users", "myself", "recentlyViewedIssues"),
        List[RecentlyViewedIssue],
        options=options,
    )


# --- Comments ---


async def get_issue_comments(
    client: BacklogClient,
    issue_id_or_key: IDOrKey,
    *,
    options: Optional[GetIssueCommentsOptions] = None,
) -> List[IssueComment]:
    return await client.request(
        "GET",
        api_path("issues", issue_id_or_key, "comments"),
        List[IssueComment],
        options=options,
    )


async def create_issue_comment(
    client: BacklogClient, issue_id_or_key: IDOrKey, body: CreateIssueCommentInput
) -> IssueComment:
    return await client.request(
        "POST",
        api_path("issues", issue_id_or_key, "comments"),
        IssueComment,
        body=body,
    )


async def get_issue_comments_count(
    client: BacklogClient, issue_id_or_key: IDOrKey
) -> int:
    resp = await client.request(
        "GET", api_path("issues", issue_id_or_key, "comments", "count"), CountResponse
    )
    return resp.count if resp else 0


async def get_issue_comment(
    client: BacklogClient, issue_id_or_key: IDOrKey, comment_id: int
) -> IssueComment:
    return await client.request(
        "GET",
        api_path("issues", issue_id_or_key, "comments", comment_id),
        IssueComment,
    )


async def update_issue_comment(
    client: BacklogClient,
    issue_id_or_key: IDOrKey,
    comment_id: int,
    body: UpdateIssueCommentInput,
) -> IssueComment:
    return await client.request(
        "PATCH",
        api_path("issues", issue_id_or_key, "comments", comment_id),
        IssueComment,
        body=body,
    )


async def delete_issue_comment(
    client: BacklogClient, issue_id_or_key: IDOrKey, comment_id: int
) -> IssueComment:
    return await client.request(
        "DELETE",
        api_path("issues", issue_id_or_key, "comments", comment_id),
        IssueComment,
    )


async def get_issue_comment_notifications(
    client: BacklogClient, issue_id_or_key: IDOrKey, comment_id: int
) -> List[Notification]:
    return await client.request(
        "GET",
        api_path("issues", issue_id_or_key, "comments", comment_id, "notifications"),
        List[Notification],
    )


async def create_issue_comment_notification(
    client: BacklogClient,
    issue_id_or_key: IDOrKey,
    comment_id: int,
    body: CreateIssueCommentsNotificationInput,
) -> IssueComment:
    return await client.request(
        "POST",
        api_path("issues", issue_id_or_key, "comments", comment_id, "notifications"),
        IssueComment,
        body=body,
    )


# --- Attachments, participants, shared files ---


async def get_issue_attachments(
    client: BacklogClient, issue_id_or_key: IDOrKey
) -> List[Attachment]:
    return await client.request(
        "GET", api_path("issues", issue_id_or_key, "attachments"), List[Attachment]
    )


async def download_issue_attachment(
    client: BacklogClient,
    issue_id_or_key: IDOrKey,
    attachment_id: int,
    sink: ByteSink,
) -> None:
    """Stream the raw attachment bytes into ``sink``."""
    await client.request(
        "GET",
        api_path("issues", issue_id_or_key, "attachments", attachment_id),
        sink=sink,
    )


async def delete_issue_attachment(
    client: BacklogClient, issue_id_or_key: IDOrKey, attachment_id: int
) -> Attachment:
    return await client.request(
        "DELETE",
        api_path("issues", issue_id_or_key, "attachments", attachment_id),
        Attachment,
    )


async def get_issue_participants(
    client: BacklogClient, issue_id_or_key: IDOrKey
) -> List[User]:
    return await client.request(
        "GET", api_path("issues", issue_id_or_key, "participants"), List[User]
    )


async def get_issue_shared_files(
    client: BacklogClient, issue_id_or_key: IDOrKey
) -> List[SharedFile]:
    return await client.request(
        "GET", api_path("issues", issue_id_or_key, "sharedFiles"), List[SharedFile]
    )


async def link_issue_shared_files(
    client: BacklogClient, issue_id_or_key: IDOrKey, body: CreateIssueSharedFilesInput
) -> List[SharedFile]:
    return await client.request(
        "POST",
        api_path("issues", issue_id_or_key, "sharedFiles"),
        List[SharedFile],
        body=body,
    )


async def unlink_issue_shared_file(
    client: BacklogClient, issue_id_or_key: IDOrKey, shared_file_id: int
) -> SharedFile:
    return await client.request(
        "DELETE",
        api_path("issues", issue_id_or_key, "sharedFiles", shared_file_id),
        SharedFile,
    )
