from __future__ import annotations

from backlog_sdk.core.client import BacklogClient, ByteSink
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.inputs import UpdateSpaceNotificationInput
from backlog_sdk.models import (
    FileUploadResponse,
    Licence,
    Space,
    SpaceDiskUsage,
    SpaceNotification,
)

UPLOAD_FIELD = "file"


async def get_space(client: BacklogClient) -> Space:
    return await client.request("GET", api_path("space"), Space)


async def get_space_icon(client: BacklogClient, sink: ByteSink) -> None:
    await client.request("GET", api_path("space", "image"), sink=sink)


async def get_space_notification(client: BacklogClient) -> SpaceNotification:
    return await client.request(
        "GET", api_path("space", "notification"), SpaceNotification
    )


async def update_space_notification(
    client: BacklogClient, body: UpdateSpaceNotificationInput
) -> SpaceNotification:
    return await client.request(
        "PUT", api_path("space", "notification"), SpaceNotification, body=body
    )


async def get_space_disk_usage(client: BacklogClient) -> SpaceDiskUsage:
    return await client.request("GET", api_path("space", "diskUsage"), SpaceDiskUsage)


async def get_licence(client: BacklogClient) -> Licence:
    return await client.request("GET", api_path("space", "licence"), Licence)


async def upload_file(client: BacklogClient, file_path: str) -> FileUploadResponse:
    """
    Upload a local file to the space attachment area.
    The returned id is what attachment_ids fields on issues, comments and
    wikis refer to.
    """
    return await client.upload_file(
        "POST",
        api_path("space", "attachment"),
        file_path,
        UPLOAD_FIELD,
        FileUploadResponse,
    )
