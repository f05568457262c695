from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.inputs import CreateWatchingInput, UpdateWatchingInput
from backlog_sdk.models import CountResponse, Watching
from backlog_sdk.options import GetUserWatchingsCountOptions, GetUserWatchingsOptions


async def get_user_watchings(
    client: BacklogClient,
    user_id: int,
    *,
    options: Optional[GetUserWatchingsOptions] = None,
) -> List[Watching]:
    return await client.request(
        "GET", api_path("users", user_id, "watchings"), List[Watching], options=options
    )


async def get_user_watchings_count(
    client: BacklogClient,
    user_id: int,
    *,
    options: Optional[GetUserWatchingsCountOptions] = None,
) -> int:
    resp = await client.request(
        "GET",
        api_path("users", user_id, "watchings", "count"),
        CountResponse,
        options=options,
    )
    return resp.count if resp else 0


async def get_watching(client: BacklogClient, watching_id: int) -> Watching:
    return await client.request("GET", api_path("watchings", watching_id), Watching)


async def create_watching(client: BacklogClient, body: CreateWatchingInput) -> Watching:
    return await client.request("POST", api_path("watchings"), Watching, body=body)


async def update_watching(
    client: BacklogClient, watching_id: int, body: UpdateWatchingInput
) -> Watching:
    return await client.request(
        "PATCH", api_path("watchings", watching_id), Watching, body=body
    )


async def delete_watching(client: BacklogClient, watching_id: int) -> Watching:
    return await client.request("DELETE", api_path("watchings", watching_id), Watching)


async def mark_watching_as_read(client: BacklogClient, watching_id: int) -> None:
    """POST watchings/{id}/markAsRead; the server answers 204 with no body."""
    await client.request("POST", api_path("watchings", watching_id, "markAsRead"))
