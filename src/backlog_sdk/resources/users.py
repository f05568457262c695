from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient, ByteSink
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.inputs import CreateUserInput, UpdateUserInput
from backlog_sdk.models import CountResponse, Star, User
from backlog_sdk.options import GetUserStarCountOptions, GetUserStarsOptions


async def get_myself(client: BacklogClient) -> User:
    return await client.request("GET", api_path("users", "myself"), User)


async def get_user(client: BacklogClient, user_id: int) -> User:
    return await client.request("GET", api_path("users", user_id), User)


async def get_users(client: BacklogClient) -> List[User]:
    return await client.request("GET", api_path("users"), List[User])


async def create_user(client: BacklogClient, body: CreateUserInput) -> User:
    return await client.request("POST", api_path("users"), User, body=body)


async def update_user(
    client: BacklogClient, user_id: int, body: UpdateUserInput
) -> User:
    return await client.request("PATCH", api_path("users", user_id), User, body=body)


async def delete_user(client: BacklogClient, user_id: int) -> User:
    return await client.request("DELETE", api_path("users", user_id), User)


async def get_user_icon(client: BacklogClient, user_id: int, sink: ByteSink) -> None:
    await client.request("GET", api_path("users", user_id, "icon"), sink=sink)


async def get_user_stars(
    client: BacklogClient,
    user_id: int,
    *,
    options: Optional[GetUserStarsOptions] = None,
) -> List[Star]:
    return await client.request(
        "GET", api_path("users", user_id, "stars"), List[Star], options=options
    )


async def get_user_star_count(
    client: BacklogClient,
    user_id: int,
    *,
    options: Optional[GetUserStarCountOptions] = None,
) -> int:
    resp = await client.request(
        "GET",
        api_path("users", user_id, "stars", "count"),
        CountResponse,
        options=options,
    )
    return resp.count if resp else 0
