from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import CreateCategoryInput, UpdateCategoryInput
from backlog_sdk.models import Category


async def get_categories(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[Category]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "categories"), List[Category]
    )


async def create_category(
    client: BacklogClient, project_id_or_key: IDOrKey, body: CreateCategoryInput
) -> Category:
    return await client.request(
        "POST",
        api_path("projects", project_id_or_key, "categories"),
        Category,
        body=body,
    )


async def update_category(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    category_id: int,
    body: UpdateCategoryInput,
) -> Category:
    return await client.request(
        "PATCH",
        api_path("projects", project_id_or_key, "categories", category_id),
        Category,
        body=body,
    )


async def delete_category(
    client: BacklogClient, project_id_or_key: IDOrKey, category_id: int
) -> Category:
    return await client.request(
        "DELETE",
        api_path("projects", project_id_or_key, "categories", category_id),
        Category,
    )
