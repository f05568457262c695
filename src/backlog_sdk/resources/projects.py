from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient, ByteSink
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import (
    AddProjectAdministratorInput,
    AddProjectUserInput,
    CreateProjectInput,
    CreateStatusInput,
    DeleteProjectAdministratorInput,
    DeleteProjectUserInput,
    DeleteStatusInput,
    SortStatusesInput,
    UpdateProjectInput,
    UpdateStatusInput,
)
from backlog_sdk.models import (
    Project,
    ProjectDiskUsage,
    RecentlyViewedProject,
    Status,
    User,
)
from backlog_sdk.options import (
    GetProjectsOptions,
    GetProjectUsersOptions,
    GetRecentlyViewedProjectsOptions,
)


async def get_my_recently_viewed_projects(
    client: BacklogClient,
    *,
    options: Optional[GetRecentlyViewedProjectsOptions] = None,
) -> List[RecentlyViewedProject]:
    return await client.request(
        "GET",
        api_path("users", "myself", "recentlyViewedProjects"),
        List[RecentlyViewedProject],
        options=options,
    )


async def get_projects(
    client: BacklogClient, *, options: Optional[GetProjectsOptions] = None
) -> List[Project]:
    return await client.request(
        "GET", api_path("projects"), List[Project], options=options
    )


async def get_project(client: BacklogClient, project_id_or_key: IDOrKey) -> Project:
    return await client.request("GET", api_path("projects", project_id_or_key), Project)


async def create_project(client: BacklogClient, body: CreateProjectInput) -> Project:
    return await client.request("POST", api_path("projects"), Project, body=body)


async def update_project(
    client: BacklogClient, project_id_or_key: IDOrKey, body: UpdateProjectInput
) -> Project:
    return await client.request(
        "PATCH", api_path("projects", project_id_or_key), Project, body=body
    )


async def delete_project(client: BacklogClient, project_id_or_key: IDOrKey) -> Project:
    return await client.request(
        "DELETE", api_path("projects", project_id_or_key), Project
    )


async def get_project_icon(
    client: BacklogClient, project_id_or_key: IDOrKey, sink: ByteSink
) -> None:
    await client.request(
        "GET", api_path("projects", project_id_or_key, "image"), sink=sink
    )


async def get_project_disk_usage(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> ProjectDiskUsage:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "diskUsage"), ProjectDiskUsage
    )


# --- Members ---


async def add_project_user(
    client: BacklogClient, project_id_or_key: IDOrKey, body: AddProjectUserInput
) -> User:
    return await client.request(
        "POST", api_path("projects", project_id_or_key, "users"), User, body=body
    )


async def get_project_users(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    *,
    options: Optional[GetProjectUsersOptions] = None,
) -> List[User]:
    return await client.request(
        "GET",
        api_path("projects", project_id_or_key, "users"),
        List[User],
        options=options,
    )


async def delete_project_user(
    client: BacklogClient, project_id_or_key: IDOrKey, body: DeleteProjectUserInput
) -> User:
    return await client.request(
        "DELETE", api_path("projects", project_id_or_key, "users"), User, body=body
    )


async def add_project_administrator(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    body: AddProjectAdministratorInput,
) -> User:
    return await client.request(
        "POST",
        api_path("projects", project_id_or_key, "administrators"),
        User,
        body=body,
    )


async def get_project_administrators(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[User]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "administrators"), List[User]
    )


async def delete_project_administrator(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    body: DeleteProjectAdministratorInput,
) -> User:
    return await client.request(
        "DELETE",
        api_path("projects", project_id_or_key, "administrators"),
        User,
        body=body,
    )


# --- Statuses ---


async def get_statuses(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[Status]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "statuses"), List[Status]
    )


async def create_status(
    client: BacklogClient, project_id_or_key: IDOrKey, body: CreateStatusInput
) -> Status:
    return await client.request(
        "POST", api_path("projects", project_id_or_key, "statuses"), Status, body=body
    )


async def update_status(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    status_id: int,
    body: UpdateStatusInput,
) -> Status:
    return await client.request(
        "PATCH",
        api_path("projects", project_id_or_key, "statuses", status_id),
        Status,
        body=body,
    )


async def delete_status(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    status_id: int,
    body: DeleteStatusInput,
) -> Status:
    """Issues in the deleted status move to ``body.substitute_status_id``."""
    return await client.request(
        "DELETE",
        api_path("projects", project_id_or_key, "statuses", status_id),
        Status,
        body=body,
    )


async def sort_statuses(
    client: BacklogClient, project_id_or_key: IDOrKey, body: SortStatusesInput
) -> List[Status]:
    return await client.request(
        "PATCH",
        api_path("projects", project_id_or_key, "statuses", "updateDisplayOrder"),
        List[Status],
        body=body,
    )
