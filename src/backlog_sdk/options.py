"""
Query option models.

Each field carries a ``Query`` tag naming its wire parameter. ``None`` is
never sent; sequence parameters repeat as ``name[]=v1&name[]=v2``; date
ranges are ``yyyy-MM-dd`` strings (or ``datetime.date``).
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.identifiers import IDOrKey, render_identifier
from .core.query import Query
from .models import Order, Sort

DateLike = Union[date, str]


class BacklogOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PageOptions(BacklogOptions):
    """order/offset/count paging shared by several list endpoints."""

    order: Annotated[Order, Query("order")] = Order.NONE
    offset: Annotated[Optional[int], Query("offset")] = None
    count: Annotated[Optional[int], Query("count")] = None


class CursorOptions(BacklogOptions):
    """minId/maxId/count/order paging."""

    min_id: Annotated[Optional[int], Query("minId")] = None
    max_id: Annotated[Optional[int], Query("maxId")] = None
    count: Annotated[Optional[int], Query("count")] = None
    order: Annotated[Order, Query("order")] = Order.NONE


# --- Activities ---


class GetActivitiesOptions(BacklogOptions):
    activity_type_ids: Annotated[List[int], Query("activityTypeId[]")] = Field(
        default_factory=list
    )
    min_id: Annotated[Optional[int], Query("minId")] = None
    max_id: Annotated[Optional[int], Query("maxId")] = None
    count: Annotated[Optional[int], Query("count")] = None
    order: Annotated[Order, Query("order")] = Order.NONE


class GetUserActivitiesOptions(GetActivitiesOptions):
    pass


class GetProjectActivitiesOptions(GetActivitiesOptions):
    pass


# --- Issues ---


class GetIssuesOptions(BacklogOptions):
    project_ids: Annotated[List[int], Query("projectId[]")] = Field(default_factory=list)
    issue_type_ids: Annotated[List[int], Query("issueTypeId[]")] = Field(
        default_factory=list
    )
    category_ids: Annotated[List[int], Query("categoryId[]")] = Field(
        default_factory=list
    )
    version_ids: Annotated[List[int], Query("versionId[]")] = Field(default_factory=list)
    milestone_ids: Annotated[List[int], Query("milestoneId[]")] = Field(
        default_factory=list
    )
    status_ids: Annotated[List[int], Query("statusId[]")] = Field(default_factory=list)
    priority_ids: Annotated[List[int], Query("priorityId[]")] = Field(
        default_factory=list
    )
    assignee_ids: Annotated[List[int], Query("assigneeId[]")] = Field(
        default_factory=list
    )
    created_user_ids: Annotated[List[int], Query("createdUserId[]")] = Field(
        default_factory=list
    )
    resolution_ids: Annotated[List[int], Query("resolutionId[]")] = Field(
        default_factory=list
    )
    parent_child: Annotated[Optional[int], Query("parentChild")] = None
    attachment: Annotated[Optional[bool], Query("attachment")] = None
    shared_file: Annotated[Optional[bool], Query("sharedFile")] = None
    sort: Annotated[Sort, Query("sort")] = Sort.NONE
    order: Annotated[Order, Query("order")] = Order.NONE
    offset: Annotated[Optional[int], Query("offset")] = None
    count: Annotated[Optional[int], Query("count")] = None
    created_since: Annotated[Optional[DateLike], Query("createdSince")] = None
    created_until: Annotated[Optional[DateLike], Query("createdUntil")] = None
    updated_since: Annotated[Optional[DateLike], Query("updatedSince")] = None
    updated_until: Annotated[Optional[DateLike], Query("updatedUntil")] = None
    start_date_since: Annotated[Optional[DateLike], Query("startDateSince")] = None
    start_date_until: Annotated[Optional[DateLike], Query("startDateUntil")] = None
    due_date_since: Annotated[Optional[DateLike], Query("dueDateSince")] = None
    due_date_until: Annotated[Optional[DateLike], Query("dueDateUntil")] = None
    ids: Annotated[List[int], Query("id[]")] = Field(default_factory=list)
    parent_issue_ids: Annotated[List[int], Query("parentIssueId[]")] = Field(
        default_factory=list
    )
    keyword: Annotated[Optional[str], Query("keyword")] = None


class GetIssuesCountOptions(GetIssuesOptions):
    pass


class GetRecentlyViewedIssuesOptions(PageOptions):
    pass


class GetIssueCommentsOptions(CursorOptions):
    pass


# --- Projects ---


class GetRecentlyViewedProjectsOptions(PageOptions):
    pass


class GetProjectsOptions(BacklogOptions):
    archived: Annotated[Optional[bool], Query("archived", omitempty=False)] = None
    all: Annotated[Optional[bool], Query("all", omitempty=False)] = None


class GetProjectUsersOptions(BacklogOptions):
    exclude_group_members: Annotated[Optional[bool], Query("excludeGroupMembers")] = (
        None
    )


# --- Pull requests ---


class GetPullRequestsOptions(BacklogOptions):
    status_ids: Annotated[List[int], Query("statusId[]")] = Field(default_factory=list)
    assignee_ids: Annotated[List[int], Query("assigneeId[]")] = Field(
        default_factory=list
    )
    issue_ids: Annotated[List[int], Query("issueId[]")] = Field(default_factory=list)
    created_user_ids: Annotated[List[int], Query("createdUserId[]")] = Field(
        default_factory=list
    )
    offset: Annotated[Optional[int], Query("offset")] = None
    count: Annotated[Optional[int], Query("count")] = None


class GetPullRequestCommentsOptions(CursorOptions):
    pass


# --- Teams ---


class GetTeamsOptions(PageOptions):
    pass


# --- Users ---


class GetUserStarsOptions(CursorOptions):
    pass


class GetUserStarCountOptions(BacklogOptions):
    since: Annotated[Optional[DateLike], Query("since")] = None
    until: Annotated[Optional[DateLike], Query("until")] = None


# --- Watchings ---


class GetUserWatchingsOptions(BacklogOptions):
    order: Annotated[Order, Query("order")] = Order.NONE
    sort: Annotated[Optional[str], Query("sort")] = None
    count: Annotated[Optional[int], Query("count")] = None
    offset: Annotated[Optional[int], Query("offset")] = None
    resource_already_read: Annotated[Optional[bool], Query("resourceAlreadyRead")] = (
        None
    )
    issue_ids: Annotated[List[int], Query("issueId[]")] = Field(default_factory=list)


class GetUserWatchingsCountOptions(BacklogOptions):
    resource_already_read: Annotated[Optional[bool], Query("resourceAlreadyRead")] = (
        None
    )
    already_read: Annotated[Optional[bool], Query("alreadyRead")] = None


# --- Wikis ---


class _WikiProjectOptions(BacklogOptions):
    @field_validator("project_id_or_key", mode="before", check_fields=False)
    @classmethod
    def _check_project(cls, value):
        if value is not None:
            render_identifier(value)
        return value


class GetWikisOptions(_WikiProjectOptions):
    project_id_or_key: Annotated[IDOrKey, Query("projectIdOrKey", omitempty=False)]
    keyword: Annotated[Optional[str], Query("keyword")] = None


class GetWikiCountOptions(_WikiProjectOptions):
    project_id_or_key: Annotated[Optional[IDOrKey], Query("projectIdOrKey")] = None


class GetWikiTagsOptions(_WikiProjectOptions):
    project_id_or_key: Annotated[Optional[IDOrKey], Query("projectIdOrKey")] = None
