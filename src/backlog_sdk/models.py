from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .core.timestamps import Timestamp


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"
    NONE = ""


class Sort(str, Enum):
    """Issue list sort keys. Unknown values collapse to NONE, which is never sent."""

    ISSUE_TYPE = "issueType"
    CATEGORY = "category"
    VERSION = "version"
    MILESTONE = "milestone"
    SUMMARY = "summary"
    STATUS = "status"
    PRIORITY = "priority"
    ATTACHMENT = "attachment"
    SHARED_FILE = "sharedFile"
    CREATED = "created"
    CREATED_USER = "createdUser"
    UPDATED = "updated"
    UPDATED_USER = "updatedUser"
    ASSIGNEE = "assignee"
    START_DATE = "startDate"
    DUE_DATE = "dueDate"
    ESTIMATED_HOURS = "estimatedHours"
    ACTUAL_HOURS = "actualHours"
    CHILD_ISSUE = "childIssue"
    NONE = ""

    @classmethod
    def _missing_(cls, value: object) -> "Sort":
        return cls.NONE


class RoleType(IntEnum):
    ADMINISTRATOR = 1
    GENERAL_USER = 2
    REPORTER = 3
    VIEWER = 4
    GUEST_REPORTER = 5
    GUEST_VIEWER = 6


class BacklogModel(BaseModel):
    """
    Base for response entities.
    Backlog omits fields freely, so everything is optional and unknown keys
    are ignored. Wire names are camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class CountResponse(BacklogModel):
    count: int = 0


# --- Users & projects ---


class User(BacklogModel):
    id: Optional[int] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    role_type: Optional[RoleType] = None
    lang: Optional[str] = None
    mail_address: Optional[str] = None


class Project(BacklogModel):
    id: Optional[int] = None
    project_key: Optional[str] = None
    name: Optional[str] = None
    chart_enabled: Optional[bool] = None
    subtasking_enabled: Optional[bool] = None
    project_leader_can_edit_project_leader: Optional[bool] = None
    text_formatting_rule: Optional[str] = None
    archived: Optional[bool] = None
    display_order: Optional[int] = None


class Status(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    color: Optional[str] = None
    display_order: Optional[int] = None


class Category(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None
    display_order: Optional[int] = None


class Version(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None  # yyyy-MM-dd
    release_due_date: Optional[str] = None  # yyyy-MM-dd
    archived: Optional[bool] = None
    display_order: Optional[int] = None


class Milestone(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    release_due_date: Optional[str] = None
    archived: Optional[bool] = None


class IssueType(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    color: Optional[str] = None
    display_order: Optional[int] = None
    template_summary: Optional[str] = None
    template_description: Optional[str] = None


class Priority(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None


class Resolution(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None


class RecentlyViewedProject(BacklogModel):
    project: Optional[Project] = None
    updated: Timestamp = None


class ProjectDiskUsage(BacklogModel):
    project_id: Optional[int] = None
    issue: Optional[int] = None
    wiki: Optional[int] = None
    file: Optional[int] = None
    subversion: Optional[int] = None
    git: Optional[int] = None
    git_lfs: Optional[int] = Field(default=None, alias="gitLFS")


# --- Files, stars, notifications ---


class Attachment(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None
    size: Optional[int] = None
    created_user: Optional[User] = None
    created: Timestamp = None


class SharedFile(BacklogModel):
    id: Optional[int] = None
    type: Optional[str] = None
    dir: Optional[str] = None
    name: Optional[str] = None
    size: Optional[int] = None
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None


class Star(BacklogModel):
    id: Optional[int] = None
    comment: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    presenter: Optional[User] = None
    created: Timestamp = None


class Tag(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None


class Notification(BacklogModel):
    id: Optional[int] = None
    already_read: Optional[bool] = None
    reason: Optional[int] = None
    user: Optional[User] = None
    resource_already_read: Optional[bool] = None


class FileUploadResponse(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None
    size: Optional[int] = None


# --- Custom fields ---


class Item(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None
    display_order: Optional[int] = None


class CustomField(BacklogModel):
    id: Optional[int] = None
    type_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    required: Optional[bool] = None
    applicable_issue_types: List[int] = Field(default_factory=list)
    allow_add_item: Optional[bool] = None
    items: List[Item] = Field(default_factory=list)


class IssueCustomField(BacklogModel):
    """
    Custom field value on an issue.
    ``value`` is a scalar, an Item, or a list of Items depending on the field type.
    """

    id: Optional[int] = None
    field_type_id: Optional[int] = None
    name: Optional[str] = None
    value: Any = None


# --- Issues ---


class Issue(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    issue_key: Optional[str] = None
    key_id: Optional[int] = None
    issue_type: Optional[IssueType] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    resolution: Optional[Resolution] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    assignee: Optional[User] = None
    category: List[Category] = Field(default_factory=list)
    versions: List[Version] = Field(default_factory=list)
    milestone: List[Milestone] = Field(default_factory=list)
    start_date: Optional[str] = None
    due_date: Optional[str] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    parent_issue_id: Optional[int] = None
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None
    custom_fields: List[IssueCustomField] = Field(default_factory=list)
    attachments: List[Attachment] = Field(default_factory=list)
    shared_files: List[SharedFile] = Field(default_factory=list)
    stars: List[Star] = Field(default_factory=list)


class RecentlyViewedIssue(BacklogModel):
    issue: Optional[Issue] = None
    updated: Timestamp = None


class AttachmentInfo(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None


class AttributeInfo(BacklogModel):
    id: Optional[int] = None
    type_id: Optional[int] = None


class NotificationInfo(BacklogModel):
    type: Optional[str] = None


class ChangeLog(BacklogModel):
    attachment_info: Optional[AttachmentInfo] = None
    attribute_info: Optional[AttributeInfo] = None
    field: Optional[str] = None
    new_value: Optional[str] = None
    notification_info: Optional[NotificationInfo] = None
    original_value: Optional[str] = None


class IssueComment(BacklogModel):
    id: Optional[int] = None
    content: Optional[str] = None
    change_log: List[ChangeLog] = Field(default_factory=list)
    created_user: Optional[User] = None
    created: Timestamp = None
    updated: Timestamp = None
    stars: List[Star] = Field(default_factory=list)
    notifications: List[Notification] = Field(default_factory=list)


# --- Activities ---


class Comment(BacklogModel):
    id: Optional[int] = None
    content: Optional[str] = None


class Change(BacklogModel):
    # activity payloads use snake_case keys here
    field: Optional[str] = None
    new_value: Optional[str] = Field(default=None, alias="new_value")
    old_value: Optional[str] = Field(default=None, alias="old_value")
    type: Optional[str] = None


class Content(BacklogModel):
    id: Optional[int] = None
    key_id: Optional[int] = Field(default=None, alias="key_id")
    summary: Optional[str] = None
    description: Optional[str] = None
    comment: Optional[Comment] = None
    changes: List[Change] = Field(default_factory=list)


class Activity(BacklogModel):
    id: Optional[int] = None
    project: Optional[Project] = None
    type: Optional[int] = None
    content: Optional[Content] = None
    notifications: List[Notification] = Field(default_factory=list)
    created_user: Optional[User] = None
    created: Timestamp = None


# --- Wikis ---


class Wiki(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    content: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)
    attachments: List[Attachment] = Field(default_factory=list)
    shared_files: List[SharedFile] = Field(default_factory=list)
    stars: List[Star] = Field(default_factory=list)
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None


# --- Space ---


class Space(BacklogModel):
    space_key: Optional[str] = None
    name: Optional[str] = None
    owner_id: Optional[int] = None
    lang: Optional[str] = None
    timezone: Optional[str] = None
    report_send_time: Optional[str] = None
    text_formatting_rule: Optional[str] = None
    created: Timestamp = None
    updated: Timestamp = None


class SpaceNotification(BacklogModel):
    content: Optional[str] = None
    updated: Timestamp = None


class SpaceDiskUsageDetail(BacklogModel):
    project_id: Optional[int] = None
    issue: Optional[int] = None
    wiki: Optional[int] = None
    file: Optional[int] = None
    subversion: Optional[int] = None
    git: Optional[int] = None
    git_lfs: Optional[int] = Field(default=None, alias="gitLFS")


class SpaceDiskUsage(BacklogModel):
    capacity: Optional[int] = None
    issue: Optional[int] = None
    wiki: Optional[int] = None
    file: Optional[int] = None
    subversion: Optional[int] = None
    git: Optional[int] = None
    git_lfs: Optional[int] = Field(default=None, alias="gitLFS")
    details: List[SpaceDiskUsageDetail] = Field(default_factory=list)


class Licence(BacklogModel):
    active: Optional[bool] = None
    attachment_limit: Optional[int] = None
    attachment_limit_per_file: Optional[int] = None
    attachment_num_limit: Optional[int] = None
    attribute: Optional[bool] = None
    attribute_limit: Optional[int] = None
    burndown: Optional[bool] = None
    comment_limit: Optional[int] = None
    component_limit: Optional[int] = None
    file_sharing: Optional[bool] = None
    gantt: Optional[bool] = None
    git: Optional[bool] = None
    issue_limit: Optional[int] = None
    licence_type_id: Optional[int] = None
    limit_date: Timestamp = None
    nulab_account: Optional[bool] = None
    parent_child: Optional[bool] = None
    post_issue_by_mail: Optional[bool] = None
    project_group: Optional[bool] = None
    project_limit: Optional[int] = None
    remote_address: Optional[bool] = None
    remote_address_limit: Optional[int] = None
    started_on: Timestamp = None
    storage_limit: Optional[int] = None
    subversion: Optional[bool] = None
    subversion_external: Optional[bool] = None
    user_limit: Optional[int] = None
    version_limit: Optional[int] = None
    wiki_attachment: Optional[bool] = None


# --- Teams, webhooks, watchings ---


class Team(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None
    members: List[User] = Field(default_factory=list)
    display_order: Optional[int] = None
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None


class Webhook(BacklogModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    hook_url: Optional[str] = None
    all_event: Optional[bool] = None
    activity_type_ids: List[int] = Field(default_factory=list)
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None


class Watching(BacklogModel):
    id: Optional[int] = None
    resource_already_read: Optional[bool] = None
    note: Optional[str] = None
    type: Optional[str] = None
    issue: Optional[Issue] = None
    last_content_updated: Timestamp = None
    created: Timestamp = None
    updated: Timestamp = None


# --- Git ---


class GitRepository(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    hook_url: Optional[str] = None
    http_url: Optional[str] = None
    ssh_url: Optional[str] = None
    display_order: Optional[int] = None
    pushed_at: Timestamp = None
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None


class PullRequest(BacklogModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    repository_id: Optional[int] = None
    number: Optional[int] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    base: Optional[str] = None
    branch: Optional[str] = None
    status: Optional[Status] = None
    assignee: Optional[User] = None
    issue: Optional[Issue] = None
    base_commit: Optional[str] = None
    branch_commit: Optional[str] = None
    close_at: Timestamp = None
    merge_at: Timestamp = None
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None


class PullRequestComment(BacklogModel):
    id: Optional[int] = None
    content: Optional[str] = None
    change_log: List[ChangeLog] = Field(default_factory=list)
    created_user: Optional[User] = None
    created: Timestamp = None
    updated_user: Optional[User] = None
    updated: Timestamp = None
    stars: List[Star] = Field(default_factory=list)
    notifications: List[Notification] = Field(default_factory=list)


# --- Rate limit ---


class LimitStatus(BacklogModel):
    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[int] = None

    def reset_as_time(self) -> Optional[datetime]:
        """When the quota resets, or None if the server did not say."""
        if self.reset is None:
            return None
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)


class RateLimit(BacklogModel):
    read: Optional[LimitStatus] = None
    update: Optional[LimitStatus] = None
    search: Optional[LimitStatus] = None
    icon: Optional[LimitStatus] = None


class RateLimitResponse(BacklogModel):
    rate_limit: Optional[RateLimit] = None
