from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .core.identifiers import IDOrKey
from .models import IssueCustomField, Item, RoleType


class BacklogInput(BaseModel):
    """
    Base for JSON request bodies.
    ``None`` means "leave unset" and is dropped from the payload; present
    zero values (0, False, "") are sent as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


DateLike = Union[date, str]


def _custom_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Item):
        return str(value.id)
    if isinstance(value, dict) and "id" in value:
        return str(value["id"])
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def custom_field_params(
    custom_fields: Optional[Sequence[IssueCustomField]],
) -> List[Tuple[str, str]]:
    """
    Render issue custom fields as ``customField_{id}`` query pairs.
    - A list of Items sends one pair per item id; an empty list clears the field
    - Anything else is sent as its string form
    """
    pairs: List[Tuple[str, str]] = []
    for cf in custom_fields or ():
        if cf.id is None:
            continue
        name = f"customField_{cf.id}"
        value = cf.value
        if isinstance(value, (list, tuple)):
            if not value:
                pairs.append((name, ""))
            for item in value:
                pairs.append((name, _custom_value(item)))
        else:
            pairs.append((name, "" if value is None else _custom_value(value)))
    return pairs


# --- Categories ---


class CreateCategoryInput(BacklogInput):
    name: str


class UpdateCategoryInput(BacklogInput):
    name: Optional[str] = None


# --- Issue types ---


class CreateIssueTypeInput(BacklogInput):
    name: str
    color: str
    template_summary: Optional[str] = None
    template_description: Optional[str] = None


class UpdateIssueTypeInput(BacklogInput):
    name: Optional[str] = None
    color: Optional[str] = None
    template_summary: Optional[str] = None
    template_description: Optional[str] = None


class DeleteIssueTypeInput(BacklogInput):
    substitute_issue_type_id: int


# --- Issues ---


class CreateIssueInput(BacklogInput):
    """
    Body for POST issues.
    ``custom_fields`` never reaches the JSON body; it is sent as
    ``customField_{id}`` query parameters.
    """

    project_id: int
    summary: str
    issue_type_id: int
    priority_id: int
    parent_issue_id: Optional[int] = None
    description: Optional[str] = None
    start_date: Optional[DateLike] = None
    due_date: Optional[DateLike] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    category_ids: Optional[List[int]] = Field(default=None, alias="categoryId")
    version_ids: Optional[List[int]] = Field(default=None, alias="versionId")
    milestone_ids: Optional[List[int]] = Field(default=None, alias="milestoneId")
    assignee_id: Optional[int] = None
    notified_user_ids: Optional[List[int]] = Field(
        default=None, alias="notifiedUserId"
    )
    attachment_ids: Optional[List[int]] = Field(default=None, alias="attachmentId")
    custom_fields: List[IssueCustomField] = Field(default_factory=list, exclude=True)


class UpdateIssueInput(BacklogInput):
    """
    Body for PATCH issues/{idOrKey}.
    resolution_id, estimated_hours, actual_hours and assignee_id accept ""
    to clear the value on the server.
    """

    summary: Optional[str] = None
    parent_issue_id: Optional[int] = None
    description: Optional[str] = None
    status_id: Optional[int] = None
    resolution_id: Optional[Union[int, str]] = None
    start_date: Optional[DateLike] = None
    due_date: Optional[DateLike] = None
    estimated_hours: Optional[Union[float, str]] = None
    actual_hours: Optional[Union[float, str]] = None
    issue_type_id: Optional[int] = None
    category_ids: Optional[List[int]] = Field(default=None, alias="categoryId")
    version_ids: Optional[List[int]] = Field(default=None, alias="versionId")
    milestone_ids: Optional[List[int]] = Field(default=None, alias="milestoneId")
    priority_id: Optional[int] = None
    assignee_id: Optional[Union[int, str]] = None
    notified_user_ids: Optional[List[int]] = Field(
        default=None, alias="notifiedUserId"
    )
    attachment_ids: Optional[List[int]] = Field(default=None, alias="attachmentId")
    comment: Optional[str] = None
    custom_fields: List[IssueCustomField] = Field(default_factory=list, exclude=True)


class CreateIssueCommentInput(BacklogInput):
    content: str
    notified_user_ids: Optional[List[int]] = Field(
        default=None, alias="notifiedUserId"
    )
    attachment_ids: Optional[List[int]] = Field(default=None, alias="attachmentId")


class UpdateIssueCommentInput(BacklogInput):
    content: Optional[str] = None


class CreateIssueCommentsNotificationInput(BacklogInput):
    notified_user_ids: Optional[List[int]] = Field(
        default=None, alias="notifiedUserId"
    )


class CreateIssueSharedFilesInput(BacklogInput):
    file_ids: Optional[List[int]] = Field(default=None, alias="fileId")


# --- Projects ---


class CreateProjectInput(BacklogInput):
    name: str
    key: str
    chart_enabled: bool = False
    subtasking_enabled: bool = False
    project_leader_can_edit_project_leader: Optional[bool] = None
    text_formatting_rule: str = "markdown"


class UpdateProjectInput(BacklogInput):
    name: Optional[str] = None
    key: Optional[str] = None
    chart_enabled: Optional[bool] = None
    subtasking_enabled: Optional[bool] = None
    project_leader_can_edit_project_leader: Optional[bool] = None
    text_formatting_rule: Optional[str] = None
    archived: Optional[bool] = None


class AddProjectUserInput(BacklogInput):
    user_id: int


class DeleteProjectUserInput(BacklogInput):
    user_id: int


class AddProjectAdministratorInput(BacklogInput):
    user_id: int


class DeleteProjectAdministratorInput(BacklogInput):
    user_id: int


class CreateStatusInput(BacklogInput):
    name: str
    color: str


class UpdateStatusInput(BacklogInput):
    name: Optional[str] = None
    color: Optional[str] = None


class DeleteStatusInput(BacklogInput):
    substitute_status_id: int


class SortStatusesInput(BacklogInput):
    status_ids: List[int] = Field(alias="statusId")


# --- Pull requests ---


class CreatePullRequestInput(BacklogInput):
    summary: str
    description: str
    base: str
    branch: str
    issue_id: Optional[int] = None
    assignee_id: Optional[int] = None
    notified_user_ids: Optional[List[int]] = Field(
        default=None, alias="notifiedUserId"
    )
    attachment_ids: Optional[List[int]] = Field(default=None, alias="attachmentId")


class UpdatePullRequestInput(BacklogInput):
    summary: Optional[str] = None
    description: Optional[str] = None
    issue_id: Optional[int] = None
    assignee_id: Optional[int] = None
    notified_user_ids: Optional[List[int]] = Field(
        default=None, alias="notifiedUserId"
    )
    comment: Optional[str] = None


# --- Space ---


class UpdateSpaceNotificationInput(BacklogInput):
    content: str


# --- Teams ---


class CreateTeamInput(BacklogInput):
    name: str
    members: Optional[List[int]] = None


class UpdateTeamInput(BacklogInput):
    name: Optional[str] = None
    members: Optional[List[int]] = None


class AddProjectTeamInput(BacklogInput):
    team_id: int


class DeleteProjectTeamInput(BacklogInput):
    team_id: int


# --- Users ---


class CreateUserInput(BacklogInput):
    user_id: str
    password: str
    name: str
    mail_address: str
    role_type: RoleType


class UpdateUserInput(BacklogInput):
    password: Optional[str] = None
    name: Optional[str] = None
    mail_address: Optional[str] = None
    role_type: Optional[RoleType] = None


# --- Versions ---


class CreateVersionInput(BacklogInput):
    name: str
    description: Optional[str] = None
    start_date: Optional[DateLike] = None
    release_due_date: Optional[DateLike] = None


class UpdateVersionInput(BacklogInput):
    name: str
    description: Optional[str] = None
    start_date: Optional[DateLike] = None
    release_due_date: Optional[DateLike] = None
    archived: Optional[bool] = None


# --- Watchings ---


class CreateWatchingInput(BacklogInput):
    issue_id_or_key: IDOrKey
    note: Optional[str] = None


class UpdateWatchingInput(BacklogInput):
    note: Optional[str] = None


# --- Webhooks ---


class CreateWebhookInput(BacklogInput):
    name: str
    hook_url: str
    description: Optional[str] = None
    all_event: Optional[bool] = None
    activity_type_ids: Optional[List[int]] = None


class UpdateWebhookInput(BacklogInput):
    name: Optional[str] = None
    description: Optional[str] = None
    hook_url: Optional[str] = None
    all_event: Optional[bool] = None
    activity_type_ids: Optional[List[int]] = None


# --- Wikis ---


class CreateWikiInput(BacklogInput):
    project_id: int
    name: str
    content: str
    mail_notify: Optional[bool] = None


class UpdateWikiInput(BacklogInput):
    name: Optional[str] = None
    content: Optional[str] = None
    mail_notify: Optional[bool] = None


class AddAttachmentToWikiInput(BacklogInput):
    attachment_ids: List[int] = Field(alias="attachmentId")
