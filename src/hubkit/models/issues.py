"""Issues, issue comments, labels and milestones."""

from datetime import datetime
from enum import Enum

from .base import GitHubModel, RequestModel
from .common import ItemState, ItemStateFilter, Repository, SortDirection, User


class Label(GitHubModel):
    id: int
    name: str
    node_id: str | None = None
    url: str | None = None
    color: str | None = None
    default: bool | None = None
    description: str | None = None


class Milestone(GitHubModel):
    id: int
    number: int
    title: str
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    state: ItemState | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    due_on: datetime | None = None


class PullRequestLink(GitHubModel):
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None


class Issue(GitHubModel):
    id: int
    number: int
    title: str
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    state: ItemState | None = None
    state_reason: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] = []
    assignee: User | None = None
    assignees: list[User] = []
    milestone: Milestone | None = None
    locked: bool | None = None
    active_lock_reason: str | None = None
    comments: int | None = None
    pull_request: PullRequestLink | None = None
    repository: Repository | None = None
    closed_by: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class IssueFilter(str, Enum):
    ASSIGNED = "assigned"
    CREATED = "created"
    MENTIONED = "mentioned"
    SUBSCRIBED = "subscribed"
    ALL = "all"


class IssueSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"


class IssueRequest(RequestModel):
    """Filters for the user and organization issue listings."""

    filter: IssueFilter | None = None
    state: ItemStateFilter | None = None
    labels: list[str] | None = None
    sort: IssueSort | None = None
    direction: SortDirection | None = None
    since: datetime | None = None


class RepositoryIssueRequest(IssueRequest):
    """Filters for GET /repos/{owner}/{repo}/issues.

    ``milestone`` accepts a milestone number, ``*`` or ``none``; ``assignee``
    accepts a login, ``*`` or ``none``.
    """

    milestone: str | None = None
    assignee: str | None = None
    creator: str | None = None
    mentioned: str | None = None


class NewIssue(RequestModel):
    title: str
    body: str | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


class IssueStateReason(str, Enum):
    COMPLETED = "completed"
    NOT_PLANNED = "not_planned"
    REOPENED = "reopened"


class IssueUpdate(RequestModel):
    title: str | None = None
    body: str | None = None
    state: ItemState | None = None
    state_reason: IssueStateReason | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


class LockReason(str, Enum):
    OFF_TOPIC = "off-topic"
    TOO_HEATED = "too heated"
    RESOLVED = "resolved"
    SPAM = "spam"


class IssueLock(RequestModel):
    lock_reason: LockReason | None = None


class AssigneesUpdate(RequestModel):
    assignees: list[str]


# =============================================================================
# Comments
# =============================================================================


class IssueComment(GitHubModel):
    id: int
    body: str | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None
    user: User | None = None
    author_association: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IssueCommentSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


class IssueCommentRequest(RequestModel):
    sort: IssueCommentSort | None = None
    direction: SortDirection | None = None
    since: datetime | None = None


class IssueCommentBody(RequestModel):
    body: str


# =============================================================================
# Labels
# =============================================================================


class NewLabel(RequestModel):
    name: str
    color: str
    description: str | None = None


class LabelUpdate(RequestModel):
    new_name: str | None = None
    color: str | None = None
    description: str | None = None


class LabelsUpdate(RequestModel):
    labels: list[str]


# =============================================================================
# Milestones
# =============================================================================


class MilestoneSort(str, Enum):
    DUE_ON = "due_on"
    COMPLETENESS = "completeness"


class MilestoneRequest(RequestModel):
    state: ItemStateFilter | None = None
    sort: MilestoneSort | None = None
    direction: SortDirection | None = None


class NewMilestone(RequestModel):
    title: str
    state: ItemState | None = None
    description: str | None = None
    due_on: datetime | None = None


class MilestoneUpdate(RequestModel):
    title: str | None = None
    state: ItemState | None = None
    description: str | None = None
    due_on: datetime | None = None
