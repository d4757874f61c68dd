"""Pull requests, reviews, review comments and review requests."""

from datetime import datetime
from enum import Enum

from .base import GitHubModel, RequestModel
from .common import ItemState, ItemStateFilter, Repository, SortDirection, Team, User
from .issues import Label, Milestone


class GitReference(GitHubModel):
    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    user: User | None = None
    repo: Repository | None = None


class PullRequest(GitHubModel):
    id: int
    number: int
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    state: ItemState | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] = []
    milestone: Milestone | None = None
    assignees: list[User] = []
    requested_reviewers: list[User] = []
    requested_teams: list[Team] = []
    head: GitReference | None = None
    base: GitReference | None = None
    draft: bool | None = None
    locked: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    mergeable_state: str | None = None
    merged_by: User | None = None
    merge_commit_sha: str | None = None
    comments: int | None = None
    review_comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None


class PullRequestSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    POPULARITY = "popularity"
    LONG_RUNNING = "long-running"


class PullRequestRequest(RequestModel):
    """Filters for GET /repos/{owner}/{repo}/pulls.

    ``head`` takes ``user:ref-name``.
    """

    state: ItemStateFilter | None = None
    head: str | None = None
    base: str | None = None
    sort: PullRequestSort | None = None
    direction: SortDirection | None = None


class NewPullRequest(RequestModel):
    title: str
    head: str
    base: str
    body: str | None = None
    draft: bool | None = None
    maintainer_can_modify: bool | None = None


class PullRequestUpdate(RequestModel):
    title: str | None = None
    body: str | None = None
    state: ItemState | None = None
    base: str | None = None
    maintainer_can_modify: bool | None = None


class PullRequestMergeMethod(str, Enum):
    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"


class MergePullRequest(RequestModel):
    commit_title: str | None = None
    commit_message: str | None = None
    sha: str | None = None
    merge_method: PullRequestMergeMethod | None = None


class PullRequestMerge(GitHubModel):
    sha: str | None = None
    merged: bool = False
    message: str | None = None


class CommitAuthor(GitHubModel):
    name: str | None = None
    email: str | None = None
    date: datetime | None = None


class CommitDetail(GitHubModel):
    message: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None


class PullRequestCommit(GitHubModel):
    sha: str
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    commit: CommitDetail | None = None
    author: User | None = None
    committer: User | None = None


class PullRequestFile(GitHubModel):
    sha: str | None = None
    filename: str
    status: str | None = None
    additions: int | None = None
    deletions: int | None = None
    changes: int | None = None
    patch: str | None = None
    previous_filename: str | None = None
    blob_url: str | None = None
    raw_url: str | None = None


# =============================================================================
# Reviews
# =============================================================================


class PullRequestReviewEvent(str, Enum):
    APPROVE = "APPROVE"
    REQUEST_CHANGES = "REQUEST_CHANGES"
    COMMENT = "COMMENT"


class PullRequestReview(GitHubModel):
    id: int
    node_id: str | None = None
    user: User | None = None
    body: str | None = None
    state: str | None = None
    commit_id: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None
    author_association: str | None = None
    submitted_at: datetime | None = None


class DraftPullRequestReviewComment(RequestModel):
    path: str
    body: str
    position: int | None = None
    line: int | None = None
    side: str | None = None
    start_line: int | None = None
    start_side: str | None = None


class PullRequestReviewCreate(RequestModel):
    commit_id: str | None = None
    body: str | None = None
    event: PullRequestReviewEvent | None = None
    comments: list[DraftPullRequestReviewComment] | None = None


class PullRequestReviewSubmit(RequestModel):
    event: PullRequestReviewEvent
    body: str | None = None


class PullRequestReviewDismiss(RequestModel):
    message: str


# =============================================================================
# Review comments
# =============================================================================


class PullRequestReviewComment(GitHubModel):
    id: int
    node_id: str | None = None
    pull_request_review_id: int | None = None
    in_reply_to_id: int | None = None
    diff_hunk: str | None = None
    path: str | None = None
    position: int | None = None
    original_position: int | None = None
    line: int | None = None
    side: str | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    user: User | None = None
    body: str | None = None
    url: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None
    author_association: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PullRequestReviewCommentSort(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


class PullRequestReviewCommentRequest(RequestModel):
    sort: PullRequestReviewCommentSort | None = None
    direction: SortDirection | None = None
    since: datetime | None = None


class PullRequestReviewCommentCreate(RequestModel):
    body: str
    commit_id: str
    path: str
    position: int | None = None
    line: int | None = None
    side: str | None = None
    start_line: int | None = None
    start_side: str | None = None


class PullRequestReviewCommentReplyCreate(RequestModel):
    body: str


class PullRequestReviewCommentEdit(RequestModel):
    body: str


# =============================================================================
# Review requests
# =============================================================================


class RequestedReviews(GitHubModel):
    users: list[User] = []
    teams: list[Team] = []


class PullRequestReviewRequest(RequestModel):
    reviewers: list[str] | None = None
    team_reviewers: list[str] | None = None
