"""GitHub Actions resources: runners, runner groups, workflows, runs and jobs."""

from datetime import datetime
from enum import Enum
from typing import Any

from .base import GitHubModel, ListResponse, RequestModel
from .common import Repository, User

# =============================================================================
# Self-hosted runners
# =============================================================================


class RunnerLabel(GitHubModel):
    id: int | None = None
    name: str
    type: str | None = None


class Runner(GitHubModel):
    id: int
    name: str
    os: str | None = None
    status: str | None = None
    busy: bool | None = None
    runner_group_id: int | None = None
    labels: list[RunnerLabel] = []


class RunnerResponse(ListResponse):
    items_field = "runners"

    runners: list[Runner] = []


class RunnerApplication(GitHubModel):
    os: str
    architecture: str
    download_url: str | None = None
    filename: str | None = None
    temp_download_token: str | None = None
    sha256_checksum: str | None = None


class RunnerGroup(GitHubModel):
    id: int
    name: str
    visibility: str | None = None
    default: bool | None = None
    inherited: bool | None = None
    allows_public_repositories: bool | None = None
    restricted_to_workflows: bool | None = None
    selected_workflows: list[str] = []
    runners_url: str | None = None
    selected_organizations_url: str | None = None
    selected_repositories_url: str | None = None


class RunnerGroupResponse(ListResponse):
    items_field = "runner_groups"

    runner_groups: list[RunnerGroup] = []


# =============================================================================
# Workflows
# =============================================================================


class WorkflowState(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"
    DISABLED_FORK = "disabled_fork"
    DISABLED_INACTIVITY = "disabled_inactivity"
    DISABLED_MANUALLY = "disabled_manually"


class Workflow(GitHubModel):
    id: int
    node_id: str | None = None
    name: str
    path: str | None = None
    state: WorkflowState | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    url: str | None = None
    html_url: str | None = None
    badge_url: str | None = None


class WorkflowsResponse(ListResponse):
    items_field = "workflows"

    workflows: list[Workflow] = []


class WorkflowBillable(GitHubModel):
    total_ms: int | None = None
    jobs: int | None = None


class WorkflowUsage(GitHubModel):
    """Billable minutes per runner OS (UBUNTU, MACOS, WINDOWS)."""

    billable: dict[str, WorkflowBillable] = {}


class CreateWorkflowDispatch(RequestModel):
    """Body for POST .../workflows/{workflow_id}/dispatches."""

    ref: str
    inputs: dict[str, Any] | None = None


# =============================================================================
# Workflow runs
# =============================================================================


class WorkflowRunStatus(str, Enum):
    REQUESTED = "requested"
    QUEUED = "queued"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    WAITING = "waiting"
    COMPLETED = "completed"
    ACTION_REQUIRED = "action_required"
    CANCELLED = "cancelled"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    SKIPPED = "skipped"
    STALE = "stale"
    SUCCESS = "success"
    TIMED_OUT = "timed_out"


class WorkflowRun(GitHubModel):
    id: int
    name: str | None = None
    node_id: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    path: str | None = None
    run_number: int | None = None
    run_attempt: int | None = None
    event: str | None = None
    display_title: str | None = None
    status: str | None = None
    conclusion: str | None = None
    workflow_id: int | None = None
    check_suite_id: int | None = None
    url: str | None = None
    html_url: str | None = None
    actor: User | None = None
    triggering_actor: User | None = None
    repository: Repository | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    run_started_at: datetime | None = None


class WorkflowRunsResponse(ListResponse):
    items_field = "workflow_runs"

    workflow_runs: list[WorkflowRun] = []


class WorkflowRunsRequest(RequestModel):
    """Filters for GET .../actions/runs.

    ``created`` takes GitHub's date-range syntax, e.g. ``>=2024-01-01``.
    """

    actor: str | None = None
    branch: str | None = None
    event: str | None = None
    status: WorkflowRunStatus | None = None
    created: str | None = None
    exclude_pull_requests: bool | None = None
    check_suite_id: int | None = None
    head_sha: str | None = None


class WorkflowRunBillable(GitHubModel):
    total_ms: int | None = None
    jobs: int | None = None
    job_runs: list[dict[str, Any]] = []


class WorkflowRunUsage(GitHubModel):
    billable: dict[str, WorkflowRunBillable] = {}
    run_duration_ms: int | None = None


class Environment(GitHubModel):
    id: int
    name: str
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None


class EnvironmentApprovals(GitHubModel):
    """One entry of a run's deployment review history."""

    environments: list[Environment] = []
    state: str | None = None
    user: User | None = None
    comment: str | None = None


class PendingDeploymentReviewState(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"


class PendingDeploymentReview(RequestModel):
    """Body for POST .../runs/{run_id}/pending_deployments."""

    environment_ids: list[int]
    state: PendingDeploymentReviewState
    comment: str


class Deployment(GitHubModel):
    id: int
    sha: str | None = None
    ref: str | None = None
    task: str | None = None
    environment: str | None = None
    description: str | None = None
    creator: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Workflow jobs
# =============================================================================


class WorkflowJobStep(GitHubModel):
    name: str
    number: int | None = None
    status: str | None = None
    conclusion: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


class WorkflowJob(GitHubModel):
    id: int
    run_id: int | None = None
    run_attempt: int | None = None
    name: str | None = None
    head_sha: str | None = None
    status: str | None = None
    conclusion: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    steps: list[WorkflowJobStep] = []
    labels: list[str] = []
    runner_id: int | None = None
    runner_name: str | None = None
    runner_group_id: int | None = None
    runner_group_name: str | None = None
    url: str | None = None
    html_url: str | None = None


class WorkflowJobsResponse(ListResponse):
    items_field = "jobs"

    jobs: list[WorkflowJob] = []


class WorkflowRunJobsFilter(str, Enum):
    LATEST = "latest"
    ALL = "all"


class WorkflowRunJobsRequest(RequestModel):
    filter: WorkflowRunJobsFilter | None = None
