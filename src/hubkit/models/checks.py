"""Checks API resources: check runs, annotations, check suites."""

from datetime import datetime
from enum import Enum

from .base import GitHubModel, ListResponse, RequestModel
from .common import Repository


class CheckStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    # GitHub Actions only
    WAITING = "waiting"
    REQUESTED = "requested"
    PENDING = "pending"


class CheckConclusion(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    SKIPPED = "skipped"
    STALE = "stale"


class CheckStatusFilter(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckRunCompletedAtFilter(str, Enum):
    LATEST = "latest"
    ALL = "all"


class CheckAnnotationLevel(str, Enum):
    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class CheckRunOutputResponse(GitHubModel):
    title: str | None = None
    summary: str | None = None
    text: str | None = None
    annotations_count: int | None = None
    annotations_url: str | None = None


class CheckSuiteReference(GitHubModel):
    id: int


class CheckRun(GitHubModel):
    id: int
    head_sha: str | None = None
    node_id: str | None = None
    external_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    details_url: str | None = None
    status: CheckStatus | None = None
    conclusion: CheckConclusion | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    output: CheckRunOutputResponse | None = None
    name: str | None = None
    check_suite: CheckSuiteReference | None = None


class CheckRunsResponse(ListResponse):
    items_field = "check_runs"

    check_runs: list[CheckRun] = []


class CheckRunAnnotation(GitHubModel):
    path: str | None = None
    start_line: int | None = None
    end_line: int | None = None
    start_column: int | None = None
    end_column: int | None = None
    annotation_level: CheckAnnotationLevel | None = None
    title: str | None = None
    message: str | None = None
    raw_details: str | None = None
    blob_href: str | None = None


class NewCheckRunAnnotation(RequestModel):
    path: str
    start_line: int
    end_line: int
    annotation_level: CheckAnnotationLevel
    message: str
    start_column: int | None = None
    end_column: int | None = None
    title: str | None = None
    raw_details: str | None = None


class NewCheckRunImage(RequestModel):
    alt: str
    image_url: str
    caption: str | None = None


class NewCheckRunOutput(RequestModel):
    title: str
    summary: str
    text: str | None = None
    annotations: list[NewCheckRunAnnotation] | None = None
    images: list[NewCheckRunImage] | None = None


class CheckRunAction(RequestModel):
    label: str
    description: str
    identifier: str


class NewCheckRun(RequestModel):
    """Body for POST /repos/{owner}/{repo}/check-runs."""

    name: str
    head_sha: str
    details_url: str | None = None
    external_id: str | None = None
    status: CheckStatus | None = None
    started_at: datetime | None = None
    conclusion: CheckConclusion | None = None
    completed_at: datetime | None = None
    output: NewCheckRunOutput | None = None
    actions: list[CheckRunAction] | None = None


class CheckRunUpdate(RequestModel):
    """Body for PATCH /repos/{owner}/{repo}/check-runs/{check_run_id}."""

    name: str | None = None
    details_url: str | None = None
    external_id: str | None = None
    status: CheckStatus | None = None
    started_at: datetime | None = None
    conclusion: CheckConclusion | None = None
    completed_at: datetime | None = None
    output: NewCheckRunOutput | None = None
    actions: list[CheckRunAction] | None = None


class CheckRunRequest(RequestModel):
    """Filters for listing check runs by ref or by suite."""

    check_name: str | None = None
    status: CheckStatusFilter | None = None
    filter: CheckRunCompletedAtFilter | None = None
    app_id: int | None = None


class CheckSuite(GitHubModel):
    id: int
    node_id: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    status: CheckStatus | None = None
    conclusion: CheckConclusion | None = None
    url: str | None = None
    before: str | None = None
    after: str | None = None
    latest_check_runs_count: int | None = None
    check_runs_url: str | None = None
    repository: Repository | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CheckSuitesResponse(ListResponse):
    items_field = "check_suites"

    check_suites: list[CheckSuite] = []


class CheckSuiteRequest(RequestModel):
    app_id: int | None = None
    check_name: str | None = None


class NewCheckSuite(RequestModel):
    head_sha: str


class CheckSuiteTriggerRequest(RequestModel):
    """Body for POST /repos/{owner}/{repo}/check-suite-requests."""

    head_sha: str


class AutoTriggerChecks(RequestModel):
    app_id: int
    setting: bool


class CheckSuitePreferences(RequestModel):
    auto_trigger_checks: list[AutoTriggerChecks]


class CheckSuitePreferencesResponse(GitHubModel):
    preferences: dict | None = None
    repository: Repository | None = None
