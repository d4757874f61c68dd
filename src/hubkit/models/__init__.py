"""Response and request models for the GitHub REST API."""

from .actions import (
    CreateWorkflowDispatch,
    Deployment,
    Environment,
    EnvironmentApprovals,
    PendingDeploymentReview,
    PendingDeploymentReviewState,
    Runner,
    RunnerApplication,
    RunnerGroup,
    RunnerGroupResponse,
    RunnerLabel,
    RunnerResponse,
    Workflow,
    WorkflowBillable,
    WorkflowJob,
    WorkflowJobStep,
    WorkflowJobsResponse,
    WorkflowRun,
    WorkflowRunBillable,
    WorkflowRunJobsFilter,
    WorkflowRunJobsRequest,
    WorkflowRunStatus,
    WorkflowRunUsage,
    WorkflowRunsRequest,
    WorkflowRunsResponse,
    WorkflowState,
    WorkflowUsage,
    WorkflowsResponse,
)
from .base import (
    GitHubModel,
    ListResponse,
    RequestModel,
)
from .checks import (
    AutoTriggerChecks,
    CheckAnnotationLevel,
    CheckConclusion,
    CheckRun,
    CheckRunAction,
    CheckRunAnnotation,
    CheckRunCompletedAtFilter,
    CheckRunOutputResponse,
    CheckRunRequest,
    CheckRunUpdate,
    CheckRunsResponse,
    CheckStatus,
    CheckStatusFilter,
    CheckSuite,
    CheckSuitePreferences,
    CheckSuitePreferencesResponse,
    CheckSuiteReference,
    CheckSuiteRequest,
    CheckSuiteTriggerRequest,
    CheckSuitesResponse,
    NewCheckRun,
    NewCheckRunAnnotation,
    NewCheckRunImage,
    NewCheckRunOutput,
    NewCheckSuite,
)
from .common import (
    AccessToken,
    ItemState,
    ItemStateFilter,
    NewRepository,
    Organization,
    OrganizationsResponse,
    RepositoriesResponse,
    Repository,
    RepositoryUpdate,
    SortDirection,
    Team,
    User,
)
from .issues import (
    AssigneesUpdate,
    Issue,
    IssueComment,
    IssueCommentBody,
    IssueCommentRequest,
    IssueCommentSort,
    IssueFilter,
    IssueLock,
    IssueRequest,
    IssueSort,
    IssueStateReason,
    IssueUpdate,
    Label,
    LabelUpdate,
    LabelsUpdate,
    LockReason,
    Milestone,
    MilestoneRequest,
    MilestoneSort,
    MilestoneUpdate,
    NewIssue,
    NewLabel,
    NewMilestone,
    PullRequestLink,
    RepositoryIssueRequest,
)
from .projects import (
    NewProject,
    NewProjectCard,
    NewProjectColumn,
    Project,
    ProjectCard,
    ProjectCardArchivedState,
    ProjectCardContentType,
    ProjectCardMove,
    ProjectCardRequest,
    ProjectCardUpdate,
    ProjectColumn,
    ProjectColumnMove,
    ProjectColumnUpdate,
    ProjectOrganizationPermission,
    ProjectRequest,
    ProjectUpdate,
)
from .pulls import (
    CommitAuthor,
    CommitDetail,
    DraftPullRequestReviewComment,
    GitReference,
    MergePullRequest,
    NewPullRequest,
    PullRequest,
    PullRequestCommit,
    PullRequestFile,
    PullRequestMerge,
    PullRequestMergeMethod,
    PullRequestRequest,
    PullRequestReview,
    PullRequestReviewComment,
    PullRequestReviewCommentCreate,
    PullRequestReviewCommentEdit,
    PullRequestReviewCommentReplyCreate,
    PullRequestReviewCommentRequest,
    PullRequestReviewCommentSort,
    PullRequestReviewCreate,
    PullRequestReviewDismiss,
    PullRequestReviewEvent,
    PullRequestReviewRequest,
    PullRequestReviewSubmit,
    PullRequestSort,
    PullRequestUpdate,
    RequestedReviews,
)
from .secrets import (
    NewOrganizationVariable,
    NewVariable,
    OrganizationSecret,
    OrganizationSecretsCollection,
    OrganizationVariable,
    OrganizationVariableUpdate,
    OrganizationVariablesCollection,
    Secret,
    SecretsCollection,
    SecretsPublicKey,
    SelectedRepositoriesUpdate,
    SelectedRepositoryCollection,
    UpsertOrganizationSecret,
    UpsertSecret,
    Variable,
    VariableUpdate,
    VariablesCollection,
    Visibility,
)

__all__ = [
    "AccessToken",
    "AssigneesUpdate",
    "AutoTriggerChecks",
    "CheckAnnotationLevel",
    "CheckConclusion",
    "CheckRun",
    "CheckRunAction",
    "CheckRunAnnotation",
    "CheckRunCompletedAtFilter",
    "CheckRunOutputResponse",
    "CheckRunRequest",
    "CheckRunUpdate",
    "CheckRunsResponse",
    "CheckStatus",
    "CheckStatusFilter",
    "CheckSuite",
    "CheckSuitePreferences",
    "CheckSuitePreferencesResponse",
    "CheckSuiteReference",
    "CheckSuiteRequest",
    "CheckSuiteTriggerRequest",
    "CheckSuitesResponse",
    "CommitAuthor",
    "CommitDetail",
    "CreateWorkflowDispatch",
    "Deployment",
    "DraftPullRequestReviewComment",
    "Environment",
    "EnvironmentApprovals",
    "GitHubModel",
    "GitReference",
    "Issue",
    "IssueComment",
    "IssueCommentBody",
    "IssueCommentRequest",
    "IssueCommentSort",
    "IssueFilter",
    "IssueLock",
    "IssueRequest",
    "IssueSort",
    "IssueStateReason",
    "IssueUpdate",
    "ItemState",
    "ItemStateFilter",
    "Label",
    "LabelUpdate",
    "LabelsUpdate",
    "ListResponse",
    "LockReason",
    "MergePullRequest",
    "Milestone",
    "MilestoneRequest",
    "MilestoneSort",
    "MilestoneUpdate",
    "NewCheckRun",
    "NewCheckRunAnnotation",
    "NewCheckRunImage",
    "NewCheckRunOutput",
    "NewCheckSuite",
    "NewIssue",
    "NewLabel",
    "NewMilestone",
    "NewOrganizationVariable",
    "NewProject",
    "NewProjectCard",
    "NewProjectColumn",
    "NewPullRequest",
    "NewRepository",
    "NewVariable",
    "Organization",
    "OrganizationSecret",
    "OrganizationSecretsCollection",
    "OrganizationVariable",
    "OrganizationVariableUpdate",
    "OrganizationVariablesCollection",
    "OrganizationsResponse",
    "PendingDeploymentReview",
    "PendingDeploymentReviewState",
    "Project",
    "ProjectCard",
    "ProjectCardArchivedState",
    "ProjectCardContentType",
    "ProjectCardMove",
    "ProjectCardRequest",
    "ProjectCardUpdate",
    "ProjectColumn",
    "ProjectColumnMove",
    "ProjectColumnUpdate",
    "ProjectOrganizationPermission",
    "ProjectRequest",
    "ProjectUpdate",
    "PullRequest",
    "PullRequestCommit",
    "PullRequestFile",
    "PullRequestLink",
    "PullRequestMerge",
    "PullRequestMergeMethod",
    "PullRequestRequest",
    "PullRequestReview",
    "PullRequestReviewComment",
    "PullRequestReviewCommentCreate",
    "PullRequestReviewCommentEdit",
    "PullRequestReviewCommentReplyCreate",
    "PullRequestReviewCommentRequest",
    "PullRequestReviewCommentSort",
    "PullRequestReviewCreate",
    "PullRequestReviewDismiss",
    "PullRequestReviewEvent",
    "PullRequestReviewRequest",
    "PullRequestReviewSubmit",
    "PullRequestSort",
    "PullRequestUpdate",
    "RepositoriesResponse",
    "Repository",
    "RepositoryIssueRequest",
    "RepositoryUpdate",
    "RequestModel",
    "RequestedReviews",
    "Runner",
    "RunnerApplication",
    "RunnerGroup",
    "RunnerGroupResponse",
    "RunnerLabel",
    "RunnerResponse",
    "Secret",
    "SecretsCollection",
    "SecretsPublicKey",
    "SelectedRepositoriesUpdate",
    "SelectedRepositoryCollection",
    "SortDirection",
    "Team",
    "UpsertOrganizationSecret",
    "UpsertSecret",
    "User",
    "Variable",
    "VariableUpdate",
    "VariablesCollection",
    "Visibility",
    "Workflow",
    "WorkflowBillable",
    "WorkflowJob",
    "WorkflowJobStep",
    "WorkflowJobsResponse",
    "WorkflowRun",
    "WorkflowRunBillable",
    "WorkflowRunJobsFilter",
    "WorkflowRunJobsRequest",
    "WorkflowRunStatus",
    "WorkflowRunUsage",
    "WorkflowRunsRequest",
    "WorkflowRunsResponse",
    "WorkflowState",
    "WorkflowUsage",
    "WorkflowsResponse",
]
