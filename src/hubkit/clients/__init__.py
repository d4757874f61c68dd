"""Typed endpoint clients. Each takes an ApiConnection and owns its sub-clients."""

from .actions import ActionsClient
from .base import ApiClient
from .checks import CheckRunsClient, ChecksClient, CheckSuitesClient
from .issues import (
    AssigneesClient,
    IssueCommentsClient,
    IssuesClient,
    IssuesLabelsClient,
    LockUnlockClient,
    MilestonesClient,
)
from .organizations import (
    OrganizationActionsClient,
    OrganizationMembersClient,
    OrganizationsClient,
)
from .projects import ProjectCardsClient, ProjectColumnsClient, ProjectsClient
from .pulls import (
    PullRequestReviewCommentsClient,
    PullRequestReviewRequestsClient,
    PullRequestReviewsClient,
    PullRequestsClient,
)
from .repositories import RepositoriesClient, RepositoryActionsClient
from .runners import SelfHostedRunnerGroupsClient, SelfHostedRunnersClient
from .secrets import (
    EnvironmentSecretsClient,
    EnvironmentVariablesClient,
    OrganizationSecretsClient,
    OrganizationVariablesClient,
    RepositorySecretsClient,
    RepositoryVariablesClient,
)
from .users import FollowersClient, UsersClient
from .workflows import WorkflowJobsClient, WorkflowRunsClient, WorkflowsClient

__all__ = [
    "ActionsClient",
    "ApiClient",
    "AssigneesClient",
    "CheckRunsClient",
    "CheckSuitesClient",
    "ChecksClient",
    "EnvironmentSecretsClient",
    "EnvironmentVariablesClient",
    "FollowersClient",
    "IssueCommentsClient",
    "IssuesClient",
    "IssuesLabelsClient",
    "LockUnlockClient",
    "MilestonesClient",
    "OrganizationActionsClient",
    "OrganizationMembersClient",
    "OrganizationSecretsClient",
    "OrganizationVariablesClient",
    "OrganizationsClient",
    "ProjectCardsClient",
    "ProjectColumnsClient",
    "ProjectsClient",
    "PullRequestReviewCommentsClient",
    "PullRequestReviewRequestsClient",
    "PullRequestReviewsClient",
    "PullRequestsClient",
    "RepositoriesClient",
    "RepositoryActionsClient",
    "RepositorySecretsClient",
    "RepositoryVariablesClient",
    "SelfHostedRunnerGroupsClient",
    "SelfHostedRunnersClient",
    "UsersClient",
    "WorkflowJobsClient",
    "WorkflowRunsClient",
    "WorkflowsClient",
]
