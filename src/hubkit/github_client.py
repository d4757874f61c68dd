"""Entry point: one object exposing every endpoint client over a shared connection."""

import logging
from typing import Any

from .clients import (
    ActionsClient,
    ChecksClient,
    IssuesClient,
    OrganizationsClient,
    ProjectsClient,
    PullRequestsClient,
    RepositoriesClient,
    UsersClient,
)
from .config import HubkitConfig
from .http import ApiConnection, ApiInfo, Connection

logger = logging.getLogger("hubkit.github_client")

__all__ = ["GitHubClient"]


class GitHubClient:
    """GitHub REST API client.

    Attributes:
        connection: Shared transport
        actions: Runners, runner groups, workflows, runs and jobs
        check: Check runs and check suites
        issue: Issues, assignees, comments, labels, milestones
        pull_request: Pull requests, reviews, review comments, review requests
        project: Projects (classic) boards, columns and cards
        organization: Organizations, members, organization secrets/variables
        repository: Repositories, repository/environment secrets and variables
        user: Users and followers

    Example:
        >>> async with GitHubClient("ghp_token") as github:
        ...     issue = await github.issue.get("octocat", "hello-world", 1)
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        *,
        user_agent: str | None = None,
        connection: Connection | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub token; omit for anonymous access
            base_url: API root (GitHub Enterprise Server: https://host/api/v3)
            user_agent: User-Agent header override
            connection: Pre-built Connection; token/base_url/user_agent are
                ignored when given
        """
        self.connection = connection or Connection(token, base_url, user_agent=user_agent)
        api_connection = ApiConnection(self.connection)

        self.actions = ActionsClient(api_connection)
        self.check = ChecksClient(api_connection)
        self.issue = IssuesClient(api_connection)
        self.pull_request = PullRequestsClient(api_connection)
        self.project = ProjectsClient(api_connection)
        self.organization = OrganizationsClient(api_connection)
        self.repository = RepositoriesClient(api_connection)
        self.user = UsersClient(api_connection)

        logger.debug("github_client_created", extra={"base_url": self.connection.base_url})

    @classmethod
    def from_config(cls, config: HubkitConfig | None = None, **kwargs: Any) -> "GitHubClient":
        """Build a client from HubkitConfig (default: environment / .env)."""
        return cls(connection=Connection.from_config(config, **kwargs))

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.connection.close()

    def get_last_api_info(self) -> ApiInfo | None:
        """Rate limit, scopes and links from the most recent response (a copy)."""
        return self.connection.get_last_api_info()
