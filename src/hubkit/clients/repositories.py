"""Repositories and their Actions secrets and variables.

Reference: https://docs.github.com/en/rest/repos
"""

from .. import ensure
from ..http import ApiConnection
from ..models import NewRepository, Repository, RepositoryUpdate
from .base import ApiClient, repository_id_path, repository_path
from .secrets import (
    EnvironmentSecretsClient,
    EnvironmentVariablesClient,
    RepositorySecretsClient,
    RepositoryVariablesClient,
)


class RepositoryActionsClient(ApiClient):
    """Repository-level and environment-level Actions configuration.

    Attributes:
        secrets: RepositorySecretsClient
        variables: RepositoryVariablesClient
        environment_secrets: EnvironmentSecretsClient
        environment_variables: EnvironmentVariablesClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.secrets = RepositorySecretsClient(api_connection)
        self.variables = RepositoryVariablesClient(api_connection)
        self.environment_secrets = EnvironmentSecretsClient(api_connection)
        self.environment_variables = EnvironmentVariablesClient(api_connection)


class RepositoriesClient(ApiClient):
    """Attributes:
        actions: RepositoryActionsClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.actions = RepositoryActionsClient(api_connection)

    async def get(self, owner: str, name: str) -> Repository:
        return await self._api.get(repository_path(owner, name), Repository)

    async def get_by_repository_id(self, repository_id: int) -> Repository:
        return await self._api.get(repository_id_path(repository_id), Repository)

    async def create(self, new_repository: NewRepository) -> Repository:
        """Create a repository owned by the authenticated user."""
        ensure.not_none(new_repository, "new_repository")
        return await self._api.post("/user/repos", new_repository, model=Repository)

    async def create_for_organization(
        self, organization: str, new_repository: NewRepository
    ) -> Repository:
        """Create a repository in an organization.

        The authenticated user must be a member of the organization;
        ``team_id`` grants a team access to the new repository.
        """
        ensure.not_blank(organization, "organization")
        ensure.not_none(new_repository, "new_repository")
        return await self._api.post(
            f"/orgs/{organization}/repos", new_repository, model=Repository
        )

    async def update(
        self, owner: str, name: str, repository_update: RepositoryUpdate
    ) -> Repository:
        ensure.not_none(repository_update, "repository_update")
        return await self._api.patch(
            repository_path(owner, name), repository_update, model=Repository
        )

    async def update_by_repository_id(
        self, repository_id: int, repository_update: RepositoryUpdate
    ) -> Repository:
        ensure.not_none(repository_update, "repository_update")
        return await self._api.patch(
            repository_id_path(repository_id), repository_update, model=Repository
        )

    async def delete(self, owner: str, name: str) -> None:
        """Delete a repository. Requires admin access and the delete_repo scope."""
        await self._api.delete(repository_path(owner, name))

    async def delete_by_repository_id(self, repository_id: int) -> None:
        await self._api.delete(repository_id_path(repository_id))
