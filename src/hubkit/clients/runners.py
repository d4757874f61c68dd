"""Self-hosted runners and runner groups.

Reference: https://docs.github.com/en/rest/actions/self-hosted-runners
           https://docs.github.com/en/rest/actions/self-hosted-runner-groups
"""


from .. import ensure
from ..http import ApiOptions
from ..models import (
    AccessToken,
    OrganizationsResponse,
    RepositoriesResponse,
    Runner,
    RunnerApplication,
    RunnerGroup,
    RunnerGroupResponse,
    RunnerResponse,
)
from .base import ApiClient, repository_path


def _enterprise(enterprise: str) -> str:
    ensure.not_blank(enterprise, "enterprise")
    return f"/enterprises/{enterprise}/actions"


def _organization(organization: str) -> str:
    ensure.not_blank(organization, "organization")
    return f"/orgs/{organization}/actions"


def _repository(owner: str, name: str) -> str:
    return f"{repository_path(owner, name)}/actions"


def _runner(scope: str, runner_id: int) -> str:
    ensure.positive(runner_id, "runner_id")
    return f"{scope}/runners/{runner_id}"


def _runner_group(scope: str, runner_group_id: int) -> str:
    ensure.positive(runner_group_id, "runner_group_id")
    return f"{scope}/runner-groups/{runner_group_id}"


class SelfHostedRunnersClient(ApiClient):
    """Self-hosted runners at enterprise, organization and repository scope."""

    async def _list_runners(self, scope: str, options: ApiOptions | None) -> RunnerResponse:
        pages = await self._api.get_all_pages(
            f"{scope}/runners", RunnerResponse, options=options
        )
        return RunnerResponse.combine(pages)

    async def _list_applications(
        self, scope: str, options: ApiOptions | None
    ) -> list[RunnerApplication]:
        return await self._api.get_all(
            f"{scope}/runners/downloads", RunnerApplication, options=options
        )

    # --- Runners ---

    async def list_all_runners_for_enterprise(
        self, enterprise: str, options: ApiOptions | None = None
    ) -> RunnerResponse:
        """List all self-hosted runners registered to an enterprise.

        Args:
            enterprise: Enterprise slug
            options: Pagination options

        Returns:
            RunnerResponse with runners from every page
        """
        return await self._list_runners(_enterprise(enterprise), options)

    async def list_all_runners_for_organization(
        self, organization: str, options: ApiOptions | None = None
    ) -> RunnerResponse:
        return await self._list_runners(_organization(organization), options)

    async def list_all_runners_for_repository(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> RunnerResponse:
        return await self._list_runners(_repository(owner, name), options)

    async def get_runner_for_enterprise(self, enterprise: str, runner_id: int) -> Runner:
        return await self._api.get(_runner(_enterprise(enterprise), runner_id), Runner)

    async def get_runner_for_organization(self, organization: str, runner_id: int) -> Runner:
        return await self._api.get(_runner(_organization(organization), runner_id), Runner)

    async def get_runner_for_repository(self, owner: str, name: str, runner_id: int) -> Runner:
        return await self._api.get(_runner(_repository(owner, name), runner_id), Runner)

    async def delete_enterprise_runner(self, enterprise: str, runner_id: int) -> None:
        """Force-remove a runner from an enterprise."""
        await self._api.delete(_runner(_enterprise(enterprise), runner_id))

    async def delete_organization_runner(self, organization: str, runner_id: int) -> None:
        await self._api.delete(_runner(_organization(organization), runner_id))

    async def delete_repository_runner(self, owner: str, name: str, runner_id: int) -> None:
        await self._api.delete(_runner(_repository(owner, name), runner_id))

    # --- Runner applications ---

    async def list_all_runner_applications_for_enterprise(
        self, enterprise: str, options: ApiOptions | None = None
    ) -> list[RunnerApplication]:
        """List runner binaries available for download, one per OS/architecture."""
        return await self._list_applications(_enterprise(enterprise), options)

    async def list_all_runner_applications_for_organization(
        self, organization: str, options: ApiOptions | None = None
    ) -> list[RunnerApplication]:
        return await self._list_applications(_organization(organization), options)

    async def list_all_runner_applications_for_repository(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> list[RunnerApplication]:
        return await self._list_applications(_repository(owner, name), options)

    # --- Registration / removal tokens ---

    async def create_enterprise_registration_token(self, enterprise: str) -> AccessToken:
        """Create a token for ``config.sh`` to register a runner (expires after one hour)."""
        return await self._api.post(
            f"{_enterprise(enterprise)}/runners/registration-token", model=AccessToken
        )

    async def create_organization_registration_token(self, organization: str) -> AccessToken:
        return await self._api.post(
            f"{_organization(organization)}/runners/registration-token", model=AccessToken
        )

    async def create_repository_registration_token(self, owner: str, name: str) -> AccessToken:
        return await self._api.post(
            f"{_repository(owner, name)}/runners/registration-token", model=AccessToken
        )

    async def create_enterprise_remove_token(self, enterprise: str) -> AccessToken:
        """Create a token for ``config.sh remove`` (expires after one hour)."""
        return await self._api.post(
            f"{_enterprise(enterprise)}/runners/remove-token", model=AccessToken
        )

    async def create_organization_remove_token(self, organization: str) -> AccessToken:
        return await self._api.post(
            f"{_organization(organization)}/runners/remove-token", model=AccessToken
        )

    async def create_repository_remove_token(self, owner: str, name: str) -> AccessToken:
        return await self._api.post(
            f"{_repository(owner, name)}/runners/remove-token", model=AccessToken
        )


class SelfHostedRunnerGroupsClient(ApiClient):
    """Runner groups for enterprises and organizations.

    Runner groups control which organizations (enterprise groups) or
    repositories (organization groups) may use a set of runners.
    """

    async def get_runner_group_for_enterprise(
        self, enterprise: str, runner_group_id: int
    ) -> RunnerGroup:
        return await self._api.get(
            _runner_group(_enterprise(enterprise), runner_group_id), RunnerGroup
        )

    async def get_runner_group_for_organization(
        self, organization: str, runner_group_id: int
    ) -> RunnerGroup:
        return await self._api.get(
            _runner_group(_organization(organization), runner_group_id), RunnerGroup
        )

    async def list_all_runner_groups_for_enterprise(
        self, enterprise: str, options: ApiOptions | None = None
    ) -> RunnerGroupResponse:
        """List all runner groups of an enterprise.

        Args:
            enterprise: Enterprise slug
            options: Pagination options

        Returns:
            RunnerGroupResponse folded across pages
        """
        pages = await self._api.get_all_pages(
            f"{_enterprise(enterprise)}/runner-groups", RunnerGroupResponse, options=options
        )
        return RunnerGroupResponse.combine(pages)

    async def list_all_runner_groups_for_organization(
        self, organization: str, options: ApiOptions | None = None
    ) -> RunnerGroupResponse:
        pages = await self._api.get_all_pages(
            f"{_organization(organization)}/runner-groups",
            RunnerGroupResponse,
            options=options,
        )
        return RunnerGroupResponse.combine(pages)

    async def list_all_runners_for_enterprise_runner_group(
        self, enterprise: str, runner_group_id: int, options: ApiOptions | None = None
    ) -> RunnerResponse:
        pages = await self._api.get_all_pages(
            f"{_runner_group(_enterprise(enterprise), runner_group_id)}/runners",
            RunnerResponse,
            options=options,
        )
        return RunnerResponse.combine(pages)

    async def list_all_runners_for_organization_runner_group(
        self, organization: str, runner_group_id: int, options: ApiOptions | None = None
    ) -> RunnerResponse:
        pages = await self._api.get_all_pages(
            f"{_runner_group(_organization(organization), runner_group_id)}/runners",
            RunnerResponse,
            options=options,
        )
        return RunnerResponse.combine(pages)

    async def list_all_runner_group_organizations_for_enterprise(
        self, enterprise: str, runner_group_id: int, options: ApiOptions | None = None
    ) -> OrganizationsResponse:
        """List organizations with access to an enterprise runner group."""
        pages = await self._api.get_all_pages(
            f"{_runner_group(_enterprise(enterprise), runner_group_id)}/organizations",
            OrganizationsResponse,
            options=options,
        )
        return OrganizationsResponse.combine(pages)

    async def list_all_runner_group_repositories_for_organization(
        self, organization: str, runner_group_id: int, options: ApiOptions | None = None
    ) -> RepositoriesResponse:
        """List repositories with access to an organization runner group."""
        pages = await self._api.get_all_pages(
            f"{_runner_group(_organization(organization), runner_group_id)}/repositories",
            RepositoriesResponse,
            options=options,
        )
        return RepositoriesResponse.combine(pages)
