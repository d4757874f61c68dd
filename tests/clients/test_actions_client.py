"""Unit tests for self-hosted runners and runner groups."""

import pytest

from hubkit.clients import ActionsClient, SelfHostedRunnerGroupsClient, SelfHostedRunnersClient
from hubkit.http import ApiOptions
from hubkit.models import (
    AccessToken,
    OrganizationsResponse,
    RepositoriesResponse,
    Runner,
    RunnerApplication,
    RunnerGroup,
    RunnerGroupResponse,
    RunnerResponse,
)


@pytest.fixture
def runners(api):
    return SelfHostedRunnersClient(api)


@pytest.fixture
def groups(api):
    return SelfHostedRunnerGroupsClient(api)


def _runner_page(total_count: int, *ids: int) -> RunnerResponse:
    return RunnerResponse(
        total_count=total_count, runners=[{"id": i, "name": f"runner-{i}"} for i in ids]
    )


class TestActionsClient:
    def test_exposes_sub_clients(self, api):
        client = ActionsClient(api)

        assert isinstance(client.self_hosted_runners, SelfHostedRunnersClient)
        assert isinstance(client.self_hosted_runner_groups, SelfHostedRunnerGroupsClient)
        assert client.workflows.jobs is not None
        assert client.workflows.runs is not None

    def test_requires_api_connection(self):
        with pytest.raises(ValueError, match="api_connection"):
            ActionsClient(None)


# =============================================================================
# Runners
# =============================================================================


class TestSelfHostedRunners:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,args,path",
        [
            ("list_all_runners_for_enterprise", ("acme",), "/enterprises/acme/actions/runners"),
            ("list_all_runners_for_organization", ("github",), "/orgs/github/actions/runners"),
            (
                "list_all_runners_for_repository",
                ("octocat", "hello"),
                "/repos/octocat/hello/actions/runners",
            ),
        ],
    )
    async def test_list_runners_folds_pages(self, api, runners, method, args, path):
        api.get_all_pages.return_value = [_runner_page(3, 1, 2), _runner_page(3, 3)]
        options = ApiOptions(page_size=2)

        result = await getattr(runners, method)(*args, options=options)

        api.get_all_pages.assert_awaited_once_with(path, RunnerResponse, options=options)
        assert result.total_count == 3
        assert [runner.id for runner in result.runners] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_list_runners_without_pages(self, api, runners):
        api.get_all_pages.return_value = []

        result = await runners.list_all_runners_for_organization("github")

        assert result.total_count == 0
        assert result.runners == []

    @pytest.mark.asyncio
    async def test_get_runner(self, api, runners):
        api.get.return_value = Runner(id=23, name="builder")

        runner = await runners.get_runner_for_repository("octocat", "hello", 23)

        api.get.assert_awaited_once_with("/repos/octocat/hello/actions/runners/23", Runner)
        assert runner.id == 23

    @pytest.mark.asyncio
    async def test_get_enterprise_and_organization_runner(self, api, runners):
        await runners.get_runner_for_enterprise("acme", 1)
        await runners.get_runner_for_organization("github", 2)

        assert [call.args[0] for call in api.get.await_args_list] == [
            "/enterprises/acme/actions/runners/1",
            "/orgs/github/actions/runners/2",
        ]

    @pytest.mark.asyncio
    async def test_delete_runners(self, api, runners):
        await runners.delete_enterprise_runner("acme", 1)
        await runners.delete_organization_runner("github", 2)
        await runners.delete_repository_runner("octocat", "hello", 3)

        assert [call.args[0] for call in api.delete.await_args_list] == [
            "/enterprises/acme/actions/runners/1",
            "/orgs/github/actions/runners/2",
            "/repos/octocat/hello/actions/runners/3",
        ]

    @pytest.mark.asyncio
    async def test_list_runner_applications(self, api, runners):
        api.get_all.return_value = [RunnerApplication(os="linux", architecture="x64")]

        applications = await runners.list_all_runner_applications_for_organization("github")

        api.get_all.assert_awaited_once_with(
            "/orgs/github/actions/runners/downloads", RunnerApplication, options=None
        )
        assert applications[0].architecture == "x64"

    @pytest.mark.asyncio
    async def test_list_runner_applications_other_scopes(self, api, runners):
        await runners.list_all_runner_applications_for_enterprise("acme")
        await runners.list_all_runner_applications_for_repository("octocat", "hello")

        assert [call.args[0] for call in api.get_all.await_args_list] == [
            "/enterprises/acme/actions/runners/downloads",
            "/repos/octocat/hello/actions/runners/downloads",
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,args,path",
        [
            (
                "create_enterprise_registration_token",
                ("acme",),
                "/enterprises/acme/actions/runners/registration-token",
            ),
            (
                "create_organization_registration_token",
                ("github",),
                "/orgs/github/actions/runners/registration-token",
            ),
            (
                "create_repository_registration_token",
                ("octocat", "hello"),
                "/repos/octocat/hello/actions/runners/registration-token",
            ),
            (
                "create_enterprise_remove_token",
                ("acme",),
                "/enterprises/acme/actions/runners/remove-token",
            ),
            (
                "create_organization_remove_token",
                ("github",),
                "/orgs/github/actions/runners/remove-token",
            ),
            (
                "create_repository_remove_token",
                ("octocat", "hello"),
                "/repos/octocat/hello/actions/runners/remove-token",
            ),
        ],
    )
    async def test_tokens(self, api, runners, method, args, path):
        api.post.return_value = AccessToken(token="LLBF3JGZDX3P5PMEXLND6TS6FCWO6")

        token = await getattr(runners, method)(*args)

        api.post.assert_awaited_once_with(path, model=AccessToken)
        assert token.token == "LLBF3JGZDX3P5PMEXLND6TS6FCWO6"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,args",
        [
            ("list_all_runners_for_enterprise", ("",)),
            ("list_all_runners_for_organization", (None,)),
            ("list_all_runners_for_repository", ("", "hello")),
            ("list_all_runners_for_repository", ("octocat", " ")),
            ("create_repository_registration_token", ("octocat", "")),
        ],
    )
    async def test_rejects_blank_arguments(self, api, runners, method, args):
        with pytest.raises(ValueError):
            await getattr(runners, method)(*args)

        api.get_all_pages.assert_not_awaited()
        api.post.assert_not_awaited()


# =============================================================================
# Runner Groups
# =============================================================================


class TestSelfHostedRunnerGroups:
    @pytest.mark.asyncio
    async def test_get_runner_group(self, api, groups):
        await groups.get_runner_group_for_enterprise("acme", 4)
        await groups.get_runner_group_for_organization("github", 5)

        assert [call.args for call in api.get.await_args_list] == [
            ("/enterprises/acme/actions/runner-groups/4", RunnerGroup),
            ("/orgs/github/actions/runner-groups/5", RunnerGroup),
        ]

    @pytest.mark.asyncio
    async def test_list_runner_groups(self, api, groups):
        api.get_all_pages.return_value = [
            RunnerGroupResponse(total_count=2, runner_groups=[{"id": 1, "name": "Default"}]),
            RunnerGroupResponse(total_count=2, runner_groups=[{"id": 2, "name": "GPU"}]),
        ]

        result = await groups.list_all_runner_groups_for_organization("github")

        api.get_all_pages.assert_awaited_once_with(
            "/orgs/github/actions/runner-groups", RunnerGroupResponse, options=None
        )
        assert result.total_count == 2
        assert [group.name for group in result.runner_groups] == ["Default", "GPU"]

    @pytest.mark.asyncio
    async def test_list_enterprise_runner_groups(self, api, groups):
        api.get_all_pages.return_value = []

        await groups.list_all_runner_groups_for_enterprise("acme")

        api.get_all_pages.assert_awaited_once_with(
            "/enterprises/acme/actions/runner-groups", RunnerGroupResponse, options=None
        )

    @pytest.mark.asyncio
    async def test_list_runners_in_group(self, api, groups):
        api.get_all_pages.return_value = [_runner_page(1, 9)]

        enterprise = await groups.list_all_runners_for_enterprise_runner_group("acme", 4)
        organization = await groups.list_all_runners_for_organization_runner_group("github", 5)

        assert [call.args[0] for call in api.get_all_pages.await_args_list] == [
            "/enterprises/acme/actions/runner-groups/4/runners",
            "/orgs/github/actions/runner-groups/5/runners",
        ]
        assert enterprise.runners[0].id == 9
        assert organization.total_count == 1

    @pytest.mark.asyncio
    async def test_list_group_organizations(self, api, groups):
        api.get_all_pages.return_value = [
            OrganizationsResponse(total_count=1, organizations=[{"login": "github", "id": 1}])
        ]

        result = await groups.list_all_runner_group_organizations_for_enterprise("acme", 4)

        api.get_all_pages.assert_awaited_once_with(
            "/enterprises/acme/actions/runner-groups/4/organizations",
            OrganizationsResponse,
            options=None,
        )
        assert result.organizations[0].login == "github"

    @pytest.mark.asyncio
    async def test_list_group_repositories(self, api, groups):
        api.get_all_pages.return_value = [
            RepositoriesResponse(total_count=1, repositories=[{"id": 7, "name": "hello"}])
        ]

        result = await groups.list_all_runner_group_repositories_for_organization("github", 5)

        api.get_all_pages.assert_awaited_once_with(
            "/orgs/github/actions/runner-groups/5/repositories",
            RepositoriesResponse,
            options=None,
        )
        assert result.repositories[0].name == "hello"


# =============================================================================
# Numeric id validation
# =============================================================================


class TestNumericIdValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("runner_id", [None, 0, -1, "23"])
    @pytest.mark.parametrize(
        "method,scope",
        [
            ("get_runner_for_enterprise", ("acme",)),
            ("get_runner_for_organization", ("github",)),
            ("get_runner_for_repository", ("octocat", "hello")),
            ("delete_enterprise_runner", ("acme",)),
            ("delete_organization_runner", ("github",)),
            ("delete_repository_runner", ("octocat", "hello")),
        ],
    )
    async def test_runner_id(self, api, runners, method, scope, runner_id):
        with pytest.raises(ValueError, match="runner_id"):
            await getattr(runners, method)(*scope, runner_id)

        assert not api.method_calls

    @pytest.mark.asyncio
    @pytest.mark.parametrize("runner_group_id", [None, 0, -4])
    @pytest.mark.parametrize(
        "method,scope",
        [
            ("get_runner_group_for_enterprise", "acme"),
            ("get_runner_group_for_organization", "github"),
            ("list_all_runners_for_enterprise_runner_group", "acme"),
            ("list_all_runners_for_organization_runner_group", "github"),
            ("list_all_runner_group_organizations_for_enterprise", "acme"),
            ("list_all_runner_group_repositories_for_organization", "github"),
        ],
    )
    async def test_runner_group_id(self, api, groups, method, scope, runner_group_id):
        with pytest.raises(ValueError, match="runner_group_id"):
            await getattr(groups, method)(scope, runner_group_id)

        assert not api.method_calls
