"""Checks API: check runs and check suites.

Every request carries the Checks preview media type. Repository-scoped
methods come in pairs: ``(owner, name, ...)`` and ``*_by_repository_id``.

Reference: https://docs.github.com/en/rest/checks
"""


from .. import accept_headers, ensure
from ..http import ApiConnection, ApiOptions
from ..models import (
    CheckRun,
    CheckRunAnnotation,
    CheckRunRequest,
    CheckRunsResponse,
    CheckRunUpdate,
    CheckSuite,
    CheckSuitePreferences,
    CheckSuitePreferencesResponse,
    CheckSuiteRequest,
    CheckSuitesResponse,
    CheckSuiteTriggerRequest,
    NewCheckRun,
    NewCheckSuite,
)
from .base import ApiClient, repository_id_path, repository_path

PREVIEW = accept_headers.CHECKS_API_PREVIEW


def _check_run(repo: str, check_run_id: int) -> str:
    ensure.positive(check_run_id, "check_run_id")
    return f"{repo}/check-runs/{check_run_id}"


def _check_suite(repo: str, check_suite_id: int) -> str:
    ensure.positive(check_suite_id, "check_suite_id")
    return f"{repo}/check-suites/{check_suite_id}"


class CheckRunsClient(ApiClient):
    """Create, update and list check runs."""

    async def create(self, owner: str, name: str, new_check_run: NewCheckRun) -> CheckRun:
        """Create a check run for a commit.

        Args:
            owner: Repository owner
            name: Repository name
            new_check_run: Name, head SHA and optional status/output

        Returns:
            The created CheckRun
        """
        return await self._create(repository_path(owner, name), new_check_run)

    async def create_by_repository_id(
        self, repository_id: int, new_check_run: NewCheckRun
    ) -> CheckRun:
        return await self._create(repository_id_path(repository_id), new_check_run)

    async def update(
        self, owner: str, name: str, check_run_id: int, check_run_update: CheckRunUpdate
    ) -> CheckRun:
        return await self._update(
            _check_run(repository_path(owner, name), check_run_id), check_run_update
        )

    async def update_by_repository_id(
        self, repository_id: int, check_run_id: int, check_run_update: CheckRunUpdate
    ) -> CheckRun:
        return await self._update(
            _check_run(repository_id_path(repository_id), check_run_id), check_run_update
        )

    async def get(self, owner: str, name: str, check_run_id: int) -> CheckRun:
        return await self._api.get(
            _check_run(repository_path(owner, name), check_run_id), CheckRun, accepts=PREVIEW
        )

    async def get_by_repository_id(self, repository_id: int, check_run_id: int) -> CheckRun:
        return await self._api.get(
            _check_run(repository_id_path(repository_id), check_run_id),
            CheckRun,
            accepts=PREVIEW,
        )

    async def get_all_for_reference(
        self,
        owner: str,
        name: str,
        reference: str,
        request: CheckRunRequest | None = None,
        options: ApiOptions | None = None,
    ) -> CheckRunsResponse:
        """List check runs for a commit SHA, branch or tag.

        Returns:
            CheckRunsResponse folded across pages
        """
        ensure.not_blank(reference, "reference")
        return await self._list(
            f"{repository_path(owner, name)}/commits/{reference}/check-runs", request, options
        )

    async def get_all_for_reference_by_repository_id(
        self,
        repository_id: int,
        reference: str,
        request: CheckRunRequest | None = None,
        options: ApiOptions | None = None,
    ) -> CheckRunsResponse:
        ensure.not_blank(reference, "reference")
        return await self._list(
            f"{repository_id_path(repository_id)}/commits/{reference}/check-runs",
            request,
            options,
        )

    async def get_all_for_check_suite(
        self,
        owner: str,
        name: str,
        check_suite_id: int,
        request: CheckRunRequest | None = None,
        options: ApiOptions | None = None,
    ) -> CheckRunsResponse:
        return await self._list(
            f"{_check_suite(repository_path(owner, name), check_suite_id)}/check-runs",
            request,
            options,
        )

    async def get_all_for_check_suite_by_repository_id(
        self,
        repository_id: int,
        check_suite_id: int,
        request: CheckRunRequest | None = None,
        options: ApiOptions | None = None,
    ) -> CheckRunsResponse:
        return await self._list(
            f"{_check_suite(repository_id_path(repository_id), check_suite_id)}/check-runs",
            request,
            options,
        )

    async def get_all_annotations(
        self,
        owner: str,
        name: str,
        check_run_id: int,
        options: ApiOptions | None = None,
    ) -> list[CheckRunAnnotation]:
        return await self._api.get_all(
            f"{_check_run(repository_path(owner, name), check_run_id)}/annotations",
            CheckRunAnnotation,
            accepts=PREVIEW,
            options=options,
        )

    async def get_all_annotations_by_repository_id(
        self,
        repository_id: int,
        check_run_id: int,
        options: ApiOptions | None = None,
    ) -> list[CheckRunAnnotation]:
        return await self._api.get_all(
            f"{_check_run(repository_id_path(repository_id), check_run_id)}/annotations",
            CheckRunAnnotation,
            accepts=PREVIEW,
            options=options,
        )

    async def _create(self, repo: str, new_check_run: NewCheckRun) -> CheckRun:
        ensure.not_none(new_check_run, "new_check_run")
        return await self._api.post(
            f"{repo}/check-runs", new_check_run, model=CheckRun, accepts=PREVIEW
        )

    async def _update(self, check_run: str, check_run_update: CheckRunUpdate) -> CheckRun:
        ensure.not_none(check_run_update, "check_run_update")
        return await self._api.patch(
            check_run, check_run_update, model=CheckRun, accepts=PREVIEW
        )

    async def _list(
        self, path: str, request: CheckRunRequest | None, options: ApiOptions | None
    ) -> CheckRunsResponse:
        pages = await self._api.get_all_pages(
            path,
            CheckRunsResponse,
            params=request.to_params() if request else None,
            accepts=PREVIEW,
            options=options,
        )
        return CheckRunsResponse.combine(pages)


class CheckSuitesClient(ApiClient):
    """Check suites: lookup, creation, re-requests and auto-trigger preferences."""

    async def get(self, owner: str, name: str, check_suite_id: int) -> CheckSuite:
        return await self._api.get(
            _check_suite(repository_path(owner, name), check_suite_id),
            CheckSuite,
            accepts=PREVIEW,
        )

    async def get_by_repository_id(self, repository_id: int, check_suite_id: int) -> CheckSuite:
        return await self._api.get(
            _check_suite(repository_id_path(repository_id), check_suite_id),
            CheckSuite,
            accepts=PREVIEW,
        )

    async def get_all_for_reference(
        self,
        owner: str,
        name: str,
        reference: str,
        request: CheckSuiteRequest | None = None,
        options: ApiOptions | None = None,
    ) -> CheckSuitesResponse:
        return await self._list(repository_path(owner, name), reference, request, options)

    async def get_all_for_reference_by_repository_id(
        self,
        repository_id: int,
        reference: str,
        request: CheckSuiteRequest | None = None,
        options: ApiOptions | None = None,
    ) -> CheckSuitesResponse:
        return await self._list(repository_id_path(repository_id), reference, request, options)

    async def update_preferences(
        self, owner: str, name: str, preferences: CheckSuitePreferences
    ) -> CheckSuitePreferencesResponse:
        """Enable or disable automatic check suite creation per GitHub App."""
        return await self._update_preferences(repository_path(owner, name), preferences)

    async def update_preferences_by_repository_id(
        self, repository_id: int, preferences: CheckSuitePreferences
    ) -> CheckSuitePreferencesResponse:
        return await self._update_preferences(repository_id_path(repository_id), preferences)

    async def create(
        self, owner: str, name: str, new_check_suite: NewCheckSuite
    ) -> CheckSuite:
        return await self._create(repository_path(owner, name), new_check_suite)

    async def create_by_repository_id(
        self, repository_id: int, new_check_suite: NewCheckSuite
    ) -> CheckSuite:
        return await self._create(repository_id_path(repository_id), new_check_suite)

    async def rerequest(self, owner: str, name: str, check_suite_id: int) -> bool:
        """Trigger GitHub to rerequest an existing check suite.

        Returns:
            True once GitHub answers 201 Created

        Raises:
            ApiError: If GitHub answers with any other success status
        """
        return await self._post_created(
            f"{_check_suite(repository_path(owner, name), check_suite_id)}/rerequest"
        )

    async def rerequest_by_repository_id(self, repository_id: int, check_suite_id: int) -> bool:
        return await self._post_created(
            f"{_check_suite(repository_id_path(repository_id), check_suite_id)}/rerequest"
        )

    async def request(
        self, owner: str, name: str, request: CheckSuiteTriggerRequest
    ) -> bool:
        """Manually request a check suite for a commit (expects 201 Created)."""
        ensure.not_none(request, "request")
        return await self._post_created(
            f"{repository_path(owner, name)}/check-suite-requests", request
        )

    async def request_by_repository_id(
        self, repository_id: int, request: CheckSuiteTriggerRequest
    ) -> bool:
        ensure.not_none(request, "request")
        return await self._post_created(
            f"{repository_id_path(repository_id)}/check-suite-requests", request
        )

    async def _list(
        self,
        repo: str,
        reference: str,
        request: CheckSuiteRequest | None,
        options: ApiOptions | None,
    ) -> CheckSuitesResponse:
        ensure.not_blank(reference, "reference")
        pages = await self._api.get_all_pages(
            f"{repo}/commits/{reference}/check-suites",
            CheckSuitesResponse,
            params=request.to_params() if request else None,
            accepts=PREVIEW,
            options=options,
        )
        return CheckSuitesResponse.combine(pages)

    async def _update_preferences(
        self, repo: str, preferences: CheckSuitePreferences
    ) -> CheckSuitePreferencesResponse:
        ensure.not_none(preferences, "preferences")
        return await self._api.patch(
            f"{repo}/check-suites/preferences",
            preferences,
            model=CheckSuitePreferencesResponse,
            accepts=PREVIEW,
        )

    async def _create(self, repo: str, new_check_suite: NewCheckSuite) -> CheckSuite:
        ensure.not_none(new_check_suite, "new_check_suite")
        return await self._api.post(
            f"{repo}/check-suites", new_check_suite, model=CheckSuite, accepts=PREVIEW
        )

    async def _post_created(
        self, path: str, body: CheckSuiteTriggerRequest | None = None
    ) -> bool:
        if body is None:
            response = await self._api.connection.post(path, accepts=PREVIEW)
        else:
            response = await self._api.connection.post(path, body, accepts=PREVIEW)
        self._expect_status(response, 201)
        return True


class ChecksClient(ApiClient):
    """Groups the Checks API clients.

    Attributes:
        run: CheckRunsClient
        suite: CheckSuitesClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.run = CheckRunsClient(api_connection)
        self.suite = CheckSuitesClient(api_connection)
