"""GitHub Actions workflows, workflow runs and workflow jobs.

Every repository-scoped method has a ``*_by_repository_id`` twin addressing
the repository as ``/repositories/{id}``.

Reference: https://docs.github.com/en/rest/actions/workflows
           https://docs.github.com/en/rest/actions/workflow-runs
           https://docs.github.com/en/rest/actions/workflow-jobs
"""

from __future__ import annotations


from .. import ensure
from ..http import ApiConnection, ApiOptions
from ..models import (
    CreateWorkflowDispatch,
    Deployment,
    EnvironmentApprovals,
    PendingDeploymentReview,
    Workflow,
    WorkflowJob,
    WorkflowJobsResponse,
    WorkflowRun,
    WorkflowRunJobsRequest,
    WorkflowRunsRequest,
    WorkflowRunsResponse,
    WorkflowRunUsage,
    WorkflowsResponse,
    WorkflowUsage,
)
from .base import ApiClient, repository_id_path, repository_path

WorkflowId = int | str


def _actions(owner: str, name: str) -> str:
    return f"{repository_path(owner, name)}/actions"


def _actions_by_id(repository_id: int) -> str:
    return f"{repository_id_path(repository_id)}/actions"


def _run(actions: str, run_id: int) -> str:
    ensure.positive(run_id, "run_id")
    return f"{actions}/runs/{run_id}"


def _job(actions: str, job_id: int) -> str:
    ensure.positive(job_id, "job_id")
    return f"{actions}/jobs/{job_id}"


def _workflow(actions: str, workflow_id: WorkflowId) -> str:
    return f"{actions}/workflows/{ensure.workflow_ref(workflow_id)}"


class WorkflowJobsClient(ApiClient):
    """Jobs belonging to workflow runs."""

    async def get(self, owner: str, name: str, job_id: int) -> WorkflowJob:
        return await self._api.get(_job(_actions(owner, name), job_id), WorkflowJob)

    async def get_by_repository_id(self, repository_id: int, job_id: int) -> WorkflowJob:
        return await self._api.get(_job(_actions_by_id(repository_id), job_id), WorkflowJob)

    async def get_logs(self, owner: str, name: str, job_id: int) -> bytes:
        """Download the plain-text log of a job.

        GitHub answers with a 302 to a short-lived URL; the redirect is followed.
        """
        return await self._api.get_raw(f"{_job(_actions(owner, name), job_id)}/logs")

    async def get_logs_by_repository_id(self, repository_id: int, job_id: int) -> bytes:
        return await self._api.get_raw(f"{_job(_actions_by_id(repository_id), job_id)}/logs")

    async def rerun(self, owner: str, name: str, job_id: int) -> None:
        await self._api.post(f"{_job(_actions(owner, name), job_id)}/rerun")

    async def rerun_by_repository_id(self, repository_id: int, job_id: int) -> None:
        await self._api.post(f"{_job(_actions_by_id(repository_id), job_id)}/rerun")

    async def list(
        self,
        owner: str,
        name: str,
        run_id: int,
        request: WorkflowRunJobsRequest | None = None,
        options: ApiOptions | None = None,
    ) -> WorkflowJobsResponse:
        """List jobs for a workflow run.

        Args:
            owner: Repository owner
            name: Repository name
            run_id: Workflow run id
            request: Optional ``filter`` (latest attempt or all attempts)
            options: Pagination options

        Returns:
            WorkflowJobsResponse folded across pages
        """
        return await self._list(f"{_run(_actions(owner, name), run_id)}/jobs", request, options)

    async def list_by_repository_id(
        self,
        repository_id: int,
        run_id: int,
        request: WorkflowRunJobsRequest | None = None,
        options: ApiOptions | None = None,
    ) -> WorkflowJobsResponse:
        return await self._list(
            f"{_run(_actions_by_id(repository_id), run_id)}/jobs", request, options
        )

    async def list_for_attempt(
        self,
        owner: str,
        name: str,
        run_id: int,
        attempt_number: int,
        options: ApiOptions | None = None,
    ) -> WorkflowJobsResponse:
        ensure.positive(attempt_number, "attempt_number")
        return await self._list(
            f"{_run(_actions(owner, name), run_id)}/attempts/{attempt_number}/jobs",
            None,
            options,
        )

    async def list_for_attempt_by_repository_id(
        self,
        repository_id: int,
        run_id: int,
        attempt_number: int,
        options: ApiOptions | None = None,
    ) -> WorkflowJobsResponse:
        ensure.positive(attempt_number, "attempt_number")
        return await self._list(
            f"{_run(_actions_by_id(repository_id), run_id)}/attempts/{attempt_number}/jobs",
            None,
            options,
        )

    async def _list(
        self,
        path: str,
        request: WorkflowRunJobsRequest | None,
        options: ApiOptions | None,
    ) -> WorkflowJobsResponse:
        pages = await self._api.get_all_pages(
            path,
            WorkflowJobsResponse,
            params=request.to_params() if request else None,
            options=options,
        )
        return WorkflowJobsResponse.combine(pages)


class WorkflowRunsClient(ApiClient):
    """Workflow runs: listing, inspection, re-runs, logs and deployment reviews."""

    async def list(
        self,
        owner: str,
        name: str,
        request: WorkflowRunsRequest | None = None,
        options: ApiOptions | None = None,
    ) -> WorkflowRunsResponse:
        """List workflow runs for a repository.

        Args:
            owner: Repository owner
            name: Repository name
            request: Filters (actor, branch, event, status, created, ...)
            options: Pagination options

        Returns:
            WorkflowRunsResponse folded across pages
        """
        return await self._list(f"{_actions(owner, name)}/runs", request, options)

    async def list_by_repository_id(
        self,
        repository_id: int,
        request: WorkflowRunsRequest | None = None,
        options: ApiOptions | None = None,
    ) -> WorkflowRunsResponse:
        return await self._list(f"{_actions_by_id(repository_id)}/runs", request, options)

    async def list_by_workflow(
        self,
        owner: str,
        name: str,
        workflow_id: WorkflowId,
        request: WorkflowRunsRequest | None = None,
        options: ApiOptions | None = None,
    ) -> WorkflowRunsResponse:
        """List runs of one workflow, addressed by id or file name (``ci.yml``)."""
        return await self._list(
            f"{_workflow(_actions(owner, name), workflow_id)}/runs", request, options
        )

    async def list_by_workflow_by_repository_id(
        self,
        repository_id: int,
        workflow_id: WorkflowId,
        request: WorkflowRunsRequest | None = None,
        options: ApiOptions | None = None,
    ) -> WorkflowRunsResponse:
        return await self._list(
            f"{_workflow(_actions_by_id(repository_id), workflow_id)}/runs", request, options
        )

    async def get(self, owner: str, name: str, run_id: int) -> WorkflowRun:
        return await self._api.get(_run(_actions(owner, name), run_id), WorkflowRun)

    async def get_by_repository_id(self, repository_id: int, run_id: int) -> WorkflowRun:
        return await self._api.get(_run(_actions_by_id(repository_id), run_id), WorkflowRun)

    async def delete(self, owner: str, name: str, run_id: int) -> None:
        await self._api.delete(_run(_actions(owner, name), run_id))

    async def delete_by_repository_id(self, repository_id: int, run_id: int) -> None:
        await self._api.delete(_run(_actions_by_id(repository_id), run_id))

    async def get_review_history(
        self, owner: str, name: str, run_id: int, options: ApiOptions | None = None
    ) -> list[EnvironmentApprovals]:
        """Deployment approvals recorded for a run."""
        return await self._api.get_all(
            f"{_run(_actions(owner, name), run_id)}/approvals",
            EnvironmentApprovals,
            options=options,
        )

    async def get_review_history_by_repository_id(
        self, repository_id: int, run_id: int, options: ApiOptions | None = None
    ) -> list[EnvironmentApprovals]:
        return await self._api.get_all(
            f"{_run(_actions_by_id(repository_id), run_id)}/approvals",
            EnvironmentApprovals,
            options=options,
        )

    async def approve(self, owner: str, name: str, run_id: int) -> None:
        """Approve a run from a first-time contributor's fork pull request."""
        await self._api.post(f"{_run(_actions(owner, name), run_id)}/approve")

    async def approve_by_repository_id(self, repository_id: int, run_id: int) -> None:
        await self._api.post(f"{_run(_actions_by_id(repository_id), run_id)}/approve")

    async def get_attempt(
        self, owner: str, name: str, run_id: int, attempt_number: int
    ) -> WorkflowRun:
        ensure.positive(attempt_number, "attempt_number")
        return await self._api.get(
            f"{_run(_actions(owner, name), run_id)}/attempts/{attempt_number}", WorkflowRun
        )

    async def get_attempt_by_repository_id(
        self, repository_id: int, run_id: int, attempt_number: int
    ) -> WorkflowRun:
        ensure.positive(attempt_number, "attempt_number")
        return await self._api.get(
            f"{_run(_actions_by_id(repository_id), run_id)}/attempts/{attempt_number}",
            WorkflowRun,
        )

    async def get_attempt_logs(
        self, owner: str, name: str, run_id: int, attempt_number: int
    ) -> bytes:
        """Download the log archive (zip) of one run attempt."""
        ensure.positive(attempt_number, "attempt_number")
        return await self._api.get_raw(
            f"{_run(_actions(owner, name), run_id)}/attempts/{attempt_number}/logs"
        )

    async def get_attempt_logs_by_repository_id(
        self, repository_id: int, run_id: int, attempt_number: int
    ) -> bytes:
        ensure.positive(attempt_number, "attempt_number")
        return await self._api.get_raw(
            f"{_run(_actions_by_id(repository_id), run_id)}/attempts/{attempt_number}/logs"
        )

    async def cancel(self, owner: str, name: str, run_id: int) -> bool:
        """Cancel a run.

        Returns:
            True once GitHub answers 202 Accepted

        Raises:
            ApiError: If GitHub answers with any other success status
        """
        return await self._post_expecting(f"{_run(_actions(owner, name), run_id)}/cancel", 202)

    async def cancel_by_repository_id(self, repository_id: int, run_id: int) -> bool:
        return await self._post_expecting(
            f"{_run(_actions_by_id(repository_id), run_id)}/cancel", 202
        )

    async def get_logs(self, owner: str, name: str, run_id: int) -> bytes:
        """Download the log archive (zip) of a run."""
        return await self._api.get_raw(f"{_run(_actions(owner, name), run_id)}/logs")

    async def get_logs_by_repository_id(self, repository_id: int, run_id: int) -> bytes:
        return await self._api.get_raw(f"{_run(_actions_by_id(repository_id), run_id)}/logs")

    async def get_logs_url(self, owner: str, name: str, run_id: int) -> str:
        """Short-lived download URL of a run's log archive.

        The 302 GitHub answers with is not followed; its ``Location`` is returned.

        Raises:
            ApiError: If GitHub answers with anything but 302
        """
        return await self._redirect_location(f"{_run(_actions(owner, name), run_id)}/logs")

    async def get_logs_url_by_repository_id(self, repository_id: int, run_id: int) -> str:
        return await self._redirect_location(
            f"{_run(_actions_by_id(repository_id), run_id)}/logs"
        )

    async def delete_logs(self, owner: str, name: str, run_id: int) -> None:
        await self._api.delete(f"{_run(_actions(owner, name), run_id)}/logs")

    async def delete_logs_by_repository_id(self, repository_id: int, run_id: int) -> None:
        await self._api.delete(f"{_run(_actions_by_id(repository_id), run_id)}/logs")

    async def review_pending_deployments(
        self, owner: str, name: str, run_id: int, review: PendingDeploymentReview
    ) -> list[Deployment]:
        """Approve or reject deployments waiting on environment protection rules.

        Args:
            owner: Repository owner
            name: Repository name
            run_id: Workflow run id
            review: Environment ids, approved/rejected state and a comment

        Returns:
            Deployments created or rejected by the review
        """
        return await self._review(_run(_actions(owner, name), run_id), review)

    async def review_pending_deployments_by_repository_id(
        self, repository_id: int, run_id: int, review: PendingDeploymentReview
    ) -> list[Deployment]:
        return await self._review(_run(_actions_by_id(repository_id), run_id), review)

    async def rerun(self, owner: str, name: str, run_id: int) -> bool:
        """Re-run every job of a run.

        Returns:
            True once GitHub answers 201 Created

        Raises:
            ApiError: If GitHub answers with any other success status
        """
        return await self._post_expecting(f"{_run(_actions(owner, name), run_id)}/rerun", 201)

    async def rerun_by_repository_id(self, repository_id: int, run_id: int) -> bool:
        return await self._post_expecting(
            f"{_run(_actions_by_id(repository_id), run_id)}/rerun", 201
        )

    async def rerun_failed_jobs(self, owner: str, name: str, run_id: int) -> None:
        await self._api.post(f"{_run(_actions(owner, name), run_id)}/rerun-failed-jobs")

    async def rerun_failed_jobs_by_repository_id(self, repository_id: int, run_id: int) -> None:
        await self._api.post(f"{_run(_actions_by_id(repository_id), run_id)}/rerun-failed-jobs")

    async def get_usage(self, owner: str, name: str, run_id: int) -> WorkflowRunUsage:
        """Billable time and total duration of a run."""
        return await self._api.get(
            f"{_run(_actions(owner, name), run_id)}/timing", WorkflowRunUsage
        )

    async def get_usage_by_repository_id(
        self, repository_id: int, run_id: int
    ) -> WorkflowRunUsage:
        return await self._api.get(
            f"{_run(_actions_by_id(repository_id), run_id)}/timing", WorkflowRunUsage
        )

    async def _list(
        self,
        path: str,
        request: WorkflowRunsRequest | None,
        options: ApiOptions | None,
    ) -> WorkflowRunsResponse:
        pages = await self._api.get_all_pages(
            path,
            WorkflowRunsResponse,
            params=request.to_params() if request else None,
            options=options,
        )
        return WorkflowRunsResponse.combine(pages)

    async def _review(self, run: str, review: PendingDeploymentReview) -> list[Deployment]:
        ensure.not_none(review, "review")
        body = await self._api.post(f"{run}/pending_deployments", review)
        return [Deployment.model_validate(item) for item in body or []]

    async def _post_expecting(self, path: str, status_code: int) -> bool:
        response = await self._api.connection.post(path)
        self._expect_status(response, status_code)
        return True

    async def _redirect_location(self, path: str) -> str:
        response = await self._api.connection.get(path, follow_redirects=False)
        self._expect_status(response, 302)
        return response.headers["Location"]


class WorkflowsClient(ApiClient):
    """Repository workflows.

    ``workflow_id`` is either the numeric id or the workflow file name.

    Attributes:
        jobs: WorkflowJobsClient
        runs: WorkflowRunsClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.jobs = WorkflowJobsClient(api_connection)
        self.runs = WorkflowRunsClient(api_connection)

    async def list(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> WorkflowsResponse:
        return await self._list(_actions(owner, name), options)

    async def list_by_repository_id(
        self, repository_id: int, options: ApiOptions | None = None
    ) -> WorkflowsResponse:
        return await self._list(_actions_by_id(repository_id), options)

    async def get(self, owner: str, name: str, workflow_id: WorkflowId) -> Workflow:
        return await self._api.get(_workflow(_actions(owner, name), workflow_id), Workflow)

    async def get_by_repository_id(self, repository_id: int, workflow_id: WorkflowId) -> Workflow:
        return await self._api.get(
            _workflow(_actions_by_id(repository_id), workflow_id), Workflow
        )

    async def get_usage(self, owner: str, name: str, workflow_id: WorkflowId) -> WorkflowUsage:
        return await self._api.get(
            f"{_workflow(_actions(owner, name), workflow_id)}/timing", WorkflowUsage
        )

    async def get_usage_by_repository_id(
        self, repository_id: int, workflow_id: WorkflowId
    ) -> WorkflowUsage:
        return await self._api.get(
            f"{_workflow(_actions_by_id(repository_id), workflow_id)}/timing", WorkflowUsage
        )

    async def create_dispatch(
        self,
        owner: str,
        name: str,
        workflow_id: WorkflowId,
        dispatch: CreateWorkflowDispatch,
    ) -> None:
        """Trigger a ``workflow_dispatch`` event.

        Args:
            owner: Repository owner
            name: Repository name
            workflow_id: Workflow id or file name
            dispatch: Git ref plus optional workflow inputs

        Raises:
            ValueError: If an argument is missing
            ApiValidationError: If the workflow has no workflow_dispatch trigger
        """
        workflow = _workflow(_actions(owner, name), workflow_id)
        ensure.not_none(dispatch, "dispatch")
        await self._api.post(f"{workflow}/dispatches", dispatch)

    async def create_dispatch_by_repository_id(
        self,
        repository_id: int,
        workflow_id: WorkflowId,
        dispatch: CreateWorkflowDispatch,
    ) -> None:
        workflow = _workflow(_actions_by_id(repository_id), workflow_id)
        ensure.not_none(dispatch, "dispatch")
        await self._api.post(f"{workflow}/dispatches", dispatch)

    async def disable(self, owner: str, name: str, workflow_id: WorkflowId) -> None:
        await self._api.put(f"{_workflow(_actions(owner, name), workflow_id)}/disable")

    async def disable_by_repository_id(self, repository_id: int, workflow_id: WorkflowId) -> None:
        await self._api.put(f"{_workflow(_actions_by_id(repository_id), workflow_id)}/disable")

    async def enable(self, owner: str, name: str, workflow_id: WorkflowId) -> None:
        await self._api.put(f"{_workflow(_actions(owner, name), workflow_id)}/enable")

    async def enable_by_repository_id(self, repository_id: int, workflow_id: WorkflowId) -> None:
        await self._api.put(f"{_workflow(_actions_by_id(repository_id), workflow_id)}/enable")

    async def _list(self, actions: str, options: ApiOptions | None) -> WorkflowsResponse:
        pages = await self._api.get_all_pages(
            f"{actions}/workflows", WorkflowsResponse, options=options
        )
        return WorkflowsResponse.combine(pages)
