"""Issues and the clients hanging off them: assignees, comments, labels,
milestones and locking.

Most repository-scoped methods also come as ``*_by_repository_id``.

Reference: https://docs.github.com/en/rest/issues
"""

from urllib.parse import quote

from .. import accept_headers, ensure
from ..http import ApiConnection, ApiOptions
from ..models import (
    AssigneesUpdate,
    Issue,
    IssueComment,
    IssueCommentBody,
    IssueCommentRequest,
    IssueLock,
    IssueRequest,
    IssueUpdate,
    Label,
    LabelsUpdate,
    LabelUpdate,
    LockReason,
    Milestone,
    MilestoneRequest,
    MilestoneUpdate,
    NewIssue,
    NewLabel,
    NewMilestone,
    RepositoryIssueRequest,
    User,
)
from .base import ApiClient, repository_id_path, repository_path


def _params(request) -> dict | None:
    return request.to_params() if request is not None else None


def _issue(repo: str, number: int) -> str:
    ensure.positive(number, "number")
    return f"{repo}/issues/{number}"


def _comment(repo: str, comment_id: int) -> str:
    ensure.positive(comment_id, "comment_id")
    return f"{repo}/issues/comments/{comment_id}"


def _milestone(repo: str, number: int) -> str:
    ensure.positive(number, "number")
    return f"{repo}/milestones/{number}"


def _label(repo: str, label_name: str) -> str:
    ensure.not_blank(label_name, "label_name")
    return f"{repo}/labels/{quote(label_name, safe='')}"


class AssigneesClient(ApiClient):
    """Users who can be assigned to issues, and issue assignment."""

    async def get_all_for_repository(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> list[User]:
        return await self._all(repository_path(owner, name), options)

    async def get_all_for_repository_by_repository_id(
        self, repository_id: int, options: ApiOptions | None = None
    ) -> list[User]:
        return await self._all(repository_id_path(repository_id), options)

    async def check_assignee(self, owner: str, name: str, assignee: str) -> bool:
        """Check whether a user can be assigned issues in a repository.

        Args:
            owner: Repository owner
            name: Repository name
            assignee: Login to check

        Returns:
            True on 204, False on 404

        Raises:
            ApiError: On any other status
        """
        ensure.not_blank(assignee, "assignee")
        return await self._is_true(f"{repository_path(owner, name)}/assignees/{assignee}")

    async def check_assignee_by_repository_id(self, repository_id: int, assignee: str) -> bool:
        ensure.not_blank(assignee, "assignee")
        return await self._is_true(f"{repository_id_path(repository_id)}/assignees/{assignee}")

    async def add_assignees(
        self, owner: str, name: str, number: int, assignees: AssigneesUpdate
    ) -> Issue:
        ensure.not_none(assignees, "assignees")
        return await self._api.post(
            f"{_issue(repository_path(owner, name), number)}/assignees", assignees, model=Issue
        )

    async def remove_assignees(
        self, owner: str, name: str, number: int, assignees: AssigneesUpdate
    ) -> Issue:
        ensure.not_none(assignees, "assignees")
        return await self._api.delete(
            f"{_issue(repository_path(owner, name), number)}/assignees", assignees, model=Issue
        )

    async def _all(self, repo: str, options: ApiOptions | None) -> list[User]:
        return await self._api.get_all(
            f"{repo}/assignees", User, accepts=accept_headers.STABLE_VERSION, options=options
        )


class IssueCommentsClient(ApiClient):
    """Comments on issues and pull requests (the conversation tab)."""

    async def get(self, owner: str, name: str, comment_id: int) -> IssueComment:
        return await self._api.get(_comment(repository_path(owner, name), comment_id), IssueComment)

    async def get_by_repository_id(self, repository_id: int, comment_id: int) -> IssueComment:
        return await self._api.get(
            _comment(repository_id_path(repository_id), comment_id), IssueComment
        )

    async def get_all_for_repository(
        self,
        owner: str,
        name: str,
        request: IssueCommentRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[IssueComment]:
        return await self._all(f"{repository_path(owner, name)}/issues/comments", request, options)

    async def get_all_for_repository_by_repository_id(
        self,
        repository_id: int,
        request: IssueCommentRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[IssueComment]:
        return await self._all(
            f"{repository_id_path(repository_id)}/issues/comments", request, options
        )

    async def get_all_for_issue(
        self,
        owner: str,
        name: str,
        number: int,
        request: IssueCommentRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[IssueComment]:
        return await self._all(
            f"{_issue(repository_path(owner, name), number)}/comments", request, options
        )

    async def get_all_for_issue_by_repository_id(
        self,
        repository_id: int,
        number: int,
        request: IssueCommentRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[IssueComment]:
        return await self._all(
            f"{_issue(repository_id_path(repository_id), number)}/comments", request, options
        )

    async def create(self, owner: str, name: str, number: int, new_comment: str) -> IssueComment:
        return await self._create(_issue(repository_path(owner, name), number), new_comment)

    async def create_by_repository_id(
        self, repository_id: int, number: int, new_comment: str
    ) -> IssueComment:
        return await self._create(_issue(repository_id_path(repository_id), number), new_comment)

    async def update(
        self, owner: str, name: str, comment_id: int, comment_update: str
    ) -> IssueComment:
        return await self._update(
            _comment(repository_path(owner, name), comment_id), comment_update
        )

    async def update_by_repository_id(
        self, repository_id: int, comment_id: int, comment_update: str
    ) -> IssueComment:
        return await self._update(
            _comment(repository_id_path(repository_id), comment_id), comment_update
        )

    async def delete(self, owner: str, name: str, comment_id: int) -> None:
        await self._api.delete(_comment(repository_path(owner, name), comment_id))

    async def delete_by_repository_id(self, repository_id: int, comment_id: int) -> None:
        await self._api.delete(_comment(repository_id_path(repository_id), comment_id))

    async def _all(
        self, path: str, request: IssueCommentRequest | None, options: ApiOptions | None
    ) -> list[IssueComment]:
        return await self._api.get_all(
            path, IssueComment, params=_params(request), options=options
        )

    async def _create(self, issue: str, new_comment: str) -> IssueComment:
        ensure.not_blank(new_comment, "new_comment")
        return await self._api.post(
            f"{issue}/comments", IssueCommentBody(body=new_comment), model=IssueComment
        )

    async def _update(self, comment: str, comment_update: str) -> IssueComment:
        ensure.not_blank(comment_update, "comment_update")
        return await self._api.patch(
            comment, IssueCommentBody(body=comment_update), model=IssueComment
        )


class IssuesLabelsClient(ApiClient):
    """Repository labels and the labels applied to issues."""

    async def get_all_for_issue(
        self, owner: str, name: str, number: int, options: ApiOptions | None = None
    ) -> list[Label]:
        return await self._api.get_all(
            f"{_issue(repository_path(owner, name), number)}/labels", Label, options=options
        )

    async def get_all_for_issue_by_repository_id(
        self, repository_id: int, number: int, options: ApiOptions | None = None
    ) -> list[Label]:
        return await self._api.get_all(
            f"{_issue(repository_id_path(repository_id), number)}/labels", Label, options=options
        )

    async def get_all_for_repository(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> list[Label]:
        return await self._api.get_all(
            f"{repository_path(owner, name)}/labels", Label, options=options
        )

    async def get_all_for_repository_by_repository_id(
        self, repository_id: int, options: ApiOptions | None = None
    ) -> list[Label]:
        return await self._api.get_all(
            f"{repository_id_path(repository_id)}/labels", Label, options=options
        )

    async def get_all_for_milestone(
        self, owner: str, name: str, number: int, options: ApiOptions | None = None
    ) -> list[Label]:
        return await self._api.get_all(
            f"{_milestone(repository_path(owner, name), number)}/labels", Label, options=options
        )

    async def get_all_for_milestone_by_repository_id(
        self, repository_id: int, number: int, options: ApiOptions | None = None
    ) -> list[Label]:
        return await self._api.get_all(
            f"{_milestone(repository_id_path(repository_id), number)}/labels",
            Label,
            options=options,
        )

    async def get(self, owner: str, name: str, label_name: str) -> Label:
        return await self._api.get(_label(repository_path(owner, name), label_name), Label)

    async def get_by_repository_id(self, repository_id: int, label_name: str) -> Label:
        return await self._api.get(_label(repository_id_path(repository_id), label_name), Label)

    async def delete(self, owner: str, name: str, label_name: str) -> None:
        await self._api.delete(_label(repository_path(owner, name), label_name))

    async def delete_by_repository_id(self, repository_id: int, label_name: str) -> None:
        await self._api.delete(_label(repository_id_path(repository_id), label_name))

    async def create(self, owner: str, name: str, new_label: NewLabel) -> Label:
        return await self._create(repository_path(owner, name), new_label)

    async def create_by_repository_id(self, repository_id: int, new_label: NewLabel) -> Label:
        return await self._create(repository_id_path(repository_id), new_label)

    async def update(
        self, owner: str, name: str, label_name: str, label_update: LabelUpdate
    ) -> Label:
        return await self._update(_label(repository_path(owner, name), label_name), label_update)

    async def update_by_repository_id(
        self, repository_id: int, label_name: str, label_update: LabelUpdate
    ) -> Label:
        return await self._update(
            _label(repository_id_path(repository_id), label_name), label_update
        )

    async def add_to_issue(
        self, owner: str, name: str, number: int, labels: list[str]
    ) -> list[Label]:
        """Add labels to an issue, keeping the ones already applied."""
        return await self._add(_issue(repository_path(owner, name), number), labels)

    async def add_to_issue_by_repository_id(
        self, repository_id: int, number: int, labels: list[str]
    ) -> list[Label]:
        return await self._add(_issue(repository_id_path(repository_id), number), labels)

    async def remove_from_issue(
        self, owner: str, name: str, number: int, label_name: str
    ) -> list[Label]:
        """Remove one label; returns the labels left on the issue."""
        return await self._remove(_issue(repository_path(owner, name), number), label_name)

    async def remove_from_issue_by_repository_id(
        self, repository_id: int, number: int, label_name: str
    ) -> list[Label]:
        return await self._remove(_issue(repository_id_path(repository_id), number), label_name)

    async def replace_all_for_issue(
        self, owner: str, name: str, number: int, labels: list[str]
    ) -> list[Label]:
        """Replace every label on an issue. An empty list clears them."""
        return await self._replace(_issue(repository_path(owner, name), number), labels)

    async def replace_all_for_issue_by_repository_id(
        self, repository_id: int, number: int, labels: list[str]
    ) -> list[Label]:
        return await self._replace(_issue(repository_id_path(repository_id), number), labels)

    async def remove_all_from_issue(self, owner: str, name: str, number: int) -> None:
        await self._api.delete(f"{_issue(repository_path(owner, name), number)}/labels")

    async def remove_all_from_issue_by_repository_id(
        self, repository_id: int, number: int
    ) -> None:
        await self._api.delete(f"{_issue(repository_id_path(repository_id), number)}/labels")

    async def _create(self, repo: str, new_label: NewLabel) -> Label:
        ensure.not_none(new_label, "new_label")
        return await self._api.post(f"{repo}/labels", new_label, model=Label)

    async def _update(self, label: str, label_update: LabelUpdate) -> Label:
        ensure.not_none(label_update, "label_update")
        return await self._api.patch(label, label_update, model=Label)

    async def _add(self, issue: str, labels: list[str]) -> list[Label]:
        ensure.not_empty(labels, "labels")
        body = await self._api.post(f"{issue}/labels", LabelsUpdate(labels=labels))
        return [Label.model_validate(item) for item in body or []]

    async def _remove(self, issue: str, label_name: str) -> list[Label]:
        ensure.not_blank(label_name, "label_name")
        body = await self._api.delete(f"{issue}/labels/{quote(label_name, safe='')}")
        return [Label.model_validate(item) for item in body or []]

    async def _replace(self, issue: str, labels: list[str]) -> list[Label]:
        ensure.not_none(labels, "labels")
        body = await self._api.put(f"{issue}/labels", LabelsUpdate(labels=labels))
        return [Label.model_validate(item) for item in body or []]


class MilestonesClient(ApiClient):
    async def get(self, owner: str, name: str, number: int) -> Milestone:
        return await self._api.get(_milestone(repository_path(owner, name), number), Milestone)

    async def get_by_repository_id(self, repository_id: int, number: int) -> Milestone:
        return await self._api.get(
            _milestone(repository_id_path(repository_id), number), Milestone
        )

    async def get_all_for_repository(
        self,
        owner: str,
        name: str,
        request: MilestoneRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Milestone]:
        return await self._all(repository_path(owner, name), request, options)

    async def get_all_for_repository_by_repository_id(
        self,
        repository_id: int,
        request: MilestoneRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Milestone]:
        return await self._all(repository_id_path(repository_id), request, options)

    async def create(self, owner: str, name: str, new_milestone: NewMilestone) -> Milestone:
        return await self._create(repository_path(owner, name), new_milestone)

    async def create_by_repository_id(
        self, repository_id: int, new_milestone: NewMilestone
    ) -> Milestone:
        return await self._create(repository_id_path(repository_id), new_milestone)

    async def update(
        self, owner: str, name: str, number: int, milestone_update: MilestoneUpdate
    ) -> Milestone:
        return await self._update(
            _milestone(repository_path(owner, name), number), milestone_update
        )

    async def update_by_repository_id(
        self, repository_id: int, number: int, milestone_update: MilestoneUpdate
    ) -> Milestone:
        return await self._update(
            _milestone(repository_id_path(repository_id), number), milestone_update
        )

    async def delete(self, owner: str, name: str, number: int) -> None:
        await self._api.delete(_milestone(repository_path(owner, name), number))

    async def delete_by_repository_id(self, repository_id: int, number: int) -> None:
        await self._api.delete(_milestone(repository_id_path(repository_id), number))

    async def _all(
        self, repo: str, request: MilestoneRequest | None, options: ApiOptions | None
    ) -> list[Milestone]:
        return await self._api.get_all(
            f"{repo}/milestones", Milestone, params=_params(request), options=options
        )

    async def _create(self, repo: str, new_milestone: NewMilestone) -> Milestone:
        ensure.not_none(new_milestone, "new_milestone")
        return await self._api.post(f"{repo}/milestones", new_milestone, model=Milestone)

    async def _update(self, milestone: str, milestone_update: MilestoneUpdate) -> Milestone:
        ensure.not_none(milestone_update, "milestone_update")
        return await self._api.patch(milestone, milestone_update, model=Milestone)


class LockUnlockClient(ApiClient):
    """Lock and unlock issue and pull request conversations."""

    async def lock(
        self,
        owner: str,
        name: str,
        number: int,
        lock_reason: LockReason | None = None,
    ) -> None:
        body = IssueLock(lock_reason=lock_reason) if lock_reason is not None else None
        await self._api.put(f"{_issue(repository_path(owner, name), number)}/lock", body)

    async def unlock(self, owner: str, name: str, number: int) -> None:
        await self._api.delete(f"{_issue(repository_path(owner, name), number)}/lock")


class IssuesClient(ApiClient):
    """Issues, plus the sub-clients for everything attached to them.

    Attributes:
        assignee: AssigneesClient
        comment: IssueCommentsClient
        labels: IssuesLabelsClient
        milestone: MilestonesClient
        lock_unlock: LockUnlockClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.assignee = AssigneesClient(api_connection)
        self.comment = IssueCommentsClient(api_connection)
        self.labels = IssuesLabelsClient(api_connection)
        self.milestone = MilestonesClient(api_connection)
        self.lock_unlock = LockUnlockClient(api_connection)

    async def get(self, owner: str, name: str, number: int) -> Issue:
        """Get a single issue. Pull requests are issues too; check ``pull_request``."""
        return await self._api.get(_issue(repository_path(owner, name), number), Issue)

    async def get_by_repository_id(self, repository_id: int, number: int) -> Issue:
        return await self._api.get(_issue(repository_id_path(repository_id), number), Issue)

    async def get_all_for_current(
        self,
        request: IssueRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Issue]:
        """Issues assigned to the authenticated user across every visible repository."""
        return await self._api.get_all(
            "/issues", Issue, params=_params(request), options=options
        )

    async def get_all_for_owned_and_member_repositories(
        self,
        request: IssueRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Issue]:
        return await self._api.get_all(
            "/user/issues", Issue, params=_params(request), options=options
        )

    async def get_all_for_organization(
        self,
        organization: str,
        request: IssueRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Issue]:
        ensure.not_blank(organization, "organization")
        return await self._api.get_all(
            f"/orgs/{organization}/issues", Issue, params=_params(request), options=options
        )

    async def get_all_for_repository(
        self,
        owner: str,
        name: str,
        request: RepositoryIssueRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Issue]:
        """List issues in a repository.

        Args:
            owner: Repository owner
            name: Repository name
            request: Filters (state, labels, milestone, assignee, since, ...)
            options: Pagination options

        Returns:
            Issues from all pages
        """
        return await self._api.get_all(
            f"{repository_path(owner, name)}/issues",
            Issue,
            params=_params(request),
            options=options,
        )

    async def get_all_for_repository_by_repository_id(
        self,
        repository_id: int,
        request: RepositoryIssueRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Issue]:
        return await self._api.get_all(
            f"{repository_id_path(repository_id)}/issues",
            Issue,
            params=_params(request),
            options=options,
        )

    async def create(self, owner: str, name: str, new_issue: NewIssue) -> Issue:
        return await self._create(repository_path(owner, name), new_issue)

    async def create_by_repository_id(self, repository_id: int, new_issue: NewIssue) -> Issue:
        return await self._create(repository_id_path(repository_id), new_issue)

    async def update(
        self, owner: str, name: str, number: int, issue_update: IssueUpdate
    ) -> Issue:
        return await self._update(_issue(repository_path(owner, name), number), issue_update)

    async def update_by_repository_id(
        self, repository_id: int, number: int, issue_update: IssueUpdate
    ) -> Issue:
        return await self._update(
            _issue(repository_id_path(repository_id), number), issue_update
        )

    async def _create(self, repo: str, new_issue: NewIssue) -> Issue:
        ensure.not_none(new_issue, "new_issue")
        return await self._api.post(f"{repo}/issues", new_issue, model=Issue)

    async def _update(self, issue: str, issue_update: IssueUpdate) -> Issue:
        ensure.not_none(issue_update, "issue_update")
        return await self._api.patch(issue, issue_update, model=Issue)
