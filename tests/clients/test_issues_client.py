"""Unit tests for issues, assignees, comments, labels, milestones and locking."""

import pytest

from hubkit.clients import (
    AssigneesClient,
    IssueCommentsClient,
    IssuesClient,
    IssuesLabelsClient,
    LockUnlockClient,
    MilestonesClient,
)
from hubkit.exceptions import ApiError, NotFoundError
from hubkit.http import ApiOptions
from hubkit.models import (
    AssigneesUpdate,
    Issue,
    IssueComment,
    IssueCommentBody,
    IssueCommentRequest,
    IssueFilter,
    IssueLock,
    IssueRequest,
    IssueUpdate,
    ItemState,
    ItemStateFilter,
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

REPO = "/repos/octocat/hello"
STABLE = "application/vnd.github.v3+json"


@pytest.fixture
def issues(api):
    return IssuesClient(api)


# =============================================================================
# Issues
# =============================================================================


class TestIssues:
    def test_sub_clients(self, issues):
        assert isinstance(issues.assignee, AssigneesClient)
        assert isinstance(issues.comment, IssueCommentsClient)
        assert isinstance(issues.labels, IssuesLabelsClient)
        assert isinstance(issues.milestone, MilestonesClient)
        assert isinstance(issues.lock_unlock, LockUnlockClient)

    @pytest.mark.asyncio
    async def test_get(self, api, issues):
        api.get.return_value = Issue(id=1, number=1347, title="Found a bug")

        issue = await issues.get("octocat", "hello", 1347)

        api.get.assert_awaited_once_with(f"{REPO}/issues/1347", Issue)
        assert issue.title == "Found a bug"

    @pytest.mark.asyncio
    async def test_get_all_for_current(self, api, issues):
        request = IssueRequest(filter=IssueFilter.ALL, state=ItemStateFilter.OPEN)

        await issues.get_all_for_current(request)

        api.get_all.assert_awaited_once_with(
            "/issues", Issue, params={"filter": "all", "state": "open"}, options=None
        )

    @pytest.mark.asyncio
    async def test_get_all_for_owned_and_member_repositories(self, api, issues):
        await issues.get_all_for_owned_and_member_repositories()

        api.get_all.assert_awaited_once_with("/user/issues", Issue, params=None, options=None)

    @pytest.mark.asyncio
    async def test_get_all_for_organization(self, api, issues):
        options = ApiOptions(page_size=100)

        await issues.get_all_for_organization("github", options=options)

        api.get_all.assert_awaited_once_with(
            "/orgs/github/issues", Issue, params=None, options=options
        )

    @pytest.mark.asyncio
    async def test_get_all_for_repository(self, api, issues):
        request = RepositoryIssueRequest(labels=["bug", "p1"], assignee="none")

        await issues.get_all_for_repository("octocat", "hello", request)

        api.get_all.assert_awaited_once_with(
            f"{REPO}/issues",
            Issue,
            params={"labels": "bug,p1", "assignee": "none"},
            options=None,
        )

    @pytest.mark.asyncio
    async def test_create_and_update(self, api, issues):
        new_issue = NewIssue(title="Found a bug", body="It crashes")
        update = IssueUpdate(state=ItemState.CLOSED)

        await issues.create("octocat", "hello", new_issue)
        await issues.update("octocat", "hello", 1347, update)

        api.post.assert_awaited_once_with(f"{REPO}/issues", new_issue, model=Issue)
        api.patch.assert_awaited_once_with(f"{REPO}/issues/1347", update, model=Issue)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner,name", [("", "hello"), ("octocat", ""), (None, "hello")])
    async def test_rejects_blank_repository(self, api, issues, owner, name):
        with pytest.raises(ValueError):
            await issues.get(owner, name, 1)

        api.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_requires_body(self, api, issues):
        with pytest.raises(ValueError, match="new_issue"):
            await issues.create("octocat", "hello", None)


# =============================================================================
# Assignees
# =============================================================================


class TestAssignees:
    @pytest.mark.asyncio
    async def test_get_all_for_repository_uses_stable_media_type(self, api, issues):
        api.get_all.return_value = [User(login="octocat", id=1)]

        users = await issues.assignee.get_all_for_repository("octocat", "hello")

        api.get_all.assert_awaited_once_with(
            f"{REPO}/assignees", User, accepts=STABLE, options=None
        )
        assert users[0].login == "octocat"

    @pytest.mark.asyncio
    async def test_check_assignee_true_on_204(self, api, issues, status_response):
        api.connection.get.return_value = status_response(204)

        assert await issues.assignee.check_assignee("octocat", "hello", "hubot") is True

        api.connection.get.assert_awaited_once_with(f"{REPO}/assignees/hubot", accepts=None)

    @pytest.mark.asyncio
    async def test_check_assignee_false_on_404(self, api, issues):
        api.connection.get.side_effect = NotFoundError(status_code=404)

        assert await issues.assignee.check_assignee("octocat", "hello", "hubot") is False

    @pytest.mark.asyncio
    async def test_check_assignee_raises_on_other_status(self, api, issues, status_response):
        api.connection.get.return_value = status_response(200)

        with pytest.raises(ApiError, match="Expected a 204 or a 404"):
            await issues.assignee.check_assignee("octocat", "hello", "hubot")

    @pytest.mark.asyncio
    async def test_add_and_remove_assignees(self, api, issues):
        assignees = AssigneesUpdate(assignees=["hubot", "other_user"])

        await issues.assignee.add_assignees("octocat", "hello", 1347, assignees)
        await issues.assignee.remove_assignees("octocat", "hello", 1347, assignees)

        api.post.assert_awaited_once_with(
            f"{REPO}/issues/1347/assignees", assignees, model=Issue
        )
        api.delete.assert_awaited_once_with(
            f"{REPO}/issues/1347/assignees", assignees, model=Issue
        )


# =============================================================================
# Comments
# =============================================================================


class TestIssueComments:
    @pytest.mark.asyncio
    async def test_get(self, api, issues):
        await issues.comment.get("octocat", "hello", 1)

        api.get.assert_awaited_once_with(f"{REPO}/issues/comments/1", IssueComment)

    @pytest.mark.asyncio
    async def test_get_all(self, api, issues):
        await issues.comment.get_all_for_repository("octocat", "hello")
        await issues.comment.get_all_for_issue(
            "octocat", "hello", 1347, IssueCommentRequest(), ApiOptions(page_count=1)
        )

        first, second = api.get_all.await_args_list
        assert first.args == (f"{REPO}/issues/comments", IssueComment)
        assert second.args == (f"{REPO}/issues/1347/comments", IssueComment)
        assert second.kwargs["params"] == {}

    @pytest.mark.asyncio
    async def test_create_wraps_body(self, api, issues):
        await issues.comment.create("octocat", "hello", 1347, "Me too")

        api.post.assert_awaited_once_with(
            f"{REPO}/issues/1347/comments", IssueCommentBody(body="Me too"), model=IssueComment
        )

    @pytest.mark.asyncio
    async def test_update_wraps_body(self, api, issues):
        await issues.comment.update("octocat", "hello", 1, "Edited")

        api.patch.assert_awaited_once_with(
            f"{REPO}/issues/comments/1", IssueCommentBody(body="Edited"), model=IssueComment
        )

    @pytest.mark.asyncio
    async def test_create_rejects_blank_comment(self, api, issues):
        with pytest.raises(ValueError, match="new_comment"):
            await issues.comment.create("octocat", "hello", 1347, " ")

    @pytest.mark.asyncio
    async def test_delete(self, api, issues):
        await issues.comment.delete("octocat", "hello", 1)

        api.delete.assert_awaited_once_with(f"{REPO}/issues/comments/1")


# =============================================================================
# Labels
# =============================================================================


class TestLabels:
    @pytest.mark.asyncio
    async def test_listings(self, api, issues):
        await issues.labels.get_all_for_issue("octocat", "hello", 1347)
        await issues.labels.get_all_for_repository("octocat", "hello")
        await issues.labels.get_all_for_milestone("octocat", "hello", 2)

        assert [call.args[0] for call in api.get_all.await_args_list] == [
            f"{REPO}/issues/1347/labels",
            f"{REPO}/labels",
            f"{REPO}/milestones/2/labels",
        ]

    @pytest.mark.asyncio
    async def test_label_names_are_url_encoded(self, api, issues):
        await issues.labels.get("octocat", "hello", "good first issue")
        await issues.labels.delete("octocat", "hello", "help/wanted")

        api.get.assert_awaited_once_with(f"{REPO}/labels/good%20first%20issue", Label)
        api.delete.assert_awaited_once_with(f"{REPO}/labels/help%2Fwanted")

    @pytest.mark.asyncio
    async def test_create_and_update(self, api, issues):
        new_label = NewLabel(name="bug", color="f29513")
        update = LabelUpdate(new_name="defect")

        await issues.labels.create("octocat", "hello", new_label)
        await issues.labels.update("octocat", "hello", "bug", update)

        api.post.assert_awaited_once_with(f"{REPO}/labels", new_label, model=Label)
        api.patch.assert_awaited_once_with(f"{REPO}/labels/bug", update, model=Label)

    @pytest.mark.asyncio
    async def test_add_to_issue(self, api, issues):
        api.post.return_value = [{"id": 1, "name": "bug"}, {"id": 2, "name": "ui"}]

        labels = await issues.labels.add_to_issue("octocat", "hello", 1347, ["ui"])

        api.post.assert_awaited_once_with(
            f"{REPO}/issues/1347/labels", LabelsUpdate(labels=["ui"])
        )
        assert [label.name for label in labels] == ["bug", "ui"]

    @pytest.mark.asyncio
    async def test_add_to_issue_requires_labels(self, api, issues):
        with pytest.raises(ValueError, match="labels"):
            await issues.labels.add_to_issue("octocat", "hello", 1347, [])

    @pytest.mark.asyncio
    async def test_remove_from_issue_returns_remaining(self, api, issues):
        api.delete.return_value = [{"id": 1, "name": "bug"}]

        labels = await issues.labels.remove_from_issue("octocat", "hello", 1347, "ui")

        api.delete.assert_awaited_once_with(f"{REPO}/issues/1347/labels/ui")
        assert [label.name for label in labels] == ["bug"]

    @pytest.mark.asyncio
    async def test_replace_all_accepts_empty_list(self, api, issues):
        api.put.return_value = []

        labels = await issues.labels.replace_all_for_issue("octocat", "hello", 1347, [])

        api.put.assert_awaited_once_with(
            f"{REPO}/issues/1347/labels", LabelsUpdate(labels=[])
        )
        assert labels == []

    @pytest.mark.asyncio
    async def test_remove_all(self, api, issues):
        await issues.labels.remove_all_from_issue("octocat", "hello", 1347)

        api.delete.assert_awaited_once_with(f"{REPO}/issues/1347/labels")


# =============================================================================
# Milestones
# =============================================================================


class TestMilestones:
    @pytest.mark.asyncio
    async def test_crud(self, api, issues):
        new_milestone = NewMilestone(title="v1.0")
        update = MilestoneUpdate(state=ItemState.CLOSED)

        await issues.milestone.get("octocat", "hello", 1)
        await issues.milestone.create("octocat", "hello", new_milestone)
        await issues.milestone.update("octocat", "hello", 1, update)
        await issues.milestone.delete("octocat", "hello", 1)

        api.get.assert_awaited_once_with(f"{REPO}/milestones/1", Milestone)
        api.post.assert_awaited_once_with(f"{REPO}/milestones", new_milestone, model=Milestone)
        api.patch.assert_awaited_once_with(f"{REPO}/milestones/1", update, model=Milestone)
        api.delete.assert_awaited_once_with(f"{REPO}/milestones/1")

    @pytest.mark.asyncio
    async def test_get_all_for_repository(self, api, issues):
        await issues.milestone.get_all_for_repository(
            "octocat", "hello", MilestoneRequest(state=ItemStateFilter.ALL)
        )

        api.get_all.assert_awaited_once_with(
            f"{REPO}/milestones", Milestone, params={"state": "all"}, options=None
        )


# =============================================================================
# Lock / Unlock
# =============================================================================


class TestLockUnlock:
    @pytest.mark.asyncio
    async def test_lock_with_reason(self, api, issues):
        await issues.lock_unlock.lock("octocat", "hello", 1347, LockReason.TOO_HEATED)

        api.put.assert_awaited_once_with(
            f"{REPO}/issues/1347/lock", IssueLock(lock_reason=LockReason.TOO_HEATED)
        )

    @pytest.mark.asyncio
    async def test_lock_without_reason_sends_no_body(self, api, issues):
        await issues.lock_unlock.lock("octocat", "hello", 1347)

        api.put.assert_awaited_once_with(f"{REPO}/issues/1347/lock", None)

    @pytest.mark.asyncio
    async def test_unlock(self, api, issues):
        await issues.lock_unlock.unlock("octocat", "hello", 1347)

        api.delete.assert_awaited_once_with(f"{REPO}/issues/1347/lock")


# =============================================================================
# Repository id addressing
# =============================================================================

BY_ID = "/repositories/1296269"


class TestRepositoryIdVariants:
    @pytest.mark.asyncio
    async def test_issues(self, api, issues):
        new_issue = NewIssue(title="Found a bug")
        update = IssueUpdate(state=ItemState.CLOSED)
        request = RepositoryIssueRequest(state=ItemStateFilter.ALL)

        await issues.get_by_repository_id(1296269, 1347)
        await issues.get_all_for_repository_by_repository_id(1296269, request)
        await issues.create_by_repository_id(1296269, new_issue)
        await issues.update_by_repository_id(1296269, 1347, update)

        api.get.assert_awaited_once_with(f"{BY_ID}/issues/1347", Issue)
        api.get_all.assert_awaited_once_with(
            f"{BY_ID}/issues", Issue, params={"state": "all"}, options=None
        )
        api.post.assert_awaited_once_with(f"{BY_ID}/issues", new_issue, model=Issue)
        api.patch.assert_awaited_once_with(f"{BY_ID}/issues/1347", update, model=Issue)

    @pytest.mark.asyncio
    async def test_assignees(self, api, issues, status_response):
        api.connection.get.return_value = status_response(204)

        await issues.assignee.get_all_for_repository_by_repository_id(1296269)
        assigned = await issues.assignee.check_assignee_by_repository_id(1296269, "hubot")

        api.get_all.assert_awaited_once_with(
            f"{BY_ID}/assignees", User, accepts=STABLE, options=None
        )
        api.connection.get.assert_awaited_once_with(f"{BY_ID}/assignees/hubot", accepts=None)
        assert assigned is True

    @pytest.mark.asyncio
    async def test_comments(self, api, issues):
        await issues.comment.get_by_repository_id(1296269, 7)
        await issues.comment.get_all_for_repository_by_repository_id(1296269)
        await issues.comment.get_all_for_issue_by_repository_id(1296269, 1347)
        await issues.comment.create_by_repository_id(1296269, 1347, "Me too")
        await issues.comment.update_by_repository_id(1296269, 7, "Edited")
        await issues.comment.delete_by_repository_id(1296269, 7)

        api.get.assert_awaited_once_with(f"{BY_ID}/issues/comments/7", IssueComment)
        assert [call.args[0] for call in api.get_all.await_args_list] == [
            f"{BY_ID}/issues/comments",
            f"{BY_ID}/issues/1347/comments",
        ]
        api.post.assert_awaited_once_with(
            f"{BY_ID}/issues/1347/comments", IssueCommentBody(body="Me too"), model=IssueComment
        )
        api.patch.assert_awaited_once_with(
            f"{BY_ID}/issues/comments/7", IssueCommentBody(body="Edited"), model=IssueComment
        )
        api.delete.assert_awaited_once_with(f"{BY_ID}/issues/comments/7")

    @pytest.mark.asyncio
    async def test_labels(self, api, issues):
        api.post.return_value = [{"id": 1, "name": "bug"}]
        api.put.return_value = []
        api.delete.return_value = None
        new_label = NewLabel(name="bug", color="f29513")
        label_update = LabelUpdate(new_name="defect")

        await issues.labels.get_all_for_issue_by_repository_id(1296269, 1347)
        await issues.labels.get_all_for_repository_by_repository_id(1296269)
        await issues.labels.get_all_for_milestone_by_repository_id(1296269, 3)
        await issues.labels.get_by_repository_id(1296269, "good first issue")
        await issues.labels.create_by_repository_id(1296269, new_label)
        await issues.labels.update_by_repository_id(1296269, "bug", label_update)
        added = await issues.labels.add_to_issue_by_repository_id(1296269, 1347, ["bug"])
        await issues.labels.replace_all_for_issue_by_repository_id(1296269, 1347, [])
        await issues.labels.remove_from_issue_by_repository_id(1296269, 1347, "bug")
        await issues.labels.remove_all_from_issue_by_repository_id(1296269, 1347)
        await issues.labels.delete_by_repository_id(1296269, "bug")

        assert [call.args[0] for call in api.get_all.await_args_list] == [
            f"{BY_ID}/issues/1347/labels",
            f"{BY_ID}/labels",
            f"{BY_ID}/milestones/3/labels",
        ]
        api.get.assert_awaited_once_with(f"{BY_ID}/labels/good%20first%20issue", Label)
        assert [call.args for call in api.post.await_args_list] == [
            (f"{BY_ID}/labels", new_label),
            (f"{BY_ID}/issues/1347/labels", LabelsUpdate(labels=["bug"])),
        ]
        api.patch.assert_awaited_once_with(f"{BY_ID}/labels/bug", label_update, model=Label)
        api.put.assert_awaited_once_with(f"{BY_ID}/issues/1347/labels", LabelsUpdate(labels=[]))
        assert [call.args[0] for call in api.delete.await_args_list] == [
            f"{BY_ID}/issues/1347/labels/bug",
            f"{BY_ID}/issues/1347/labels",
            f"{BY_ID}/labels/bug",
        ]
        assert added[0].name == "bug"

    @pytest.mark.asyncio
    async def test_milestones(self, api, issues):
        new_milestone = NewMilestone(title="v1.0")
        update = MilestoneUpdate(state=ItemState.CLOSED)

        await issues.milestone.get_by_repository_id(1296269, 3)
        await issues.milestone.get_all_for_repository_by_repository_id(1296269)
        await issues.milestone.create_by_repository_id(1296269, new_milestone)
        await issues.milestone.update_by_repository_id(1296269, 3, update)
        await issues.milestone.delete_by_repository_id(1296269, 3)

        api.get.assert_awaited_once_with(f"{BY_ID}/milestones/3", Milestone)
        api.get_all.assert_awaited_once_with(
            f"{BY_ID}/milestones", Milestone, params=None, options=None
        )
        api.post.assert_awaited_once_with(
            f"{BY_ID}/milestones", new_milestone, model=Milestone
        )
        api.patch.assert_awaited_once_with(f"{BY_ID}/milestones/3", update, model=Milestone)
        api.delete.assert_awaited_once_with(f"{BY_ID}/milestones/3")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("repository_id", [None, 0, -1, "hello"])
    async def test_rejects_invalid_repository_id(self, api, issues, repository_id):
        with pytest.raises(ValueError, match="repository_id"):
            await issues.get_by_repository_id(repository_id, 1347)

        api.get.assert_not_awaited()


# =============================================================================
# Numeric id validation
# =============================================================================


class TestNumericIdValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("number", [None, 0, -1, "1347"])
    async def test_issue_number(self, api, issues, number):
        with pytest.raises(ValueError, match="number"):
            await issues.get("octocat", "hello", number)
        with pytest.raises(ValueError, match="number"):
            await issues.update("octocat", "hello", number, IssueUpdate(title="x"))
        with pytest.raises(ValueError, match="number"):
            await issues.comment.create("octocat", "hello", number, "Me too")
        with pytest.raises(ValueError, match="number"):
            await issues.labels.remove_all_from_issue("octocat", "hello", number)
        with pytest.raises(ValueError, match="number"):
            await issues.milestone.delete("octocat", "hello", number)
        with pytest.raises(ValueError, match="number"):
            await issues.lock_unlock.unlock("octocat", "hello", number)
        with pytest.raises(ValueError, match="number"):
            await issues.assignee.add_assignees(
                "octocat", "hello", number, AssigneesUpdate(assignees=["hubot"])
            )

        assert not api.method_calls

    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment_id", [None, 0, -7])
    async def test_comment_id(self, api, issues, comment_id):
        with pytest.raises(ValueError, match="comment_id"):
            await issues.comment.get("octocat", "hello", comment_id)
        with pytest.raises(ValueError, match="comment_id"):
            await issues.comment.delete("octocat", "hello", comment_id)

        assert not api.method_calls
