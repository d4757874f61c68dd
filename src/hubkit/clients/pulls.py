"""Pull requests, reviews, review comments and review requests.

Pull requests, reviews and review requests can also be addressed with
``*_by_repository_id``; review comments use ``owner``/``name`` only.

Reference: https://docs.github.com/en/rest/pulls
"""


from .. import ensure
from ..http import ApiConnection, ApiOptions
from ..models import (
    MergePullRequest,
    NewPullRequest,
    PullRequest,
    PullRequestCommit,
    PullRequestFile,
    PullRequestMerge,
    PullRequestRequest,
    PullRequestReview,
    PullRequestReviewComment,
    PullRequestReviewCommentCreate,
    PullRequestReviewCommentEdit,
    PullRequestReviewCommentReplyCreate,
    PullRequestReviewCommentRequest,
    PullRequestReviewCreate,
    PullRequestReviewDismiss,
    PullRequestReviewRequest,
    PullRequestReviewSubmit,
    PullRequestUpdate,
    RequestedReviews,
)
from .base import ApiClient, repository_id_path, repository_path


def _pulls(owner: str, name: str) -> str:
    return f"{repository_path(owner, name)}/pulls"


def _pulls_by_id(repository_id: int) -> str:
    return f"{repository_id_path(repository_id)}/pulls"


def _pull(pulls: str, number: int) -> str:
    ensure.positive(number, "number")
    return f"{pulls}/{number}"


def _review(pulls: str, number: int, review_id: int) -> str:
    ensure.positive(review_id, "review_id")
    return f"{_pull(pulls, number)}/reviews/{review_id}"


def _review_comment(pulls: str, comment_id: int) -> str:
    ensure.positive(comment_id, "comment_id")
    return f"{pulls}/comments/{comment_id}"


class PullRequestReviewsClient(ApiClient):
    """Reviews on a pull request."""

    async def get_all(
        self, owner: str, name: str, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestReview]:
        return await self._api.get_all(
            f"{_pull(_pulls(owner, name), number)}/reviews", PullRequestReview, options=options
        )

    async def get_all_by_repository_id(
        self, repository_id: int, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestReview]:
        return await self._api.get_all(
            f"{_pull(_pulls_by_id(repository_id), number)}/reviews",
            PullRequestReview,
            options=options,
        )

    async def get(self, owner: str, name: str, number: int, review_id: int) -> PullRequestReview:
        return await self._api.get(
            _review(_pulls(owner, name), number, review_id), PullRequestReview
        )

    async def get_by_repository_id(
        self, repository_id: int, number: int, review_id: int
    ) -> PullRequestReview:
        return await self._api.get(
            _review(_pulls_by_id(repository_id), number, review_id), PullRequestReview
        )

    async def create(
        self, owner: str, name: str, number: int, review: PullRequestReviewCreate
    ) -> PullRequestReview:
        """Create a review. Without ``event`` the review stays PENDING until submitted."""
        return await self._create(_pull(_pulls(owner, name), number), review)

    async def create_by_repository_id(
        self, repository_id: int, number: int, review: PullRequestReviewCreate
    ) -> PullRequestReview:
        return await self._create(_pull(_pulls_by_id(repository_id), number), review)

    async def delete(self, owner: str, name: str, number: int, review_id: int) -> None:
        """Delete a pending review."""
        await self._api.delete(_review(_pulls(owner, name), number, review_id))

    async def delete_by_repository_id(
        self, repository_id: int, number: int, review_id: int
    ) -> None:
        await self._api.delete(_review(_pulls_by_id(repository_id), number, review_id))

    async def submit(
        self,
        owner: str,
        name: str,
        number: int,
        review_id: int,
        submit_message: PullRequestReviewSubmit,
    ) -> PullRequestReview:
        return await self._submit(_review(_pulls(owner, name), number, review_id), submit_message)

    async def submit_by_repository_id(
        self,
        repository_id: int,
        number: int,
        review_id: int,
        submit_message: PullRequestReviewSubmit,
    ) -> PullRequestReview:
        return await self._submit(
            _review(_pulls_by_id(repository_id), number, review_id), submit_message
        )

    async def dismiss(
        self,
        owner: str,
        name: str,
        number: int,
        review_id: int,
        dismiss_message: PullRequestReviewDismiss,
    ) -> PullRequestReview:
        return await self._dismiss(
            _review(_pulls(owner, name), number, review_id), dismiss_message
        )

    async def dismiss_by_repository_id(
        self,
        repository_id: int,
        number: int,
        review_id: int,
        dismiss_message: PullRequestReviewDismiss,
    ) -> PullRequestReview:
        return await self._dismiss(
            _review(_pulls_by_id(repository_id), number, review_id), dismiss_message
        )

    async def get_all_comments(
        self,
        owner: str,
        name: str,
        number: int,
        review_id: int,
        options: ApiOptions | None = None,
    ) -> list[PullRequestReviewComment]:
        return await self._api.get_all(
            f"{_review(_pulls(owner, name), number, review_id)}/comments",
            PullRequestReviewComment,
            options=options,
        )

    async def get_all_comments_by_repository_id(
        self,
        repository_id: int,
        number: int,
        review_id: int,
        options: ApiOptions | None = None,
    ) -> list[PullRequestReviewComment]:
        return await self._api.get_all(
            f"{_review(_pulls_by_id(repository_id), number, review_id)}/comments",
            PullRequestReviewComment,
            options=options,
        )

    async def _create(self, pull: str, review: PullRequestReviewCreate) -> PullRequestReview:
        ensure.not_none(review, "review")
        return await self._api.post(f"{pull}/reviews", review, model=PullRequestReview)

    async def _submit(
        self, review: str, submit_message: PullRequestReviewSubmit
    ) -> PullRequestReview:
        ensure.not_none(submit_message, "submit_message")
        return await self._api.post(
            f"{review}/events", submit_message, model=PullRequestReview
        )

    async def _dismiss(
        self, review: str, dismiss_message: PullRequestReviewDismiss
    ) -> PullRequestReview:
        ensure.not_none(dismiss_message, "dismiss_message")
        return await self._api.put(
            f"{review}/dismissals", dismiss_message, model=PullRequestReview
        )


class PullRequestReviewCommentsClient(ApiClient):
    """Line comments on pull request diffs."""

    async def get_all(
        self, owner: str, name: str, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestReviewComment]:
        return await self._api.get_all(
            f"{_pull(_pulls(owner, name), number)}/comments",
            PullRequestReviewComment,
            options=options,
        )

    async def get_all_for_repository(
        self,
        owner: str,
        name: str,
        request: PullRequestReviewCommentRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[PullRequestReviewComment]:
        return await self._api.get_all(
            f"{_pulls(owner, name)}/comments",
            PullRequestReviewComment,
            params=request.to_params() if request else None,
            options=options,
        )

    async def get_comment(
        self, owner: str, name: str, comment_id: int
    ) -> PullRequestReviewComment:
        return await self._api.get(
            _review_comment(_pulls(owner, name), comment_id), PullRequestReviewComment
        )

    async def create(
        self, owner: str, name: str, number: int, comment: PullRequestReviewCommentCreate
    ) -> PullRequestReviewComment:
        ensure.not_none(comment, "comment")
        return await self._api.post(
            f"{_pull(_pulls(owner, name), number)}/comments",
            comment,
            model=PullRequestReviewComment,
        )

    async def create_reply(
        self,
        owner: str,
        name: str,
        number: int,
        comment_id: int,
        comment: PullRequestReviewCommentReplyCreate,
    ) -> PullRequestReviewComment:
        """Reply to a top-level review comment (replies to replies are not allowed)."""
        ensure.not_none(comment, "comment")
        ensure.positive(comment_id, "comment_id")
        return await self._api.post(
            f"{_pull(_pulls(owner, name), number)}/comments/{comment_id}/replies",
            comment,
            model=PullRequestReviewComment,
        )

    async def edit(
        self, owner: str, name: str, comment_id: int, comment: PullRequestReviewCommentEdit
    ) -> PullRequestReviewComment:
        ensure.not_none(comment, "comment")
        return await self._api.patch(
            _review_comment(_pulls(owner, name), comment_id),
            comment,
            model=PullRequestReviewComment,
        )

    async def delete(self, owner: str, name: str, comment_id: int) -> None:
        await self._api.delete(_review_comment(_pulls(owner, name), comment_id))


class PullRequestReviewRequestsClient(ApiClient):
    """Requested reviewers (users and teams) on a pull request."""

    async def get(self, owner: str, name: str, number: int) -> RequestedReviews:
        return await self._api.get(
            f"{_pull(_pulls(owner, name), number)}/requested_reviewers", RequestedReviews
        )

    async def get_by_repository_id(self, repository_id: int, number: int) -> RequestedReviews:
        return await self._api.get(
            f"{_pull(_pulls_by_id(repository_id), number)}/requested_reviewers",
            RequestedReviews,
        )

    async def create(
        self, owner: str, name: str, number: int, users: PullRequestReviewRequest
    ) -> PullRequest:
        return await self._create(_pull(_pulls(owner, name), number), users)

    async def create_by_repository_id(
        self, repository_id: int, number: int, users: PullRequestReviewRequest
    ) -> PullRequest:
        return await self._create(_pull(_pulls_by_id(repository_id), number), users)

    async def delete(
        self, owner: str, name: str, number: int, users: PullRequestReviewRequest
    ) -> None:
        await self._delete(_pull(_pulls(owner, name), number), users)

    async def delete_by_repository_id(
        self, repository_id: int, number: int, users: PullRequestReviewRequest
    ) -> None:
        await self._delete(_pull(_pulls_by_id(repository_id), number), users)

    async def _create(self, pull: str, users: PullRequestReviewRequest) -> PullRequest:
        ensure.not_none(users, "users")
        return await self._api.post(f"{pull}/requested_reviewers", users, model=PullRequest)

    async def _delete(self, pull: str, users: PullRequestReviewRequest) -> None:
        ensure.not_none(users, "users")
        await self._api.delete(f"{pull}/requested_reviewers", users)


class PullRequestsClient(ApiClient):
    """Pull requests.

    Attributes:
        review: PullRequestReviewsClient
        review_comment: PullRequestReviewCommentsClient
        review_request: PullRequestReviewRequestsClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.review = PullRequestReviewsClient(api_connection)
        self.review_comment = PullRequestReviewCommentsClient(api_connection)
        self.review_request = PullRequestReviewRequestsClient(api_connection)

    async def get(self, owner: str, name: str, number: int) -> PullRequest:
        return await self._api.get(_pull(_pulls(owner, name), number), PullRequest)

    async def get_by_repository_id(self, repository_id: int, number: int) -> PullRequest:
        return await self._api.get(_pull(_pulls_by_id(repository_id), number), PullRequest)

    async def get_all_for_repository(
        self,
        owner: str,
        name: str,
        request: PullRequestRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[PullRequest]:
        """List pull requests.

        Args:
            owner: Repository owner
            name: Repository name
            request: Filters (state, head, base, sort, direction)
            options: Pagination options

        Returns:
            Pull requests from all pages
        """
        return await self._all(_pulls(owner, name), request, options)

    async def get_all_for_repository_by_repository_id(
        self,
        repository_id: int,
        request: PullRequestRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[PullRequest]:
        return await self._all(_pulls_by_id(repository_id), request, options)

    async def create(self, owner: str, name: str, new_pull_request: NewPullRequest) -> PullRequest:
        return await self._create(_pulls(owner, name), new_pull_request)

    async def create_by_repository_id(
        self, repository_id: int, new_pull_request: NewPullRequest
    ) -> PullRequest:
        return await self._create(_pulls_by_id(repository_id), new_pull_request)

    async def update(
        self, owner: str, name: str, number: int, pull_request_update: PullRequestUpdate
    ) -> PullRequest:
        return await self._update(_pull(_pulls(owner, name), number), pull_request_update)

    async def update_by_repository_id(
        self, repository_id: int, number: int, pull_request_update: PullRequestUpdate
    ) -> PullRequest:
        return await self._update(
            _pull(_pulls_by_id(repository_id), number), pull_request_update
        )

    async def merge(
        self, owner: str, name: str, number: int, merge_pull_request: MergePullRequest
    ) -> PullRequestMerge:
        """Merge a pull request.

        Raises:
            ApiError: 405 when the pull request is not mergeable, 409 when
                ``sha`` does not match the head
        """
        return await self._merge(_pull(_pulls(owner, name), number), merge_pull_request)

    async def merge_by_repository_id(
        self, repository_id: int, number: int, merge_pull_request: MergePullRequest
    ) -> PullRequestMerge:
        return await self._merge(_pull(_pulls_by_id(repository_id), number), merge_pull_request)

    async def merged(self, owner: str, name: str, number: int) -> bool:
        """True when the pull request has been merged (204), False on 404."""
        return await self._is_true(f"{_pull(_pulls(owner, name), number)}/merge")

    async def merged_by_repository_id(self, repository_id: int, number: int) -> bool:
        return await self._is_true(f"{_pull(_pulls_by_id(repository_id), number)}/merge")

    async def commits(
        self, owner: str, name: str, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestCommit]:
        return await self._api.get_all(
            f"{_pull(_pulls(owner, name), number)}/commits", PullRequestCommit, options=options
        )

    async def commits_by_repository_id(
        self, repository_id: int, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestCommit]:
        return await self._api.get_all(
            f"{_pull(_pulls_by_id(repository_id), number)}/commits",
            PullRequestCommit,
            options=options,
        )

    async def files(
        self, owner: str, name: str, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestFile]:
        return await self._api.get_all(
            f"{_pull(_pulls(owner, name), number)}/files", PullRequestFile, options=options
        )

    async def files_by_repository_id(
        self, repository_id: int, number: int, options: ApiOptions | None = None
    ) -> list[PullRequestFile]:
        return await self._api.get_all(
            f"{_pull(_pulls_by_id(repository_id), number)}/files",
            PullRequestFile,
            options=options,
        )

    async def _all(
        self, pulls: str, request: PullRequestRequest | None, options: ApiOptions | None
    ) -> list[PullRequest]:
        return await self._api.get_all(
            pulls,
            PullRequest,
            params=request.to_params() if request else None,
            options=options,
        )

    async def _create(self, pulls: str, new_pull_request: NewPullRequest) -> PullRequest:
        ensure.not_none(new_pull_request, "new_pull_request")
        return await self._api.post(pulls, new_pull_request, model=PullRequest)

    async def _update(self, pull: str, pull_request_update: PullRequestUpdate) -> PullRequest:
        ensure.not_none(pull_request_update, "pull_request_update")
        return await self._api.patch(pull, pull_request_update, model=PullRequest)

    async def _merge(
        self, pull: str, merge_pull_request: MergePullRequest
    ) -> PullRequestMerge:
        ensure.not_none(merge_pull_request, "merge_pull_request")
        return await self._api.put(
            f"{pull}/merge", merge_pull_request, model=PullRequestMerge
        )
