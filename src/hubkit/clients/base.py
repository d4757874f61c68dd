"""Shared plumbing for endpoint clients."""

import logging

from .. import ensure
from ..exceptions import ApiError, NotFoundError
from ..http import ApiConnection, ApiResponse

logger = logging.getLogger("hubkit.clients")


class ApiClient:
    """Base class for endpoint clients.

    Holds the shared ApiConnection and implements the status-code checks
    used by the boolean endpoints (membership, following, merged).
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        ensure.not_none(api_connection, "api_connection")
        self._api = api_connection

    @property
    def api_connection(self) -> ApiConnection:
        return self._api

    async def _is_true(self, path: str, accepts: str | None = None) -> bool:
        """GET a check endpoint: 204 means yes, 404 means no.

        Raises:
            ApiError: For any other status
        """
        try:
            response = await self._api.connection.get(path, accepts=accepts)
        except NotFoundError:
            return False
        if response.status_code == 204:
            return True
        raise _unexpected_status(response, "Expected a 204 or a 404")

    @staticmethod
    def _expect_status(response: ApiResponse, expected: int) -> None:
        if response.status_code != expected:
            raise _unexpected_status(response, f"Expected a {expected}")


def _unexpected_status(response: ApiResponse, expectation: str) -> ApiError:
    logger.warning(
        "unexpected_status_code",
        extra={"status_code": response.status_code, "expected": expectation},
    )
    return ApiError(
        f"Invalid Status Code returned. {expectation}",
        status_code=response.status_code,
        headers=response.headers,
    )


def repository_path(owner: str, name: str) -> str:
    """``/repos/{owner}/{name}`` after validating both parts."""
    ensure.not_blank(owner, "owner")
    ensure.not_blank(name, "name")
    return f"/repos/{owner}/{name}"


def repository_id_path(repository_id: int) -> str:
    """``/repositories/{id}``, GitHub's rename-proof address for a repository."""
    ensure.positive(repository_id, "repository_id")
    return f"/repositories/{repository_id}"
