"""Users and followers.

Reference: https://docs.github.com/en/rest/users
"""


from .. import ensure
from ..exceptions import NotFoundError
from ..http import ApiConnection, ApiOptions
from ..models import User
from .base import ApiClient


def _user(login: str, name: str = "login") -> str:
    ensure.not_blank(login, name)
    return f"/users/{login}"


class FollowersClient(ApiClient):
    """Who follows whom."""

    async def get_all_for_current(self, options: ApiOptions | None = None) -> list[User]:
        return await self._api.get_all("/user/followers", User, options=options)

    async def get_all(self, login: str, options: ApiOptions | None = None) -> list[User]:
        return await self._api.get_all(f"{_user(login)}/followers", User, options=options)

    async def get_all_following_for_current(
        self, options: ApiOptions | None = None
    ) -> list[User]:
        return await self._api.get_all("/user/following", User, options=options)

    async def get_all_following(
        self, login: str, options: ApiOptions | None = None
    ) -> list[User]:
        return await self._api.get_all(f"{_user(login)}/following", User, options=options)

    async def is_following_for_current(self, following: str) -> bool:
        """True when the authenticated user follows ``following``."""
        ensure.not_blank(following, "following")
        return await self._is_true(f"/user/following/{following}")

    async def is_following(self, login: str, following: str) -> bool:
        ensure.not_blank(following, "following")
        return await self._is_true(f"{_user(login)}/following/{following}")

    async def follow(self, login: str) -> bool:
        """Follow a user as the authenticated user.

        Returns:
            True on 204, False on 404

        Raises:
            ApiError: On any other success status
        """
        ensure.not_blank(login, "login")
        try:
            response = await self._api.connection.put(f"/user/following/{login}")
        except NotFoundError:
            return False
        self._expect_status(response, 204)
        return True

    async def unfollow(self, login: str) -> None:
        ensure.not_blank(login, "login")
        await self._api.delete(f"/user/following/{login}")


class UsersClient(ApiClient):
    """Attributes:
        followers: FollowersClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.followers = FollowersClient(api_connection)

    async def current(self) -> User:
        """The authenticated user."""
        return await self._api.get("/user", User)

    async def get(self, login: str) -> User:
        return await self._api.get(_user(login), User)
