"""Organizations, their members, and organization-level Actions settings.

Reference: https://docs.github.com/en/rest/orgs
"""


from .. import ensure
from ..exceptions import NotFoundError
from ..http import ApiConnection, ApiOptions
from ..models import Organization, User
from .base import ApiClient, _unexpected_status
from .secrets import OrganizationSecretsClient, OrganizationVariablesClient


def _org(organization: str) -> str:
    ensure.not_blank(organization, "organization")
    return f"/orgs/{organization}"


class OrganizationMembersClient(ApiClient):
    """Organization membership and public membership."""

    async def get_all(
        self, organization: str, options: ApiOptions | None = None
    ) -> list[User]:
        """Members visible to the caller (public members only for outsiders)."""
        return await self._api.get_all(f"{_org(organization)}/members", User, options=options)

    async def get_all_public(
        self, organization: str, options: ApiOptions | None = None
    ) -> list[User]:
        return await self._api.get_all(
            f"{_org(organization)}/public_members", User, options=options
        )

    async def check_member(self, organization: str, user: str) -> bool:
        """Check whether a user belongs to an organization.

        GitHub answers 302 (to the public membership URL) when the caller is
        not a member, so redirects are not followed here.

        Args:
            organization: Organization login
            user: User login

        Returns:
            True on 204, False on 404 or 302

        Raises:
            ApiError: On any other status
        """
        ensure.not_blank(user, "user")
        try:
            response = await self._api.connection.get(
                f"{_org(organization)}/members/{user}", follow_redirects=False
            )
        except NotFoundError:
            return False
        if response.status_code == 204:
            return True
        if response.status_code == 302:
            return False
        raise _unexpected_status(response, "Expected a 204, a 302 or a 404")

    async def check_member_public(self, organization: str, user: str) -> bool:
        ensure.not_blank(user, "user")
        return await self._is_true(f"{_org(organization)}/public_members/{user}")

    async def delete(self, organization: str, user: str) -> None:
        """Remove a user from the organization and all its teams."""
        ensure.not_blank(user, "user")
        await self._api.delete(f"{_org(organization)}/members/{user}")

    async def publicize(self, organization: str, user: str) -> bool:
        """Make the user's membership public. Only the user may do this.

        Returns:
            True on 204, False on 404
        """
        ensure.not_blank(user, "user")
        try:
            response = await self._api.connection.put(
                f"{_org(organization)}/public_members/{user}"
            )
        except NotFoundError:
            return False
        self._expect_status(response, 204)
        return True

    async def conceal(self, organization: str, user: str) -> None:
        ensure.not_blank(user, "user")
        await self._api.delete(f"{_org(organization)}/public_members/{user}")


class OrganizationActionsClient(ApiClient):
    """Attributes:
        secrets: OrganizationSecretsClient
        variables: OrganizationVariablesClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.secrets = OrganizationSecretsClient(api_connection)
        self.variables = OrganizationVariablesClient(api_connection)


class OrganizationsClient(ApiClient):
    """Organizations.

    Attributes:
        member: OrganizationMembersClient
        actions: OrganizationActionsClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.member = OrganizationMembersClient(api_connection)
        self.actions = OrganizationActionsClient(api_connection)

    async def get(self, organization: str) -> Organization:
        return await self._api.get(_org(organization), Organization)
