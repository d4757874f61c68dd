"""Projects (classic): boards, columns and cards.

Every request carries the Projects preview media type.

Reference: https://docs.github.com/en/rest/projects
"""

from .. import accept_headers, ensure
from ..exceptions import NotFoundError
from ..http import ApiConnection, ApiOptions
from ..models import (
    NewProject,
    NewProjectCard,
    NewProjectColumn,
    Project,
    ProjectCard,
    ProjectCardMove,
    ProjectCardRequest,
    ProjectCardUpdate,
    ProjectColumn,
    ProjectColumnMove,
    ProjectColumnUpdate,
    ProjectRequest,
    ProjectUpdate,
)
from .base import ApiClient, repository_id_path, repository_path

PREVIEW = accept_headers.PROJECTS_API_PREVIEW


def _project(project_id: int) -> str:
    ensure.positive(project_id, "project_id")
    return f"/projects/{project_id}"


def _column(column_id: int) -> str:
    ensure.positive(column_id, "column_id")
    return f"/projects/columns/{column_id}"


def _card(card_id: int) -> str:
    ensure.positive(card_id, "card_id")
    return f"/projects/columns/cards/{card_id}"


def _org(organization: str) -> str:
    ensure.not_blank(organization, "organization")
    return f"/orgs/{organization}"


class _ProjectsApi(ApiClient):
    async def _delete(self, path: str) -> bool:
        """True on 204, False when GitHub answers 404."""
        try:
            response = await self._api.connection.delete(path, accepts=PREVIEW)
        except NotFoundError:
            return False
        return response.status_code == 204

    async def _move(self, path: str, position: ProjectColumnMove | ProjectCardMove) -> bool:
        """True on 201, False when GitHub answers 404."""
        ensure.not_none(position, "position")
        try:
            response = await self._api.connection.post(path, position, accepts=PREVIEW)
        except NotFoundError:
            return False
        return response.status_code == 201


class ProjectColumnsClient(_ProjectsApi):
    async def get_all(
        self, project_id: int, options: ApiOptions | None = None
    ) -> list[ProjectColumn]:
        return await self._api.get_all(
            f"{_project(project_id)}/columns", ProjectColumn, accepts=PREVIEW, options=options
        )

    async def get(self, column_id: int) -> ProjectColumn:
        return await self._api.get(_column(column_id), ProjectColumn, accepts=PREVIEW)

    async def create(self, project_id: int, new_column: NewProjectColumn) -> ProjectColumn:
        ensure.not_none(new_column, "new_column")
        return await self._api.post(
            f"{_project(project_id)}/columns", new_column, model=ProjectColumn, accepts=PREVIEW
        )

    async def update(self, column_id: int, column_update: ProjectColumnUpdate) -> ProjectColumn:
        ensure.not_none(column_update, "column_update")
        return await self._api.patch(
            _column(column_id), column_update, model=ProjectColumn, accepts=PREVIEW
        )

    async def delete(self, column_id: int) -> bool:
        return await self._delete(_column(column_id))

    async def move(self, column_id: int, position: ProjectColumnMove) -> bool:
        """Move a column within its project.

        Returns:
            True when GitHub answers 201, False on 404 or any other status
        """
        return await self._move(f"{_column(column_id)}/moves", position)


class ProjectCardsClient(_ProjectsApi):
    async def get_all(
        self,
        column_id: int,
        request: ProjectCardRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[ProjectCard]:
        """List a column's cards. GitHub returns only unarchived cards by default."""
        return await self._api.get_all(
            f"{_column(column_id)}/cards",
            ProjectCard,
            params=request.to_params() if request else None,
            accepts=PREVIEW,
            options=options,
        )

    async def get(self, card_id: int) -> ProjectCard:
        return await self._api.get(_card(card_id), ProjectCard, accepts=PREVIEW)

    async def create(self, column_id: int, new_card: NewProjectCard) -> ProjectCard:
        ensure.not_none(new_card, "new_card")
        return await self._api.post(
            f"{_column(column_id)}/cards", new_card, model=ProjectCard, accepts=PREVIEW
        )

    async def update(self, card_id: int, card_update: ProjectCardUpdate) -> ProjectCard:
        ensure.not_none(card_update, "card_update")
        return await self._api.patch(
            _card(card_id), card_update, model=ProjectCard, accepts=PREVIEW
        )

    async def delete(self, card_id: int) -> bool:
        return await self._delete(_card(card_id))

    async def move(self, card_id: int, position: ProjectCardMove) -> bool:
        return await self._move(f"{_card(card_id)}/moves", position)


class ProjectsClient(_ProjectsApi):
    """Repository and organization project boards.

    Attributes:
        column: ProjectColumnsClient
        card: ProjectCardsClient
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.column = ProjectColumnsClient(api_connection)
        self.card = ProjectCardsClient(api_connection)

    async def get_all_for_repository(
        self,
        owner: str,
        name: str,
        request: ProjectRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Project]:
        return await self._list(f"{repository_path(owner, name)}/projects", request, options)

    async def get_all_for_repository_by_repository_id(
        self,
        repository_id: int,
        request: ProjectRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Project]:
        return await self._list(
            f"{repository_id_path(repository_id)}/projects", request, options
        )

    async def get_all_for_organization(
        self,
        organization: str,
        request: ProjectRequest | None = None,
        options: ApiOptions | None = None,
    ) -> list[Project]:
        return await self._list(f"{_org(organization)}/projects", request, options)

    async def get(self, project_id: int) -> Project:
        return await self._api.get(_project(project_id), Project, accepts=PREVIEW)

    async def create_for_repository(
        self, repository_id: int, new_project: NewProject
    ) -> Project:
        """Create a board on a repository, addressed by its numeric id."""
        ensure.not_none(new_project, "new_project")
        return await self._api.post(
            f"{repository_id_path(repository_id)}/projects",
            new_project,
            model=Project,
            accepts=PREVIEW,
        )

    async def create_for_organization(
        self, organization: str, new_project: NewProject
    ) -> Project:
        ensure.not_none(new_project, "new_project")
        return await self._api.post(
            f"{_org(organization)}/projects", new_project, model=Project, accepts=PREVIEW
        )

    async def update(self, project_id: int, project_update: ProjectUpdate) -> Project:
        ensure.not_none(project_update, "project_update")
        return await self._api.patch(
            _project(project_id), project_update, model=Project, accepts=PREVIEW
        )

    async def delete(self, project_id: int) -> bool:
        """Delete a board.

        Returns:
            True when GitHub answers 204, False on 404 or any other status
        """
        return await self._delete(_project(project_id))

    async def _list(
        self, path: str, request: ProjectRequest | None, options: ApiOptions | None
    ) -> list[Project]:
        return await self._api.get_all(
            path,
            Project,
            params=request.to_params() if request else None,
            accepts=PREVIEW,
            options=options,
        )
