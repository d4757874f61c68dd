"""Projects (classic): boards, columns and cards."""

from datetime import datetime
from enum import Enum

from .base import GitHubModel, RequestModel
from .common import ItemState, ItemStateFilter, User


class ProjectOrganizationPermission(str, Enum):
    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
    NONE = "none"


class Project(GitHubModel):
    id: int
    name: str
    number: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    columns_url: str | None = None
    owner_url: str | None = None
    body: str | None = None
    state: ItemState | None = None
    creator: User | None = None
    organization_permission: ProjectOrganizationPermission | None = None
    private: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectRequest(RequestModel):
    state: ItemStateFilter | None = None


class NewProject(RequestModel):
    name: str
    body: str | None = None


class ProjectUpdate(RequestModel):
    name: str | None = None
    body: str | None = None
    state: ItemState | None = None
    organization_permission: ProjectOrganizationPermission | None = None
    private: bool | None = None


# =============================================================================
# Columns
# =============================================================================


class ProjectColumn(GitHubModel):
    id: int
    name: str
    node_id: str | None = None
    url: str | None = None
    project_url: str | None = None
    cards_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NewProjectColumn(RequestModel):
    name: str


class ProjectColumnUpdate(RequestModel):
    name: str


class ProjectColumnMove(RequestModel):
    """``position`` is ``first``, ``last`` or ``after:<column_id>``."""

    position: str

    @classmethod
    def first(cls) -> "ProjectColumnMove":
        return cls(position="first")

    @classmethod
    def last(cls) -> "ProjectColumnMove":
        return cls(position="last")

    @classmethod
    def after(cls, column_id: int) -> "ProjectColumnMove":
        return cls(position=f"after:{column_id}")


# =============================================================================
# Cards
# =============================================================================


class ProjectCardContentType(str, Enum):
    ISSUE = "Issue"
    PULL_REQUEST = "PullRequest"


class ProjectCard(GitHubModel):
    id: int
    node_id: str | None = None
    url: str | None = None
    column_url: str | None = None
    content_url: str | None = None
    project_url: str | None = None
    note: str | None = None
    creator: User | None = None
    archived: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectCardArchivedState(str, Enum):
    ALL = "all"
    ARCHIVED = "archived"
    NOT_ARCHIVED = "not_archived"


class ProjectCardRequest(RequestModel):
    archived_state: ProjectCardArchivedState | None = None


class NewProjectCard(RequestModel):
    """A card holds either a free-text ``note`` or an issue/pull request.

    For content cards set ``content_id`` (the issue or pull request id, not
    its number) and ``content_type``.
    """

    note: str | None = None
    content_id: int | None = None
    content_type: ProjectCardContentType | None = None


class ProjectCardUpdate(RequestModel):
    note: str | None = None
    archived: bool | None = None


class ProjectCardMove(RequestModel):
    """``position`` is ``top``, ``bottom`` or ``after:<card_id>``.

    ``column_id`` moves the card to another column of the same project.
    """

    position: str
    column_id: int | None = None
