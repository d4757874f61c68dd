"""Shared resources: users, organizations, repositories, shared enums."""

from datetime import datetime
from enum import Enum

from .base import GitHubModel, ListResponse, RequestModel


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class ItemState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class ItemStateFilter(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class User(GitHubModel):
    """A GitHub account (user, organization or bot)."""

    login: str
    id: int
    node_id: str | None = None
    avatar_url: str | None = None
    url: str | None = None
    html_url: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    name: str | None = None
    email: str | None = None
    company: str | None = None
    location: str | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Team(GitHubModel):
    id: int
    slug: str
    name: str | None = None
    node_id: str | None = None
    description: str | None = None
    privacy: str | None = None
    permission: str | None = None
    url: str | None = None
    html_url: str | None = None


class Organization(GitHubModel):
    login: str
    id: int
    node_id: str | None = None
    url: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    html_url: str | None = None
    public_repos: int | None = None
    created_at: datetime | None = None


class Repository(GitHubModel):
    id: int
    name: str
    full_name: str | None = None
    node_id: str | None = None
    owner: User | None = None
    private: bool | None = None
    visibility: str | None = None
    description: str | None = None
    fork: bool | None = None
    url: str | None = None
    html_url: str | None = None
    default_branch: str | None = None
    archived: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None


class NewRepository(RequestModel):
    """Body for POST /user/repos and POST /orgs/{org}/repos."""

    name: str
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    visibility: str | None = None
    has_issues: bool | None = None
    has_projects: bool | None = None
    has_wiki: bool | None = None
    is_template: bool | None = None
    team_id: int | None = None
    auto_init: bool | None = None
    gitignore_template: str | None = None
    license_template: str | None = None
    allow_squash_merge: bool | None = None
    allow_merge_commit: bool | None = None
    allow_rebase_merge: bool | None = None
    delete_branch_on_merge: bool | None = None


class RepositoryUpdate(RequestModel):
    name: str | None = None
    description: str | None = None
    homepage: str | None = None
    private: bool | None = None
    visibility: str | None = None
    has_issues: bool | None = None
    has_projects: bool | None = None
    has_wiki: bool | None = None
    is_template: bool | None = None
    default_branch: str | None = None
    allow_squash_merge: bool | None = None
    allow_merge_commit: bool | None = None
    allow_rebase_merge: bool | None = None
    delete_branch_on_merge: bool | None = None
    archived: bool | None = None


class OrganizationsResponse(ListResponse):
    items_field = "organizations"

    organizations: list[Organization] = []


class RepositoriesResponse(ListResponse):
    items_field = "repositories"

    repositories: list[Repository] = []


class AccessToken(GitHubModel):
    """Short-lived token (runner registration / removal)."""

    token: str
    expires_at: datetime | None = None
