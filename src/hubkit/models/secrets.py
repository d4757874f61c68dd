"""Actions secrets and configuration variables.

Secret values are never returned by GitHub; callers encrypt values with the
public key from ``get_public_key`` (libsodium sealed box) before upload.
"""

from datetime import datetime
from enum import Enum

from .base import GitHubModel, ListResponse, RequestModel
from .common import Repository


class Visibility(str, Enum):
    """Which organization repositories may use a secret or variable."""

    ALL = "all"
    PRIVATE = "private"
    SELECTED = "selected"


class SecretsPublicKey(GitHubModel):
    key_id: str
    key: str


# =============================================================================
# Secrets
# =============================================================================


class Secret(GitHubModel):
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SecretsCollection(ListResponse):
    items_field = "secrets"

    secrets: list[Secret] = []


class OrganizationSecret(Secret):
    visibility: Visibility | None = None
    selected_repositories_url: str | None = None


class OrganizationSecretsCollection(ListResponse):
    items_field = "secrets"

    secrets: list[OrganizationSecret] = []


class UpsertSecret(RequestModel):
    """Body for PUT .../secrets/{secret_name}."""

    encrypted_value: str
    key_id: str


class UpsertOrganizationSecret(UpsertSecret):
    visibility: Visibility
    selected_repository_ids: list[int] | None = None


# =============================================================================
# Variables
# =============================================================================


class Variable(GitHubModel):
    name: str
    value: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VariablesCollection(ListResponse):
    items_field = "variables"

    variables: list[Variable] = []


class OrganizationVariable(Variable):
    visibility: Visibility | None = None
    selected_repositories_url: str | None = None


class OrganizationVariablesCollection(ListResponse):
    items_field = "variables"

    variables: list[OrganizationVariable] = []


class NewVariable(RequestModel):
    """Body for POST .../variables."""

    name: str
    value: str


class VariableUpdate(RequestModel):
    """Body for PATCH .../variables/{name}. ``name`` renames the variable."""

    name: str | None = None
    value: str | None = None


class NewOrganizationVariable(NewVariable):
    visibility: Visibility
    selected_repository_ids: list[int] | None = None


class OrganizationVariableUpdate(VariableUpdate):
    visibility: Visibility | None = None
    selected_repository_ids: list[int] | None = None


# =============================================================================
# Selected repositories (organization secrets and variables)
# =============================================================================


class SelectedRepositoryCollection(ListResponse):
    items_field = "repositories"

    repositories: list[Repository] = []


class SelectedRepositoriesUpdate(RequestModel):
    selected_repository_ids: list[int]
