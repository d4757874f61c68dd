"""Actions secrets and configuration variables at repository, environment and
organization scope.

Secret values must be encrypted client-side with the scope's public key
before calling ``create_or_update``; GitHub never returns them.

Reference: https://docs.github.com/en/rest/actions/secrets
           https://docs.github.com/en/rest/actions/variables
"""

from urllib.parse import quote

from .. import ensure
from ..http import ApiOptions
from ..models import (
    NewOrganizationVariable,
    NewVariable,
    OrganizationSecret,
    OrganizationSecretsCollection,
    OrganizationVariable,
    OrganizationVariablesCollection,
    OrganizationVariableUpdate,
    Secret,
    SecretsCollection,
    SecretsPublicKey,
    SelectedRepositoriesUpdate,
    SelectedRepositoryCollection,
    UpsertOrganizationSecret,
    UpsertSecret,
    Variable,
    VariablesCollection,
    VariableUpdate,
)
from .base import ApiClient, repository_id_path, repository_path

AnySecretsCollection = SecretsCollection | OrganizationSecretsCollection
AnyVariablesCollection = VariablesCollection | OrganizationVariablesCollection


def _repository_scope(owner: str, name: str) -> str:
    return f"{repository_path(owner, name)}/actions"


def _environment_scope(repository_id: int, environment: str) -> str:
    ensure.not_blank(environment, "environment")
    return f"{repository_id_path(repository_id)}/environments/{quote(environment, safe='')}"


def _organization_scope(organization: str) -> str:
    ensure.not_blank(organization, "organization")
    return f"/orgs/{organization}/actions"


def _named(kind: str, value: str) -> str:
    ensure.not_blank(value, kind)
    return value


class _SecretsApi(ApiClient):
    """Secret operations shared by every scope; public methods pick the path."""

    item_model: type[Secret] = Secret
    collection_model: type[AnySecretsCollection] = SecretsCollection

    async def _public_key(self, scope: str) -> SecretsPublicKey:
        return await self._api.get(f"{scope}/secrets/public-key", SecretsPublicKey)

    async def _all(self, scope: str, options: ApiOptions | None) -> AnySecretsCollection:
        pages = await self._api.get_all_pages(
            f"{scope}/secrets", self.collection_model, options=options
        )
        return self.collection_model.combine(pages)

    async def _one(self, scope: str, secret_name: str) -> Secret:
        return await self._api.get(
            f"{scope}/secrets/{_named('secret_name', secret_name)}", self.item_model
        )

    async def _upsert(self, scope: str, secret_name: str, upsert: UpsertSecret) -> Secret:
        path = f"{scope}/secrets/{_named('secret_name', secret_name)}"
        ensure.not_none(upsert, "upsert_secret")
        ensure.not_blank(upsert.encrypted_value, "encrypted_value")
        ensure.not_blank(upsert.key_id, "key_id")
        # 201 on create, 204 on update; neither carries the secret
        await self._api.put(path, upsert)
        return await self._api.get(path, self.item_model)

    async def _delete(self, scope: str, secret_name: str) -> None:
        await self._api.delete(f"{scope}/secrets/{_named('secret_name', secret_name)}")


class _VariablesApi(ApiClient):
    """Variable operations shared by every scope.

    Create is POST on the collection; update is PATCH on the item. Both answer
    without a body, so the stored variable is read back.
    """

    item_model: type[Variable] = Variable
    collection_model: type[AnyVariablesCollection] = VariablesCollection

    async def _all(self, scope: str, options: ApiOptions | None) -> AnyVariablesCollection:
        pages = await self._api.get_all_pages(
            f"{scope}/variables", self.collection_model, options=options
        )
        return self.collection_model.combine(pages)

    async def _one(self, scope: str, variable_name: str) -> Variable:
        return await self._api.get(
            f"{scope}/variables/{_named('variable_name', variable_name)}", self.item_model
        )

    async def _create(self, scope: str, new_variable: NewVariable) -> Variable:
        ensure.not_none(new_variable, "new_variable")
        ensure.not_blank(new_variable.name, "new_variable.name")
        await self._api.post(f"{scope}/variables", new_variable)
        return await self._one(scope, new_variable.name)

    async def _update(self, scope: str, variable_name: str, update: VariableUpdate) -> Variable:
        path = f"{scope}/variables/{_named('variable_name', variable_name)}"
        ensure.not_none(update, "variable_update")
        await self._api.patch(path, update)
        return await self._one(scope, update.name or variable_name)

    async def _delete(self, scope: str, variable_name: str) -> None:
        await self._api.delete(f"{scope}/variables/{_named('variable_name', variable_name)}")


# =============================================================================
# Repository
# =============================================================================


class RepositorySecretsClient(_SecretsApi):
    async def get_public_key(self, owner: str, name: str) -> SecretsPublicKey:
        """Key used to encrypt secret values for this repository."""
        return await self._public_key(_repository_scope(owner, name))

    async def get_all(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> SecretsCollection:
        return await self._all(_repository_scope(owner, name), options)

    async def get(self, owner: str, name: str, secret_name: str) -> Secret:
        return await self._one(_repository_scope(owner, name), secret_name)

    async def create_or_update(
        self, owner: str, name: str, secret_name: str, upsert_secret: UpsertSecret
    ) -> Secret:
        """Create or replace a secret.

        Args:
            owner: Repository owner
            name: Repository name
            secret_name: Secret name
            upsert_secret: Sealed-box encrypted value and the key id used

        Returns:
            The stored Secret (name and timestamps only)
        """
        return await self._upsert(_repository_scope(owner, name), secret_name, upsert_secret)

    async def delete(self, owner: str, name: str, secret_name: str) -> None:
        await self._delete(_repository_scope(owner, name), secret_name)


class RepositoryVariablesClient(_VariablesApi):
    async def get_all(
        self, owner: str, name: str, options: ApiOptions | None = None
    ) -> VariablesCollection:
        return await self._all(_repository_scope(owner, name), options)

    async def get(self, owner: str, name: str, variable_name: str) -> Variable:
        return await self._one(_repository_scope(owner, name), variable_name)

    async def create(self, owner: str, name: str, new_variable: NewVariable) -> Variable:
        return await self._create(_repository_scope(owner, name), new_variable)

    async def update(
        self, owner: str, name: str, variable_name: str, variable_update: VariableUpdate
    ) -> Variable:
        return await self._update(_repository_scope(owner, name), variable_name, variable_update)

    async def delete(self, owner: str, name: str, variable_name: str) -> None:
        await self._delete(_repository_scope(owner, name), variable_name)


# =============================================================================
# Environment
# =============================================================================


class EnvironmentSecretsClient(_SecretsApi):
    """Secrets scoped to a deployment environment of a repository (by repository id)."""

    async def get_public_key(self, repository_id: int, environment: str) -> SecretsPublicKey:
        return await self._public_key(_environment_scope(repository_id, environment))

    async def get_all(
        self, repository_id: int, environment: str, options: ApiOptions | None = None
    ) -> SecretsCollection:
        return await self._all(_environment_scope(repository_id, environment), options)

    async def get(self, repository_id: int, environment: str, secret_name: str) -> Secret:
        return await self._one(_environment_scope(repository_id, environment), secret_name)

    async def create_or_update(
        self,
        repository_id: int,
        environment: str,
        secret_name: str,
        upsert_secret: UpsertSecret,
    ) -> Secret:
        return await self._upsert(
            _environment_scope(repository_id, environment), secret_name, upsert_secret
        )

    async def delete(self, repository_id: int, environment: str, secret_name: str) -> None:
        await self._delete(_environment_scope(repository_id, environment), secret_name)


class EnvironmentVariablesClient(_VariablesApi):
    async def get_all(
        self, repository_id: int, environment: str, options: ApiOptions | None = None
    ) -> VariablesCollection:
        return await self._all(_environment_scope(repository_id, environment), options)

    async def get(self, repository_id: int, environment: str, variable_name: str) -> Variable:
        return await self._one(_environment_scope(repository_id, environment), variable_name)

    async def create(
        self, repository_id: int, environment: str, new_variable: NewVariable
    ) -> Variable:
        return await self._create(_environment_scope(repository_id, environment), new_variable)

    async def update(
        self,
        repository_id: int,
        environment: str,
        variable_name: str,
        variable_update: VariableUpdate,
    ) -> Variable:
        return await self._update(
            _environment_scope(repository_id, environment), variable_name, variable_update
        )

    async def delete(self, repository_id: int, environment: str, variable_name: str) -> None:
        await self._delete(_environment_scope(repository_id, environment), variable_name)


# =============================================================================
# Organization
# =============================================================================


class _SelectedRepositoriesMixin:
    """Repository access lists for organization secrets/variables with
    ``visibility: selected``."""

    kind: str

    def _repositories_path(self, organization: str, item_name: str) -> str:
        scope = _organization_scope(organization)
        item = _named(f"{self.kind}_name", item_name)
        return f"{scope}/{self.kind}s/{item}/repositories"

    async def _get_selected(
        self, organization: str, item_name: str, options: ApiOptions | None
    ) -> SelectedRepositoryCollection:
        pages = await self._api.get_all_pages(
            self._repositories_path(organization, item_name),
            SelectedRepositoryCollection,
            options=options,
        )
        return SelectedRepositoryCollection.combine(pages)

    async def _set_selected(
        self, organization: str, item_name: str, repositories: SelectedRepositoriesUpdate
    ) -> None:
        ensure.not_none(repositories, "repositories")
        await self._api.put(self._repositories_path(organization, item_name), repositories)

    async def _add_selected(self, organization: str, item_name: str, repository_id: int) -> None:
        ensure.positive(repository_id, "repository_id")
        await self._api.put(
            f"{self._repositories_path(organization, item_name)}/{repository_id}"
        )

    async def _remove_selected(
        self, organization: str, item_name: str, repository_id: int
    ) -> None:
        ensure.positive(repository_id, "repository_id")
        await self._api.delete(
            f"{self._repositories_path(organization, item_name)}/{repository_id}"
        )


class OrganizationSecretsClient(_SelectedRepositoriesMixin, _SecretsApi):
    """Organization secrets, including which repositories may read them."""

    kind = "secret"
    item_model = OrganizationSecret
    collection_model = OrganizationSecretsCollection

    async def get_public_key(self, organization: str) -> SecretsPublicKey:
        return await self._public_key(_organization_scope(organization))

    async def get_all(
        self, organization: str, options: ApiOptions | None = None
    ) -> OrganizationSecretsCollection:
        return await self._all(_organization_scope(organization), options)

    async def get(self, organization: str, secret_name: str) -> OrganizationSecret:
        return await self._one(_organization_scope(organization), secret_name)

    async def create_or_update(
        self, organization: str, secret_name: str, upsert_secret: UpsertOrganizationSecret
    ) -> OrganizationSecret:
        """Create or replace an organization secret.

        ``selected_repository_ids`` only applies with ``visibility=selected``.
        """
        return await self._upsert(_organization_scope(organization), secret_name, upsert_secret)

    async def delete(self, organization: str, secret_name: str) -> None:
        await self._delete(_organization_scope(organization), secret_name)

    async def get_selected_repositories_for_secret(
        self, organization: str, secret_name: str, options: ApiOptions | None = None
    ) -> SelectedRepositoryCollection:
        return await self._get_selected(organization, secret_name, options)

    async def set_selected_repositories_for_secret(
        self, organization: str, secret_name: str, repositories: SelectedRepositoriesUpdate
    ) -> None:
        await self._set_selected(organization, secret_name, repositories)

    async def add_repo_to_organization_secret(
        self, organization: str, secret_name: str, repository_id: int
    ) -> None:
        await self._add_selected(organization, secret_name, repository_id)

    async def remove_repo_from_organization_secret(
        self, organization: str, secret_name: str, repository_id: int
    ) -> None:
        await self._remove_selected(organization, secret_name, repository_id)


class OrganizationVariablesClient(_SelectedRepositoriesMixin, _VariablesApi):
    """Organization variables, including which repositories may read them."""

    kind = "variable"
    item_model = OrganizationVariable
    collection_model = OrganizationVariablesCollection

    async def get_all(
        self, organization: str, options: ApiOptions | None = None
    ) -> OrganizationVariablesCollection:
        return await self._all(_organization_scope(organization), options)

    async def get(self, organization: str, variable_name: str) -> OrganizationVariable:
        return await self._one(_organization_scope(organization), variable_name)

    async def create(
        self, organization: str, new_variable: NewOrganizationVariable
    ) -> OrganizationVariable:
        return await self._create(_organization_scope(organization), new_variable)

    async def update(
        self,
        organization: str,
        variable_name: str,
        variable_update: OrganizationVariableUpdate,
    ) -> OrganizationVariable:
        return await self._update(
            _organization_scope(organization), variable_name, variable_update
        )

    async def delete(self, organization: str, variable_name: str) -> None:
        await self._delete(_organization_scope(organization), variable_name)

    async def get_selected_repositories_for_variable(
        self, organization: str, variable_name: str, options: ApiOptions | None = None
    ) -> SelectedRepositoryCollection:
        return await self._get_selected(organization, variable_name, options)

    async def set_selected_repositories_for_variable(
        self,
        organization: str,
        variable_name: str,
        repositories: SelectedRepositoriesUpdate,
    ) -> None:
        await self._set_selected(organization, variable_name, repositories)

    async def add_repo_to_organization_variable(
        self, organization: str, variable_name: str, repository_id: int
    ) -> None:
        await self._add_selected(organization, variable_name, repository_id)

    async def remove_repo_from_organization_variable(
        self, organization: str, variable_name: str, repository_id: int
    ) -> None:
        await self._remove_selected(organization, variable_name, repository_id)
