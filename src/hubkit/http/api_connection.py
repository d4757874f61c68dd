"""Typed request layer shared by every endpoint client.

ApiConnection turns decoded responses into pydantic models and walks
Link-header pagination. Endpoint clients never touch httpx directly.
"""

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel

from .connection import ApiResponse, Connection, Params

logger = logging.getLogger("hubkit.http.api_connection")

__all__ = ["ApiConnection", "ApiOptions"]

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ApiOptions:
    """Pagination options for list endpoints.

    Attributes:
        page_size: Items per page (per_page)
        page_count: Stop after this many pages
        start_page: First page to request (page)
    """

    page_size: int | None = None
    page_count: int | None = None
    start_page: int | None = None

    def __post_init__(self) -> None:
        for name in ("page_size", "page_count", "start_page"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")

    def apply(self, params: Params) -> dict[str, Any]:
        """Return a copy of params with per_page/page added."""
        merged = dict(params or {})
        if self.page_size is not None:
            merged["per_page"] = self.page_size
        if self.start_page is not None:
            merged["page"] = self.start_page
        return merged

    def should_continue(self, pages_fetched: int) -> bool:
        return self.page_count is None or pages_fetched < self.page_count


def _parse(model: type[ModelT] | None, body: Any) -> Any:
    if model is None or body is None:
        return body
    return model.model_validate(body)


class ApiConnection:
    """Wraps a Connection with model parsing and pagination.

    Attributes:
        connection: The underlying transport
    """

    def __init__(self, connection: Connection) -> None:
        if connection is None:
            raise ValueError("connection must not be None")
        self.connection = connection

    async def get(
        self,
        path: str,
        model: type[ModelT] | None = None,
        params: Params = None,
        accepts: str | None = None,
    ) -> Any:
        """GET a single resource.

        Args:
            path: API path
            model: Model to parse the body into (raw JSON when None)
            params: Query parameters
            accepts: Accept header override

        Returns:
            Parsed model instance, or decoded JSON when no model is given
        """
        response = await self.connection.get(path, params=params, accepts=accepts)
        return _parse(model, response.body)

    async def get_raw(
        self, path: str, params: Params = None, accepts: str | None = None
    ) -> bytes:
        return await self.connection.get_raw(path, params=params, accepts=accepts)

    async def _pages(
        self,
        path: str,
        params: Params,
        accepts: str | None,
        options: ApiOptions | None,
    ) -> list[ApiResponse]:
        options = options or ApiOptions()
        responses: list[ApiResponse] = []
        current_path: str = path
        current_params: Params = options.apply(params)

        while options.should_continue(len(responses)):
            response = await self.connection.get(
                current_path, params=current_params, accepts=accepts
            )
            responses.append(response)

            next_url = response.api_info.next_page_url
            if not next_url:
                break
            if not self.connection.owns_url(next_url):
                logger.warning(
                    "Rejecting Link header URL not matching base_url: %.100s", next_url
                )
                break

            # Query string is embedded in the Link URL
            current_path = next_url
            current_params = None
            logger.debug("Paginating: page %d fetched for %s", len(responses), path)

        return responses

    async def get_all(
        self,
        path: str,
        model: type[ModelT] | None = None,
        params: Params = None,
        accepts: str | None = None,
        options: ApiOptions | None = None,
    ) -> list[Any]:
        """GET every page of a JSON-array endpoint and concatenate the items.

        Args:
            path: API path
            model: Item model (raw JSON items when None)
            params: Query parameters
            accepts: Accept header override
            options: Page size, page count and start page

        Returns:
            Items from all pages, in page order
        """
        items: list[Any] = []
        for response in await self._pages(path, params, accepts, options):
            body = response.body or []
            if not isinstance(body, list):
                body = [body]
            items.extend(_parse(model, item) for item in body)
        return items

    async def get_all_pages(
        self,
        path: str,
        model: type[ModelT],
        params: Params = None,
        accepts: str | None = None,
        options: ApiOptions | None = None,
    ) -> list[ModelT]:
        """GET every page of a wrapper endpoint ({"total_count": N, "<items>": [...]}).

        Returns:
            One parsed page model per page; callers fold them with
            ``ListResponse.combine``
        """
        return [
            model.model_validate(response.body or {})
            for response in await self._pages(path, params, accepts, options)
        ]

    async def post(
        self,
        path: str,
        body: Any = None,
        model: type[ModelT] | None = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> Any:
        response = await self.connection.post(path, body, accepts=accepts, params=params)
        return _parse(model, response.body)

    async def put(
        self,
        path: str,
        body: Any = None,
        model: type[ModelT] | None = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> Any:
        response = await self.connection.put(path, body, accepts=accepts, params=params)
        return _parse(model, response.body)

    async def patch(
        self,
        path: str,
        body: Any = None,
        model: type[ModelT] | None = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> Any:
        response = await self.connection.patch(path, body, accepts=accepts, params=params)
        return _parse(model, response.body)

    async def delete(
        self,
        path: str,
        body: Any = None,
        model: type[ModelT] | None = None,
        accepts: str | None = None,
    ) -> Any:
        """DELETE a resource; most endpoints answer 204 and this returns None."""
        response = await self.connection.delete(path, body, accepts=accepts)
        return _parse(model, response.body)
