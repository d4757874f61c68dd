"""Low-level GitHub REST transport.

One long-lived httpx.AsyncClient per Connection. Every request goes through
``Connection.send`` which applies default headers, serializes JSON bodies,
records metrics and rate-limit state, and maps error statuses to the
exception hierarchy in ``hubkit.exceptions``.

No retries, no backoff, no caching: a request either succeeds or raises.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from ..__version__ import __version__
from ..config import DEFAULT_API_URL, DEFAULT_API_VERSION, HubkitConfig, get_config
from ..exceptions import GitHubClientError, error_from_response
from ..metrics import (
    api_errors_total,
    api_request_duration_seconds,
    api_requests_total,
    rate_limit_remaining,
)
from .api_info import ApiInfo

logger = logging.getLogger("hubkit.http.connection")

__all__ = ["ApiResponse", "Connection"]

Params = Mapping[str, Any] | None


@dataclass
class ApiResponse:
    """A decoded response.

    Attributes:
        status_code: HTTP status
        headers: Response headers
        body: Decoded JSON, text for non-JSON responses, None when empty
        content: Raw response bytes
        api_info: Metadata parsed from the headers
    """

    status_code: int
    headers: httpx.Headers
    body: Any
    content: bytes
    api_info: ApiInfo


class Connection:
    """GitHub REST transport using httpx with Bearer token auth.

    Attributes:
        base_url: API root without trailing slash

    Example:
        >>> async with Connection("ghp_token") as connection:
        ...     response = await connection.get("/user")
        ...     response.body["login"]
    """

    BASE_URL = DEFAULT_API_URL
    DEFAULT_ACCEPT = "application/vnd.github+json"

    CONNECT_TIMEOUT = 5.0  # seconds
    READ_TIMEOUT = 30.0  # seconds
    WRITE_TIMEOUT = 5.0  # seconds
    POOL_TIMEOUT = 5.0  # seconds

    # Warn once remaining quota drops below this share of the limit
    RATE_LIMIT_WARNING_RATIO = 0.10

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        *,
        api_version: str = DEFAULT_API_VERSION,
        user_agent: str | None = None,
        timeout: httpx.Timeout | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the connection.

        Args:
            token: GitHub token; omit for anonymous access
            base_url: API root (default: https://api.github.com)
            api_version: Value of X-GitHub-Api-Version
            user_agent: User-Agent header (default: hubkit/<version>)
            timeout: httpx timeout (default: 5s connect/write/pool, 30s read)
            follow_redirects: Default redirect policy for requests
            transport: Custom httpx transport (tests use httpx.MockTransport)

        Raises:
            ValueError: If base_url is not an absolute http(s) URL
        """
        base_url = (base_url or self.BASE_URL).rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an absolute http(s) URL: {base_url!r}")
        self.base_url = base_url
        self.follow_redirects = follow_redirects
        self._last_api_info: ApiInfo | None = None

        headers = {
            "Accept": self.DEFAULT_ACCEPT,
            "X-GitHub-Api-Version": api_version,
            "User-Agent": user_agent or f"hubkit/{__version__}",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout
            or httpx.Timeout(
                connect=self.CONNECT_TIMEOUT,
                read=self.READ_TIMEOUT,
                write=self.WRITE_TIMEOUT,
                pool=self.POOL_TIMEOUT,
            ),
            follow_redirects=follow_redirects,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: HubkitConfig | None = None, **kwargs: Any) -> "Connection":
        """Build a connection from HubkitConfig (default: get_config())."""
        config = config or get_config()
        return cls(
            config.get_token(),
            config.github_api_url,
            api_version=config.github_api_version,
            user_agent=config.user_agent,
            timeout=httpx.Timeout(
                connect=config.connect_timeout,
                read=config.read_timeout,
                write=config.write_timeout,
                pool=config.pool_timeout,
            ),
            follow_redirects=config.follow_redirects,
            **kwargs,
        )

    async def __aenter__(self) -> "Connection":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the httpx client and release connections."""
        await self._client.aclose()

    # --- Rate limit / response metadata ---

    def get_last_api_info(self) -> ApiInfo | None:
        """Return a copy of the metadata from the most recent response."""
        if self._last_api_info is None:
            return None
        return self._last_api_info.clone()

    def owns_url(self, url: str) -> bool:
        """True when an absolute URL lives under this connection's base URL."""
        return url.startswith(self.base_url + "/")

    def _record_api_info(self, response: httpx.Response) -> ApiInfo:
        api_info = ApiInfo.from_response(response)
        self._last_api_info = api_info

        rate_limit = api_info.rate_limit
        if rate_limit is not None:
            rate_limit_remaining.set(rate_limit.remaining)
            if rate_limit.limit and rate_limit.remaining < rate_limit.limit * self.RATE_LIMIT_WARNING_RATIO:
                logger.warning(
                    "Rate limit low: %d/%d remaining, resets at %s",
                    rate_limit.remaining,
                    rate_limit.limit,
                    rate_limit.reset_at.isoformat(),
                )
        return api_info

    # --- Core HTTP ---

    @staticmethod
    def _serialize(body: Any) -> Any:
        if body is None:
            return None
        to_payload = getattr(body, "to_payload", None)
        if callable(to_payload):
            return to_payload()
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", exclude_none=True, by_alias=True)
        return body

    def _resolve(self, path: str) -> str:
        if path.startswith(("http://", "https://")) and not self.owns_url(path):
            raise GitHubClientError(
                f"Refusing to send request outside {self.base_url}: {path[:100]}"
            )
        return path

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        content_type = response.headers.get("Content-Type", "")
        if "json" in content_type:
            try:
                return response.json()
            except ValueError:
                return response.text
        return response.text

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Params = None,
        body: Any = None,
        accepts: str | None = None,
        follow_redirects: bool | None = None,
    ) -> ApiResponse:
        """Send one request and decode the response.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path (e.g., /repos/owner/repo/issues) or an absolute URL
                under base_url (pagination links)
            params: Query parameters
            body: JSON body (request model, pydantic model, dict or list)
            accepts: Accept header override (preview media types)
            follow_redirects: Override the connection's redirect policy

        Returns:
            ApiResponse for any status below 400

        Raises:
            ApiError: (or a subclass) for status >= 400
            GitHubClientError: On transport failures
        """
        url = self._resolve(path)
        headers = {"Accept": accepts} if accepts else None
        payload = self._serialize(body)
        kwargs: dict[str, Any] = {}
        if payload is not None:
            kwargs["json"] = payload
        if follow_redirects is not None:
            kwargs["follow_redirects"] = follow_redirects

        logger.debug("github_request", extra={"method": method, "path": path})
        start = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                url,
                params=dict(params) if params else None,
                headers=headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            api_requests_total.labels(method=method, status="error").inc()
            raise GitHubClientError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            api_requests_total.labels(method=method, status="error").inc()
            raise GitHubClientError(f"HTTP error: {e}") from e
        finally:
            api_request_duration_seconds.labels(method=method).observe(
                time.perf_counter() - start
            )

        api_requests_total.labels(method=method, status=str(response.status_code)).inc()
        api_info = self._record_api_info(response)

        if response.status_code >= 400:
            error = error_from_response(response)
            api_errors_total.labels(error_type=type(error).__name__).inc()
            logger.info(
                "github_api_error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "error_type": type(error).__name__,
                },
            )
            raise error

        logger.debug(
            "github_response",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        return ApiResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=self._decode(response),
            content=response.content,
            api_info=api_info,
        )

    async def get(
        self,
        path: str,
        params: Params = None,
        accepts: str | None = None,
        follow_redirects: bool | None = None,
    ) -> ApiResponse:
        return await self.send(
            "GET", path, params=params, accepts=accepts, follow_redirects=follow_redirects
        )

    async def get_raw(
        self, path: str, params: Params = None, accepts: str | None = None
    ) -> bytes:
        """GET and return the undecoded body (log archives, redirects followed)."""
        response = await self.send(
            "GET", path, params=params, accepts=accepts, follow_redirects=True
        )
        return response.content

    async def post(
        self,
        path: str,
        body: Any = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> ApiResponse:
        return await self.send("POST", path, params=params, body=body, accepts=accepts)

    async def put(
        self,
        path: str,
        body: Any = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> ApiResponse:
        return await self.send("PUT", path, params=params, body=body, accepts=accepts)

    async def patch(
        self,
        path: str,
        body: Any = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> ApiResponse:
        return await self.send("PATCH", path, params=params, body=body, accepts=accepts)

    async def delete(
        self,
        path: str,
        body: Any = None,
        accepts: str | None = None,
        params: Params = None,
    ) -> ApiResponse:
        return await self.send("DELETE", path, params=params, body=body, accepts=accepts)
