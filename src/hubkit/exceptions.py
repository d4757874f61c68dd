"""Exception hierarchy for GitHub REST API failures.

Every non-success response is mapped to exactly one exception class by
``error_from_response``. Transport failures (timeouts, refused connections)
surface as ``GitHubClientError`` wrapping the underlying httpx error.

    GitHubClientError
    └── ApiError
        ├── AuthorizationError
        │   └── TwoFactorRequiredError
        ├── ForbiddenError
        │   ├── RateLimitExceeded
        │   ├── SecondaryRateLimitExceeded
        │   ├── LoginAttemptsExceeded
        │   └── AbuseError
        ├── NotFoundError
        ├── ApiValidationError
        └── LegalRestrictionError
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

__all__ = [
    "AbuseError",
    "ApiError",
    "ApiErrorDetail",
    "ApiErrorItem",
    "ApiValidationError",
    "AuthorizationError",
    "ForbiddenError",
    "GitHubClientError",
    "LegalRestrictionError",
    "LoginAttemptsExceeded",
    "NotFoundError",
    "RateLimitExceeded",
    "SecondaryRateLimitExceeded",
    "TwoFactorRequiredError",
    "TwoFactorType",
    "error_from_response",
    "parse_two_factor_type",
]


class GitHubClientError(Exception):
    """Raised when a GitHub API request fails.

    Base class for every hubkit error; also wraps httpx transport errors.
    """

    pass


class ApiErrorItem(BaseModel):
    """One entry of the ``errors`` array on a 422 response."""

    model_config = ConfigDict(extra="allow")

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None


class ApiErrorDetail(BaseModel):
    """Error payload GitHub returns alongside 4xx/5xx responses."""

    model_config = ConfigDict(extra="allow")

    message: str | None = None
    documentation_url: str | None = None
    errors: list[ApiErrorItem] = Field(default_factory=list)

    @classmethod
    def from_body(cls, body: str) -> "ApiErrorDetail":
        """Parse a response body, falling back to the raw text as message."""
        if not body:
            return cls()
        try:
            data = json.loads(body)
        except ValueError:
            return cls(message=body)
        if not isinstance(data, dict):
            return cls(message=body)
        try:
            return cls.model_validate(data)
        except ValidationError:
            message = data.get("message")
            return cls(message=message if isinstance(message, str) else body)


class ApiError(GitHubClientError):
    """Raised when GitHub answers with an error status code.

    Attributes:
        status_code: HTTP status of the failed response (None when unknown)
        error: Parsed error payload
        headers: Response headers
    """

    DEFAULT_MESSAGE = "An error occurred with this API request"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        error: ApiErrorDetail | None = None,
        headers: httpx.Headers | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error or ApiErrorDetail(message=message)
        self.headers = headers if headers is not None else httpx.Headers()
        super().__init__(message or self.error.message or self.DEFAULT_MESSAGE)

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def from_response(cls, response: httpx.Response, **kwargs: Any) -> "ApiError":
        error = ApiErrorDetail.from_body(response.text)
        return cls(
            status_code=response.status_code,
            error=error,
            headers=response.headers,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={str(self)!r})"


class AuthorizationError(ApiError):
    """401: bad or missing credentials."""

    DEFAULT_MESSAGE = "You must be authenticated to access this resource"


class TwoFactorType(str, Enum):
    """Second factor GitHub asks for in the X-GitHub-OTP header."""

    NONE = "none"
    UNKNOWN = "unknown"
    SMS = "sms"
    APP = "app"


class TwoFactorRequiredError(AuthorizationError):
    """401 with ``X-GitHub-OTP: required; <type>``."""

    DEFAULT_MESSAGE = "Two-factor authentication code is required"

    def __init__(
        self,
        *args: Any,
        two_factor_type: TwoFactorType = TwoFactorType.UNKNOWN,
        **kwargs: Any,
    ) -> None:
        self.two_factor_type = two_factor_type
        super().__init__(*args, **kwargs)


class ForbiddenError(ApiError):
    """403 that is not one of the specialised rate-limit/abuse cases."""

    DEFAULT_MESSAGE = "Request forbidden"


def _header_int(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class RateLimitExceeded(ForbiddenError):
    """Primary rate limit exhausted.

    Attributes:
        limit: X-RateLimit-Limit
        remaining: X-RateLimit-Remaining
        reset_at: When the window resets (UTC), from X-RateLimit-Reset
    """

    DEFAULT_MESSAGE = "API rate limit exceeded"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.limit = _header_int(self.headers, "X-RateLimit-Limit")
        self.remaining = _header_int(self.headers, "X-RateLimit-Remaining")
        reset = _header_int(self.headers, "X-RateLimit-Reset")
        self.reset_at: datetime | None = (
            datetime.fromtimestamp(reset, tz=timezone.utc) if reset is not None else None
        )

    def __str__(self) -> str:
        message = super().__str__()
        if self.reset_at is None:
            return message
        return f"{message}. Resets at {self.reset_at.isoformat()}"


class SecondaryRateLimitExceeded(ForbiddenError):
    """Secondary (concurrency / content creation) rate limit hit.

    Attributes:
        retry_after: Seconds from the Retry-After header, if GitHub sent one
    """

    DEFAULT_MESSAGE = "You have exceeded a secondary rate limit"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.retry_after = _header_int(self.headers, "Retry-After")


class LoginAttemptsExceeded(ForbiddenError):
    """Too many failed login attempts for these credentials."""

    DEFAULT_MESSAGE = "Maximum number of login attempts exceeded"


class AbuseError(ForbiddenError):
    """Legacy abuse detection response."""

    DEFAULT_MESSAGE = "Request Forbidden - Abuse Detection"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.retry_after = _header_int(self.headers, "Retry-After")


class NotFoundError(ApiError):
    """404: resource missing, or hidden from the current credentials."""


class ApiValidationError(ApiError):
    """422: request body failed GitHub's validation."""

    DEFAULT_MESSAGE = "Validation Failed"


class LegalRestrictionError(ApiError):
    """451: resource unavailable for legal reasons (DMCA takedown)."""

    DEFAULT_MESSAGE = "Resource taken down due to a DMCA notice"


def parse_two_factor_type(headers: httpx.Headers) -> TwoFactorType:
    """Read the second factor GitHub expects from ``X-GitHub-OTP``."""
    value = headers.get("X-GitHub-OTP")
    if not value:
        return TwoFactorType.NONE
    parts = [part.strip() for part in value.split(";") if part.strip()]
    if not parts or parts[0] != "required":
        return TwoFactorType.NONE
    second = parts[1] if len(parts) > 1 else None
    if second == "sms":
        return TwoFactorType.SMS
    if second == "app":
        return TwoFactorType.APP
    return TwoFactorType.UNKNOWN


def _forbidden_error(response: httpx.Response) -> ApiError:
    body = response.text.lower()
    if "rate limit exceeded" in body:
        return RateLimitExceeded.from_response(response)
    if "secondary rate limit" in body:
        return SecondaryRateLimitExceeded.from_response(response)
    if "number of login attempts exceeded" in body:
        return LoginAttemptsExceeded.from_response(response)
    if "abuse-rate-limits" in body or "abuse detection mechanism" in body:
        return AbuseError.from_response(response)
    return ForbiddenError.from_response(response)


def error_from_response(response: httpx.Response) -> ApiError:
    """Map an error response to the matching exception instance.

    Args:
        response: httpx response with status >= 400

    Returns:
        ApiError subclass instance (not raised)
    """
    status = response.status_code
    if status == 401:
        two_factor = parse_two_factor_type(response.headers)
        if two_factor is TwoFactorType.NONE:
            return AuthorizationError.from_response(response)
        return TwoFactorRequiredError.from_response(response, two_factor_type=two_factor)
    if status == 403:
        return _forbidden_error(response)
    if status == 404:
        return NotFoundError.from_response(response)
    if status == 422:
        return ApiValidationError.from_response(response)
    if status == 451:
        return LegalRestrictionError.from_response(response)
    return ApiError.from_response(response)
