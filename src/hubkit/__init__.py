"""hubkit - async client for the GitHub REST API.

Provides:
- Typed endpoint clients (Actions, Checks, Issues, Pull Requests,
  Projects, Organizations, Repositories, Users)
- Link-header pagination with folded list responses
- Status-code aware boolean checks (membership, following, merged)
- Configuration via environment variables and .env
- Structured JSON logging and Prometheus metrics

Python Version: 3.10+ required
"""

from .__version__ import __version__
from .config import HubkitConfig, get_config, reset_config
from .exceptions import (
    AbuseError,
    ApiError,
    ApiValidationError,
    AuthorizationError,
    ForbiddenError,
    GitHubClientError,
    LegalRestrictionError,
    LoginAttemptsExceeded,
    NotFoundError,
    RateLimitExceeded,
    SecondaryRateLimitExceeded,
    TwoFactorRequiredError,
    TwoFactorType,
)
from .github_client import GitHubClient
from .http import ApiConnection, ApiInfo, ApiOptions, ApiResponse, Connection, RateLimit
from .logging_config import HubkitLogHandler, StructuredFormatter, configure_logging

__all__ = [
    "__version__",
    # Configuration
    "HubkitConfig",
    "get_config",
    "reset_config",
    # Logging
    "HubkitLogHandler",
    "StructuredFormatter",
    "configure_logging",
    # Client
    "GitHubClient",
    # HTTP
    "ApiConnection",
    "ApiInfo",
    "ApiOptions",
    "ApiResponse",
    "Connection",
    "RateLimit",
    # Errors
    "AbuseError",
    "ApiError",
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
]
