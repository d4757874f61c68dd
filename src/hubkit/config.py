"""Configuration management with pydantic-settings for hubkit.

Loads (in order of precedence):
1. Environment variables
2. .env file in the working directory
3. Defaults

The config object is frozen and cached through ``get_config()``.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .__version__ import __version__

logger = logging.getLogger("hubkit.config")

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_API_VERSION",
    "HubkitConfig",
    "get_config",
    "reset_config",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"


class HubkitConfig(BaseSettings):
    """Configuration for hubkit clients.

    Attributes:
        github_token: Personal access token or app installation token. Optional,
            anonymous access works for public read endpoints.
        github_api_url: REST API root (GitHub Enterprise Server uses
            https://<host>/api/v3)
        github_api_version: Value of the X-GitHub-Api-Version header
        user_agent: User-Agent header sent with every request
        connect_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds
        write_timeout: Write timeout in seconds
        pool_timeout: Pool acquisition timeout in seconds
        follow_redirects: Follow 3xx responses by default
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format (json for production, text for development)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    github_token: SecretStr | None = Field(
        default=None,
        description="GitHub token sent as a Bearer credential",
    )
    github_api_url: str = Field(
        default=DEFAULT_API_URL,
        description="GitHub REST API root URL",
    )
    github_api_version: str = Field(
        default=DEFAULT_API_VERSION,
        min_length=1,
        description="REST API version pinned through X-GitHub-Api-Version",
    )
    user_agent: str = Field(
        default=f"hubkit/{__version__}",
        min_length=1,
        validation_alias="HUBKIT_USER_AGENT",
    )

    connect_timeout: float = Field(
        default=5.0, gt=0, le=300, validation_alias="HUBKIT_CONNECT_TIMEOUT"
    )
    read_timeout: float = Field(
        default=30.0, gt=0, le=300, validation_alias="HUBKIT_READ_TIMEOUT"
    )
    write_timeout: float = Field(
        default=5.0, gt=0, le=300, validation_alias="HUBKIT_WRITE_TIMEOUT"
    )
    pool_timeout: float = Field(
        default=5.0, gt=0, le=300, validation_alias="HUBKIT_POOL_TIMEOUT"
    )
    follow_redirects: bool = Field(
        default=True, validation_alias="HUBKIT_FOLLOW_REDIRECTS"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="HUBKIT_LOG_LEVEL"
    )
    log_format: Literal["json", "text"] = Field(
        default="json", validation_alias="HUBKIT_LOG_FORMAT"
    )

    @field_validator("github_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"GITHUB_API_URL must be an absolute http(s) URL: {v!r}")
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    def get_token(self) -> str | None:
        """Return the raw token, or None for anonymous access."""
        if self.github_token is None:
            return None
        return self.github_token.get_secret_value() or None


@lru_cache(maxsize=1)
def get_config() -> HubkitConfig:
    """Get global configuration singleton.

    First call loads from environment + .env file, subsequent calls return
    the cached instance.

    Returns:
        HubkitConfig singleton instance.

    Raises:
        ValidationError: If configuration values are invalid.

    Example:
        >>> config = get_config()
        >>> config.github_api_url
        'https://api.github.com'
        >>> get_config() is config
        True
    """
    return HubkitConfig()


def reset_config() -> None:
    """Reset configuration singleton for testing.

    Warning:
        Only use in test code. Production code should not reset config.
    """
    get_config.cache_clear()
