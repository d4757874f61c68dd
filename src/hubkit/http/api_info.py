"""Response metadata parsed from GitHub headers.

Reference: https://docs.github.com/en/rest/using-the-rest-api/rate-limits-for-the-rest-api
"""

import copy
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime

import httpx

_LINK_PATTERN = re.compile(r'<([^>]+)>\s*;\s*rel="([^"]+)"')


def parse_link_header(link_header: str | None) -> dict[str, str]:
    """Parse a Link header into a rel -> URL mapping.

    Format: <https://api.github.com/...?page=2>; rel="next", <...>; rel="last"

    Args:
        link_header: Raw Link header value

    Returns:
        Dict keyed by rel ("next", "last", "first", "prev")
    """
    if not link_header:
        return {}
    links: dict[str, str] = {}
    for part in link_header.split(","):
        match = _LINK_PATTERN.search(part.strip())
        if match:
            links[match.group(2)] = match.group(1)
    return links


def _parse_scopes(value: str | None) -> list[str]:
    if not value:
        return []
    return [scope.strip() for scope in value.split(",") if scope.strip()]


def _int_header(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class RateLimit:
    """Primary rate limit snapshot from X-RateLimit-* headers."""

    limit: int
    remaining: int
    reset: int  # epoch seconds

    @property
    def reset_at(self) -> datetime:
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "RateLimit | None":
        limit = _int_header(headers, "X-RateLimit-Limit")
        remaining = _int_header(headers, "X-RateLimit-Remaining")
        reset = _int_header(headers, "X-RateLimit-Reset")
        if limit is None and remaining is None and reset is None:
            return None
        return cls(limit=limit or 0, remaining=remaining or 0, reset=reset or 0)


@dataclass
class ApiInfo:
    """Metadata GitHub attaches to every response.

    Attributes:
        links: Pagination links keyed by rel
        oauth_scopes: Scopes granted to the token (X-OAuth-Scopes)
        accepted_oauth_scopes: Scopes the endpoint accepts (X-Accepted-OAuth-Scopes)
        etag: Entity tag for conditional requests
        rate_limit: Primary rate limit state, None when headers are absent
        server_time_difference: Server Date minus local clock
    """

    links: dict[str, str] = field(default_factory=dict)
    oauth_scopes: list[str] = field(default_factory=list)
    accepted_oauth_scopes: list[str] = field(default_factory=list)
    etag: str | None = None
    rate_limit: RateLimit | None = None
    server_time_difference: timedelta = timedelta(0)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiInfo":
        headers = response.headers
        server_time_difference = timedelta(0)
        date_header = headers.get("Date")
        if date_header:
            try:
                server_time = parsedate_to_datetime(date_header)
            except (TypeError, ValueError):
                server_time = None
            if server_time is not None and server_time.tzinfo is not None:
                server_time_difference = server_time - datetime.now(timezone.utc)

        return cls(
            links=parse_link_header(headers.get("Link")),
            oauth_scopes=_parse_scopes(headers.get("X-OAuth-Scopes")),
            accepted_oauth_scopes=_parse_scopes(headers.get("X-Accepted-OAuth-Scopes")),
            etag=headers.get("ETag"),
            rate_limit=RateLimit.from_headers(headers),
            server_time_difference=server_time_difference,
        )

    @property
    def next_page_url(self) -> str | None:
        return self.links.get("next")

    def clone(self) -> "ApiInfo":
        """Return an independent copy safe to hand to callers."""
        return copy.deepcopy(self)
