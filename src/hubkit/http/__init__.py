"""HTTP layer: transport, response metadata and typed request helpers."""

from .api_connection import ApiConnection, ApiOptions
from .api_info import ApiInfo, RateLimit, parse_link_header
from .connection import ApiResponse, Connection

__all__ = [
    "ApiConnection",
    "ApiInfo",
    "ApiOptions",
    "ApiResponse",
    "Connection",
    "RateLimit",
    "parse_link_header",
]
