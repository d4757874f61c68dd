"""
Prometheus metrics definitions for hubkit.

Tracks REST API traffic issued through the shared connection and the
rate-limit quota GitHub reports back.

Naming conventions: snake_case, hubkit_ prefix.
"""

from prometheus_client import Counter, Gauge, Histogram

# ==============================================================================
# COUNTERS
# ==============================================================================

api_requests_total = Counter(
    "hubkit_api_requests_total",
    "Total GitHub REST API requests",
    ["method", "status"],
    # status: HTTP status code, or "error" for transport failures
)

api_errors_total = Counter(
    "hubkit_api_errors_total",
    "GitHub REST API responses mapped to exceptions",
    ["error_type"],
    # error_type: exception class name (NotFoundError, RateLimitExceeded, ...)
)

# ==============================================================================
# GAUGES
# ==============================================================================

rate_limit_remaining = Gauge(
    "hubkit_rate_limit_remaining",
    "Requests remaining in the current primary rate limit window",
)

# ==============================================================================
# HISTOGRAMS
# ==============================================================================

api_request_duration_seconds = Histogram(
    "hubkit_api_request_duration_seconds",
    "Time spent waiting for GitHub REST API responses",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)
