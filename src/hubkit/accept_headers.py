"""Media types sent in the Accept header.

Reference: https://docs.github.com/en/rest/using-the-rest-api/getting-started-with-the-rest-api#media-types
"""

DEFAULT = "application/vnd.github+json"

# v3 media type, pinned where responses must not drift with new defaults
STABLE_VERSION = "application/vnd.github.v3+json"

# Checks API preview (check runs and check suites)
CHECKS_API_PREVIEW = "application/vnd.github.antiope-preview+json"

# Projects (classic) preview
PROJECTS_API_PREVIEW = "application/vnd.github.inertia-preview+json"
