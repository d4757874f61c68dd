"""Version information for hubkit.

Single source of truth for version number.
Follows PEP 440 and semantic versioning principles.
"""

__version__ = "0.4.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))

# Version history:
# 0.4.0 - Organization/environment variables, selected repository management
# 0.3.0 - Pull request reviews, review comments, review requests
# 0.2.0 - Checks API, issues, labels, milestones
# 0.1.0 - Initial release (Actions runners, runner groups, workflows)
