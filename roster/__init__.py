"""
Roster - Tools for harvesting a project's contributors and supporters.

This package provides a CLI to:
- Collect code contributors from local git history
- Collect translators from a Crowdin project
- Collect sponsors from GitHub Sponsors
- Merge hand-maintained override files (including Patreon patrons)
- Generate a Markdown page and a JSON document

Configuration is managed through roster.yaml and environment variables.
"""

__version__ = "1.0.0"

from .config import RosterConfig, load_config
from .crowdin import CrowdinFetcher, fetch_translators
from .exceptions import (
    ConfigError,
    GitCommandError,
    HTTPStatusError,
    OverrideFileError,
    RosterError,
    TransportError,
    UnexpectedResponseError,
)
from .git import GitContributorsFetcher, fetch_contributors
from .github import GitHubSponsorsFetcher, fetch_sponsors
from .models import Group, Report
from .overrides import load_overrides, merge_overrides
from .report import harvest, write_outputs

__all__ = [
    # Config
    "RosterConfig",
    "load_config",
    # Sources
    "CrowdinFetcher",
    "GitContributorsFetcher",
    "GitHubSponsorsFetcher",
    "fetch_contributors",
    "fetch_sponsors",
    "fetch_translators",
    # Overrides
    "load_overrides",
    "merge_overrides",
    # Report
    "Group",
    "Report",
    "harvest",
    "write_outputs",
    # Errors
    "ConfigError",
    "GitCommandError",
    "HTTPStatusError",
    "OverrideFileError",
    "RosterError",
    "TransportError",
    "UnexpectedResponseError",
]
