"""
Configuration for the roster harvest.

Provides a single configuration model that covers every data source:
- git history (contributors)
- Crowdin project members (translators)
- GitHub Sponsors (supporters)
- Override files (hand-maintained additions and corrections)

This module uses Pydantic for validation and supports:
- Loading from roster.yaml
- Credentials from the process environment, read once at startup
- CLI argument overrides
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError
from .models import Group


# Default config file name
DEFAULT_CONFIG_FILE = "roster.yaml"

# Environment variables holding credentials and the repository slug
ENV_REPOSITORY = "GITHUB_REPOSITORY"
ENV_CROWDIN_PROJECT = "CROWDIN_PROJECTID"
ENV_CROWDIN_TOKEN = "CROWDIN_TOKEN"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"


class SupportLink(BaseModel):
    """A place where people can support the project."""

    name: str
    url: str


class ProjectConfig(BaseModel):
    """Project-level configuration and document texts."""

    title: str = "Contributors & Supporters"
    # GitHub "owner/name" slug, used for the contributors graph link
    repository: str | None = None
    contributors_intro: str = (
        "Thanks go to the following people, who have either wrangled with code "
        "or wrangled with image editors while saving often in the hopes of not "
        "losing any changes:"
    )
    translators_intro: str = (
        "Much thanks go out to all volunteer translators who have taken some "
        "time to submit translations on Crowdin."
    )
    supporters_intro: str = (
        "Huge thanks go out to the following people for supporting the project:"
    )
    support_links: list[SupportLink] = Field(default_factory=list)


class GitSourceConfig(BaseModel):
    """Local git history source."""

    repo_dir: str = "."


class CrowdinConfig(BaseModel):
    """Crowdin project members source."""

    project_id: str | None = None
    token: str | None = None
    page_size: int = Field(default=100, ge=1, le=500)


class GitHubSponsorsConfig(BaseModel):
    """GitHub Sponsors source."""

    token: str | None = None
    page_size: int = Field(default=100, ge=1, le=100)


class SourcesConfig(BaseModel):
    """All data sources configuration."""

    git: GitSourceConfig = Field(default_factory=GitSourceConfig)
    crowdin: CrowdinConfig = Field(default_factory=CrowdinConfig)
    github: GitHubSponsorsConfig = Field(default_factory=GitHubSponsorsConfig)


class OverridesConfig(BaseModel):
    """Override files, one per group, relative to ``directory``."""

    directory: str = "tools"
    contributor: str = "patch-contributors-git.json"
    translator: str = "patch-contributors-crowdin.json"
    github_sponsor: str = "patch-supporters-github.json"
    patreon_sponsor: str = "patch-supporters-patreon.json"

    def filename_for(self, group: Group) -> str:
        """Get the override file name for a group."""
        return getattr(self, group.name.lower())


class RosterConfig(BaseModel):
    """Root configuration model for the roster harvest."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    overrides: OverridesConfig = Field(default_factory=OverridesConfig)
    # Seconds per HTTP request; None blocks until the server answers
    http_timeout: float | None = None
    # Internal: path to config file (not serialized)
    _config_path: Path | None = None

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RosterConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to the YAML config file

        Returns:
            RosterConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If the file is not valid YAML or fails validation
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            config = cls.model_validate(data)
        except (yaml.YAMLError, ValidationError) as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        config._config_path = path
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RosterConfig":
        """Create config from dictionary."""
        return cls.model_validate(data)

    @classmethod
    def load(
        cls,
        config_path: Path | str | None = None,
        search_paths: list[Path | str] | None = None,
    ) -> "RosterConfig":
        """Load configuration with fallback search.

        Args:
            config_path: Explicit path to config file
            search_paths: List of directories to search for roster.yaml

        Returns:
            RosterConfig instance (defaults if no config found)
        """
        if config_path:
            return cls.from_yaml(config_path)

        if search_paths is None:
            search_paths = [Path.cwd()]

        for search_dir in search_paths:
            config_file = Path(search_dir) / DEFAULT_CONFIG_FILE
            if config_file.exists():
                return cls.from_yaml(config_file)

        return cls()

    def with_env(self, environ: Mapping[str, str] | None = None) -> "RosterConfig":
        """Return a copy with credentials taken from the environment.

        Environment values win over values from the config file; empty
        variables are ignored.
        """
        if environ is None:
            environ = os.environ

        config = self.model_copy(deep=True)
        config._config_path = self._config_path

        if environ.get(ENV_REPOSITORY):
            config.project.repository = environ[ENV_REPOSITORY]
        if environ.get(ENV_CROWDIN_PROJECT):
            config.sources.crowdin.project_id = environ[ENV_CROWDIN_PROJECT]
        if environ.get(ENV_CROWDIN_TOKEN):
            config.sources.crowdin.token = environ[ENV_CROWDIN_TOKEN]
        if environ.get(ENV_GITHUB_TOKEN):
            config.sources.github.token = environ[ENV_GITHUB_TOKEN]

        return config

    def require_repository(self) -> str:
        """Get the repository slug or fail."""
        if not self.project.repository:
            raise ConfigError(
                f"No repository configured (set {ENV_REPOSITORY} or project.repository)"
            )
        return self.project.repository

    def require_crowdin(self) -> tuple[str, str]:
        """Get the Crowdin project id and token or fail."""
        crowdin = self.sources.crowdin
        if not crowdin.project_id:
            raise ConfigError(f"No Crowdin project id configured (set {ENV_CROWDIN_PROJECT})")
        if not crowdin.token:
            raise ConfigError(f"No Crowdin token configured (set {ENV_CROWDIN_TOKEN})")
        return crowdin.project_id, crowdin.token

    def require_github_token(self) -> str:
        """Get the GitHub token or fail."""
        if not self.sources.github.token:
            raise ConfigError(f"No GitHub token configured (set {ENV_GITHUB_TOKEN})")
        return self.sources.github.token

    def get_config_dir(self) -> Path | None:
        """Get the directory containing the config file."""
        return self._config_path.parent if self._config_path else None

    def get_overrides_dir(self) -> Path:
        """Get the override directory, relative to the config file if any."""
        directory = Path(self.overrides.directory)
        config_dir = self.get_config_dir()
        if not directory.is_absolute() and config_dir is not None:
            return config_dir / directory
        return directory

    def get_override_path(self, group: Group) -> Path:
        """Get the override file path for a group."""
        return self.get_overrides_dir() / self.overrides.filename_for(group)


def load_config(
    config_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> RosterConfig:
    """Load configuration and complete it from the environment.

    Args:
        config_path: Optional path to config file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        RosterConfig instance
    """
    return RosterConfig.load(config_path).with_env(environ)
