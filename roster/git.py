"""
Harvest code and media contributors from local git history.

Runs ``git shortlog -sn --all`` and keeps the distinct author names; commit
counts are discarded. Every contributor links to the repository's
contributors graph on GitHub.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from .exceptions import GitCommandError

CONTRIBUTORS_URL_TEMPLATE = "https://github.com/{repository}/graphs/contributors"

# "<spaces><count><whitespace><name>", one author per line
SHORTLOG_LINE = re.compile(r"^[ \t]+([0-9]+)[ \t]+(.+)$", re.MULTILINE)


def run_git(args: list[str], cwd: Path | str) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    return proc.returncode, proc.stdout, proc.stderr


def parse_shortlog(output: str) -> list[str]:
    """Extract distinct author names from ``git shortlog -sn`` output."""
    names: list[str] = []
    seen: set[str] = set()
    for match in SHORTLOG_LINE.finditer(output):
        name = match.group(2).rstrip("\r")
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names


def contributors_url(repository: str) -> str:
    return CONTRIBUTORS_URL_TEMPLATE.format(repository=repository)


class GitContributorsFetcher:
    """Fetch contributor names from a local repository."""

    SHORTLOG_ARGS = ["shortlog", "-sn", "--all"]

    def __init__(self, repository: str, repo_dir: Path | str = "."):
        """Initialize git fetcher.

        Args:
            repository: GitHub "owner/name" slug used for profile links
            repo_dir: Working tree to read history from
        """
        self.repository = repository
        self.repo_dir = Path(repo_dir)

    def fetch(self) -> dict[str, str]:
        """Fetch contributors as a name -> url mapping.

        Raises:
            GitCommandError: If git exits with a non-zero status
        """
        code, out, err = run_git(self.SHORTLOG_ARGS, cwd=self.repo_dir)
        if code != 0:
            raise GitCommandError(code, err)

        url = contributors_url(self.repository)
        return {name: url for name in parse_shortlog(out)}


def fetch_contributors(repository: str, repo_dir: Path | str = ".") -> dict[str, str]:
    """Convenience function to fetch git contributors."""
    return GitContributorsFetcher(repository, repo_dir).fetch()
