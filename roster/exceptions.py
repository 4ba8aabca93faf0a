"""
Exceptions raised while harvesting contributors and supporters.

Every failure is fatal to a run: nothing in the pipeline catches these,
the CLI only turns them into a message on stderr and a non-zero exit.
"""

from __future__ import annotations

from pathlib import Path


class RosterError(Exception):
    """Base class for all roster errors."""


class ConfigError(RosterError):
    """Configuration is invalid or a required credential is missing."""


class GitCommandError(RosterError):
    """The git process exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"git exited with status {returncode}: {stderr.strip()}")


class HTTPStatusError(RosterError):
    """An API answered with a status other than 200."""

    def __init__(self, status: int, body: str, url: str = ""):
        self.status = status
        self.body = body
        self.url = url
        where = f" from {url}" if url else ""
        super().__init__(f"HTTP {status}{where}: {body}")


class TransportError(RosterError):
    """The request never produced a response."""


class UnexpectedResponseError(RosterError):
    """A response body did not have the expected shape."""


class OverrideFileError(RosterError):
    """An override file is not a flat JSON object of strings."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid override file {self.path}: {reason}")
