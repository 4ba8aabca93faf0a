"""Pytest fixtures for roster tests."""

import json
from pathlib import Path

import pytest
import yaml


class FakeResponse:
    """Stand-in for the object returned by urlopen()."""

    def __init__(self, payload, status: int = 200):
        self.status = status
        if isinstance(payload, bytes):
            self._body = payload
        elif isinstance(payload, str):
            self._body = payload.encode("utf-8")
        else:
            self._body = json.dumps(payload).encode("utf-8")

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeOpener:
    """Replays queued responses and records every request."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request to {request.full_url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self) -> list[str]:
        return [r.full_url for r in self.requests]

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.data.decode("utf-8")) for r in self.requests]


@pytest.fixture
def install_opener(monkeypatch):
    """Replace urlopen with a FakeOpener serving the given responses."""

    def install(responses) -> FakeOpener:
        opener = FakeOpener(responses)
        monkeypatch.setattr("roster.http.urlopen", opener)
        return opener

    return install


def crowdin_member(username: str, full_name: str | None = None, role: str = "translator") -> dict:
    """Build one entry of a Crowdin members page."""
    return {
        "data": {
            "id": abs(hash(username)) % 100000,
            "username": username,
            "fullName": full_name,
            "role": role,
            "avatarUrl": f"https://crowdin-static.example/{username}.png",
        }
    }


def crowdin_page(members: list[dict], offset: int = 0) -> dict:
    """Build a Crowdin members response body."""
    return {"data": members, "pagination": {"offset": offset, "limit": 100}}


def sponsor_node(login: str, name: str | None = None, typename: str = "User") -> dict:
    return {
        "__typename": typename,
        "resourcePath": f"/{login}",
        "login": login,
        "name": name,
    }


def sponsors_count(total: int) -> dict:
    return {"data": {"viewer": {"sponsors": {"totalCount": total}}}}


def sponsors_page(nodes: list[dict], end_cursor: str | None) -> dict:
    return {
        "data": {
            "viewer": {
                "sponsors": {
                    "nodes": nodes,
                    "pageInfo": {"endCursor": end_cursor, "startCursor": None},
                }
            }
        }
    }


@pytest.fixture
def sample_roster_config() -> dict:
    """Sample roster.yaml configuration."""
    return {
        "project": {
            "title": "Test Project Contributors",
            "repository": "example/project",
            "support_links": [
                {"name": "Patreon", "url": "https://patreon.com/example"},
                {"name": "GitHub", "url": "https://github.com/sponsors/example"},
            ],
        },
        "sources": {
            "git": {"repo_dir": "."},
            "crowdin": {"project_id": "4242", "page_size": 100},
            "github": {"page_size": 50},
        },
        "overrides": {
            "directory": "patches",
        },
    }


@pytest.fixture
def override_files() -> dict:
    """Override file contents, one per group."""
    return {
        "patch-contributors-git.json": {"Carol": "https://example.com/carol"},
        "patch-contributors-crowdin.json": {},
        "patch-supporters-github.json": {"Anonymous Donor": "https://example.com/donor"},
        "patch-supporters-patreon.json": {
            "patron10": "https://patreon.com/patron10",
            "patron2": "https://patreon.com/patron2",
        },
    }


@pytest.fixture
def temp_config_dir(tmp_path, sample_roster_config, override_files) -> Path:
    """Create a directory with roster.yaml and its override files."""
    with open(tmp_path / "roster.yaml", "w", encoding="utf-8") as f:
        yaml.dump(sample_roster_config, f)

    patches = tmp_path / "patches"
    patches.mkdir()
    for filename, content in override_files.items():
        (patches / filename).write_text(json.dumps(content), encoding="utf-8")

    return tmp_path
