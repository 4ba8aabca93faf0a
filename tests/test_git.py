"""Tests for git contributor harvesting."""

import pytest

from roster.exceptions import GitCommandError
from roster.git import (
    GitContributorsFetcher,
    contributors_url,
    parse_shortlog,
)

CONTRIBUTORS = "https://github.com/example/project/graphs/contributors"


class TestParseShortlog:
    """Tests for shortlog output parsing."""

    def test_counts_are_discarded(self):
        """Test the two-author scenario."""
        assert parse_shortlog("  12\tAlice\n   3\tBob\n") == ["Alice", "Bob"]

    def test_names_with_spaces(self):
        """Test names keep their inner whitespace."""
        output = "   120\tJane Q. Public\n     1\tJohn  Doe\n"

        assert parse_shortlog(output) == ["Jane Q. Public", "John  Doe"]

    def test_carriage_returns_dropped(self):
        """Test CRLF output keeps trailing spaces but not the carriage return."""
        assert parse_shortlog("  12\tAlice\r\n   3\tBob \r\n") == ["Alice", "Bob "]

    def test_duplicates_collapse(self):
        """Test a name listed twice is kept once, in first-seen order."""
        output = "    5\tBob\n    4\tAlice\n    1\tBob\n"

        assert parse_shortlog(output) == ["Bob", "Alice"]

    def test_lines_without_leading_whitespace_ignored(self):
        """Test stray lines that don't match the shortlog format."""
        output = "warning: something\n    7\tAlice\n\n"

        assert parse_shortlog(output) == ["Alice"]

    def test_empty_output(self):
        """Test a repository without commits."""
        assert parse_shortlog("") == []


class TestGitContributorsFetcher:
    """Tests for the git fetcher."""

    def test_fetch_maps_to_contributors_page(self, monkeypatch):
        """Test every name points at the contributors graph."""
        calls = []

        def fake_run_git(args, cwd):
            calls.append((args, cwd))
            return 0, "  12\tAlice\n   3\tBob\n", ""

        monkeypatch.setattr("roster.git.run_git", fake_run_git)
        result = GitContributorsFetcher("example/project", repo_dir="/src").fetch()

        assert result == {"Alice": CONTRIBUTORS, "Bob": CONTRIBUTORS}
        assert calls[0][0] == ["shortlog", "-sn", "--all"]
        assert str(calls[0][1]) == "/src"

    def test_nonzero_exit_raises(self, monkeypatch):
        """Test git failures carry the exit code and stderr."""
        monkeypatch.setattr(
            "roster.git.run_git",
            lambda args, cwd: (128, "", "fatal: not a git repository"),
        )

        with pytest.raises(GitCommandError) as excinfo:
            GitContributorsFetcher("example/project").fetch()

        assert excinfo.value.returncode == 128
        assert "not a git repository" in excinfo.value.stderr


class TestContributorsUrl:
    """Tests for the contributors page URL."""

    def test_url(self):
        assert contributors_url("example/project") == CONTRIBUTORS
