"""
Run every source, apply overrides and write both report documents.

The sources run strictly one after another: git, Crowdin, GitHub Sponsors.
Patreon has no API and is filled from its override file only.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

from .config import RosterConfig
from .crowdin import CrowdinFetcher
from .generators import GeneratorConfig, JsonGenerator, MarkdownGenerator
from .git import GitContributorsFetcher
from .github import GitHubSponsorsFetcher
from .models import Group, Report
from .overrides import load_overrides, merge_overrides

# A source turns the configuration into a discovered name -> url mapping
Source = Callable[[RosterConfig, bool], dict[str, str]]


def git_source(config: RosterConfig, verbose: bool = False) -> dict[str, str]:
    fetcher = GitContributorsFetcher(
        repository=config.require_repository(),
        repo_dir=config.sources.git.repo_dir,
    )
    return fetcher.fetch()


def crowdin_source(config: RosterConfig, verbose: bool = False) -> dict[str, str]:
    project_id, token = config.require_crowdin()
    fetcher = CrowdinFetcher(
        project_id,
        token,
        page_size=config.sources.crowdin.page_size,
        timeout=config.http_timeout,
        verbose=verbose,
    )
    return fetcher.fetch()


def github_sponsors_source(config: RosterConfig, verbose: bool = False) -> dict[str, str]:
    fetcher = GitHubSponsorsFetcher(
        config.require_github_token(),
        page_size=config.sources.github.page_size,
        timeout=config.http_timeout,
        verbose=verbose,
    )
    return fetcher.fetch()


# Harvest order; None marks a group that only comes from its override file
DEFAULT_SOURCES: dict[Group, Source | None] = {
    Group.CONTRIBUTOR: git_source,
    Group.TRANSLATOR: crowdin_source,
    Group.GITHUB_SPONSOR: github_sponsors_source,
    Group.PATREON_SPONSOR: None,
}

GROUP_LABELS = {
    Group.CONTRIBUTOR: "git contributors",
    Group.TRANSLATOR: "Crowdin translators",
    Group.GITHUB_SPONSOR: "GitHub sponsors",
    Group.PATREON_SPONSOR: "Patreon patrons",
}


def apply_overrides(
    group: Group,
    discovered: Mapping[str, str],
    config: RosterConfig,
    verbose: bool = False,
) -> dict[str, str]:
    """Merge a group's override file into its discovered mapping."""
    path = config.get_override_path(group)
    overrides = load_overrides(path)
    if verbose:
        print(f"  Applied {len(overrides)} overrides from {path}")
    return merge_overrides(discovered, overrides)


def harvest(
    config: RosterConfig,
    sources: Mapping[Group, Source | None] | None = None,
    verbose: bool = True,
) -> Report:
    """Harvest every group and build the sorted report.

    Args:
        config: Fully loaded configuration (credentials included)
        sources: Source per group, in run order (defaults to DEFAULT_SOURCES)
        verbose: Print progress

    Returns:
        Report with every group merged and sorted
    """
    if sources is None:
        sources = DEFAULT_SOURCES

    groups: dict[Group, dict[str, str]] = {}
    total = len(sources)

    for step, (group, source) in enumerate(sources.items(), start=1):
        if verbose:
            print(f"\n[{step}/{total}] Harvesting {GROUP_LABELS[group]}...")
            print("-" * 40)

        discovered = source(config, verbose) if source is not None else {}
        if verbose and source is not None:
            print(f"Found {len(discovered)} entries")

        groups[group] = apply_overrides(group, discovered, config, verbose=verbose)

    return Report.from_groups(groups)


def render(report: Report, config: RosterConfig | None = None) -> tuple[str, str]:
    """Render the Markdown and JSON documents."""
    generator_config = GeneratorConfig(project=config.project if config else None)
    markdown = MarkdownGenerator(generator_config).generate(report)
    structured = JsonGenerator(generator_config).generate(report)
    return markdown, structured


def write_outputs(
    report: Report,
    markdown_output: Path | str,
    json_output: Path | str,
    config: RosterConfig | None = None,
) -> tuple[Path, Path]:
    """Render both documents, then write each with a single full write.

    Returns:
        The Markdown and JSON paths
    """
    markdown, structured = render(report, config)

    markdown_path = Path(markdown_output)
    json_path = Path(json_output)
    markdown_path.write_text(markdown, encoding="utf-8")
    json_path.write_text(structured, encoding="utf-8")
    return markdown_path, json_path
