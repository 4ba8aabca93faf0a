"""
Command-line interface for the roster harvest.

Harvests contributors (git), translators (Crowdin) and sponsors (GitHub
Sponsors, Patreon overrides), then writes a Markdown page and a JSON
document.
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import ENV_CROWDIN_PROJECT, ENV_CROWDIN_TOKEN, ENV_GITHUB_TOKEN, ENV_REPOSITORY, load_config
from .exceptions import RosterError
from .report import harvest, write_outputs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Collect contributors, translators and supporters into Markdown and JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  roster CONTRIBUTORS.md contributors.json
  roster CONTRIBUTORS.md contributors.json --overrides-dir tools
  roster CONTRIBUTORS.md contributors.json --config roster.yaml

Environment:
  {ENV_REPOSITORY:<20} GitHub "owner/name" slug for the contributors graph
  {ENV_CROWDIN_PROJECT:<20} Crowdin project id
  {ENV_CROWDIN_TOKEN:<20} Crowdin personal access token
  {ENV_GITHUB_TOKEN:<20} GitHub token of the sponsored account

Configuration:
  If roster.yaml exists in the current directory it is used automatically.
  Use --config to specify a custom path.
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("markdown_output", type=Path, help="Output path for the Markdown document")
    parser.add_argument("json_output", type=Path, help="Output path for the JSON document")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to roster.yaml config file",
    )
    parser.add_argument(
        "--overrides-dir",
        type=Path,
        help="Directory holding the patch-*.json override files",
    )
    parser.add_argument(
        "--repo-dir",
        type=Path,
        help="Git working tree to read contributors from (default: current directory)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print errors",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the roster CLI."""
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    try:
        config = load_config(args.config)
        if args.overrides_dir:
            config.overrides.directory = str(args.overrides_dir.resolve())
        if args.repo_dir:
            config.sources.git.repo_dir = str(args.repo_dir)

        if verbose:
            print("=" * 60)
            print(f"Roster - {config.project.title}")
            print("=" * 60)

        report = harvest(config, verbose=verbose)
    except RosterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    markdown_path, json_path = write_outputs(report, args.markdown_output, args.json_output, config)

    if verbose:
        counts = report.counts
        print("\n" + "=" * 60)
        print("Harvesting complete!")
        for group, count in counts.items():
            print(f"  {group.value}: {count}")
        print(f"  Markdown: {markdown_path}")
        print(f"  JSON: {json_path}")
        print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
