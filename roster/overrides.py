"""
Hand-maintained overrides for harvested groups.

An override file is a flat JSON object of display name -> profile url. It
is applied after discovery, so its entries always win. This is also the
only source for platforms without an API (Patreon).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from .exceptions import OverrideFileError


def load_overrides(path: Path | str) -> dict[str, str]:
    """Load an override file.

    Args:
        path: Path to the JSON override file

    Returns:
        Mapping of display name to profile url, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        OverrideFileError: If the file is not a JSON object of strings
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise OverrideFileError(path, str(e)) from e

    if not isinstance(data, dict):
        raise OverrideFileError(path, f"expected an object, got {type(data).__name__}")

    for name, url in data.items():
        if not isinstance(url, str):
            raise OverrideFileError(path, f"value for {name!r} is not a string")

    return data


def merge_overrides(base: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Return ``base`` with every override inserted or replaced."""
    merged = dict(base)
    merged.update(overrides)
    return merged
