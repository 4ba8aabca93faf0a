"""Name ordering shared by every report output."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from unidecode import unidecode

# A digit run or any single other character
_TOKEN = re.compile(r"\d+|\D")

# Primary classes: punctuation and symbols, then numbers, then letters
_PUNCTUATION, _NUMBER, _LETTER = 0, 1, 2


def fold(name: str) -> str:
    """Transliterate to ASCII and drop case, so "Øyvind" files under O."""
    return unidecode(name).casefold()


def sort_key(name: str) -> tuple:
    """Natural sort key: case and accent insensitive, digit runs as numbers.

    Each element is a (class, value) pair. Values are only compared when
    classes are equal, so an int never meets a str.
    """
    elements = []
    for token in _TOKEN.findall(fold(name)):
        if token.isdigit():
            elements.append((_NUMBER, int(token)))
        elif token.isalpha():
            elements.append((_LETTER, token))
        else:
            elements.append((_PUNCTUATION, token))
    # Raw name breaks ties between names that only differ by case/accents
    return tuple(elements), name


def sorted_names(names: Iterable[str]) -> list[str]:
    return sorted(names, key=sort_key)


def sorted_mapping(mapping: Mapping[str, str]) -> dict[str, str]:
    """Copy a name -> url mapping with keys in report order."""
    return {name: mapping[name] for name in sorted_names(mapping)}
