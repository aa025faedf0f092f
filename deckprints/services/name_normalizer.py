"""
Deck list line normalization.

Deck lists commonly prefix each card with a quantity ("4 Lightning Bolt").
Quantities are irrelevant for finding printings, so they are dropped along
with surrounding whitespace.
"""

import re
from collections.abc import Iterable

# Leading quantity and any whitespace around it: "  4  Lightning Bolt" -> "Lightning Bolt"
_QUANTITY_PREFIX = re.compile(r"^\s*\d*\s*")


def normalize_line(line: str) -> str | None:
    """
    Strip a leading quantity and surrounding whitespace from a deck list line.

    Args:
        line: Raw deck list line

    Returns:
        The card name, or None if nothing is left
    """
    name = _QUANTITY_PREFIX.sub("", line).strip()
    return name or None


def normalize_lines(lines: Iterable[str]) -> list[str]:
    """Normalize lines in order, dropping the ones that are empty."""
    names: list[str] = []
    for line in lines:
        name = normalize_line(line)
        if name is not None:
            names.append(name)
    return names
