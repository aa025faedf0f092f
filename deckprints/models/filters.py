"""
Printing filter criteria.

Criteria are snapshotted once per run and passed explicitly.
An empty set on either dimension means that dimension is unrestricted.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from deckprints.models.failure import InvalidFilterError

# https://scryfall.com/docs/api/sets
SET_TYPES = frozenset(
    {
        "core",
        "expansion",
        "masters",
        "eternal",
        "alchemy",
        "masterpiece",
        "arsenal",
        "from_the_vault",
        "spellbook",
        "premium_deck",
        "duel_deck",
        "draft_innovation",
        "treasure_chest",
        "commander",
        "planechase",
        "archenemy",
        "vanguard",
        "funny",
        "starter",
        "box",
        "promo",
        "token",
        "memorabilia",
        "minigame",
    }
)

RARITIES = frozenset({"common", "uncommon", "rare", "special", "mythic", "bonus"})


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Set type and rarity selection.

    Attributes:
        set_types: Accepted Scryfall set types (empty = all)
        rarities: Accepted rarities (empty = all)
    """

    set_types: frozenset[str] = field(default_factory=frozenset)
    rarities: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_unrestricted(self) -> bool:
        """True if no dimension is restricted."""
        return not self.set_types and not self.rarities

    @classmethod
    def from_selection(
        cls,
        set_types: Iterable[str] = (),
        rarities: Iterable[str] = (),
    ) -> "FilterCriteria":
        """
        Build criteria from user selections, rejecting unknown values.

        Values are lowercased and stripped; blank values are ignored.

        Raises:
            InvalidFilterError: If a value is not a known set type or rarity
        """
        selected_types = _clean(set_types)
        selected_rarities = _clean(rarities)

        unknown_types = sorted(selected_types - SET_TYPES)
        if unknown_types:
            raise InvalidFilterError("set type", unknown_types, SET_TYPES)

        unknown_rarities = sorted(selected_rarities - RARITIES)
        if unknown_rarities:
            raise InvalidFilterError("rarity", unknown_rarities, RARITIES)

        return cls(set_types=selected_types, rarities=selected_rarities)


def _clean(values: Iterable[str]) -> frozenset[str]:
    return frozenset(v.strip().lower() for v in values if v.strip())
