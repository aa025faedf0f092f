from deckprints.models.card import Printing
from deckprints.models.filters import FilterCriteria


def accepts(printing: Printing, criteria: FilterCriteria) -> bool:
    """
    Check a printing against set type and rarity criteria.

    An empty selection on a dimension accepts every value on it.
    """
    if criteria.is_unrestricted:
        return True
    if criteria.set_types and printing.set_type not in criteria.set_types:
        return False
    if criteria.rarities and printing.rarity not in criteria.rarities:
        return False
    return True
