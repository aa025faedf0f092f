"""
Set aggregation.

Groups accepted printings by set name. The returned dict keeps groups in
creation order, which the ranker relies on to break ties.

Grouping uses the display set name, not the set code, so two sets sharing
a name are merged.
"""

from collections.abc import Iterable

from deckprints.models.card import Printing
from deckprints.models.filters import FilterCriteria
from deckprints.models.set_group import SetGroup
from deckprints.services.filter_engine import accepts


def aggregate(
    printings_by_card: Iterable[Iterable[Printing]],
    criteria: FilterCriteria,
) -> dict[str, SetGroup]:
    """
    Group accepted printings by set name.

    Args:
        printings_by_card: Printings per card, cards in resolution order
        criteria: Filter snapshot for this run

    Returns:
        Dict of set name -> SetGroup in first-encountered order
    """
    groups: dict[str, SetGroup] = {}

    for printings in printings_by_card:
        for printing in printings:
            if not accepts(printing, criteria):
                continue

            group = groups.get(printing.set_name)
            if group is None:
                group = SetGroup(set_name=printing.set_name)
                groups[printing.set_name] = group
            group.add(printing)

    return groups
