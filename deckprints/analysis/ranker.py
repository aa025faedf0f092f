"""
Set group ranking.

Orders set groups by how many of the deck's printings they contain, so the
sets covering most of the deck come first.
"""

import logging
from collections.abc import Mapping

from deckprints.models.set_group import RunResult, SetGroup

logger = logging.getLogger(__name__)


def rank_set_groups(groups: Mapping[str, SetGroup]) -> list[SetGroup]:
    """
    Rank set groups by printing count.

    Args:
        groups: Set groups in creation order

    Returns:
        Groups sorted by count (highest first). Equal counts keep
        creation order.
    """
    # sorted() is stable, including with reverse=True
    return sorted(groups.values(), key=lambda g: g.count, reverse=True)


def exclude_card(result: RunResult, card_name: str) -> RunResult:
    """
    Remove every printing of a card from a run result.

    Groups left empty are dropped. Remaining groups keep their positions;
    they are not re-ranked.

    Args:
        result: Ranked run result
        card_name: Name of the card to remove

    Returns:
        New RunResult without the card. The input is not modified.
    """
    groups: list[SetGroup] = []

    for group in result.groups:
        kept = [p for p in group.printings if p.card_name != card_name]
        if kept:
            groups.append(SetGroup(set_name=group.set_name, printings=kept))

    removed = result.total_printings - sum(g.count for g in groups)
    logger.debug("Excluded %r: removed %d printings", card_name, removed)

    return RunResult(
        cards=[c for c in result.cards if c.name != card_name],
        groups=groups,
    )
