from dataclasses import dataclass, field

from deckprints.models.card import Card, Printing


@dataclass
class SetGroup:
    """
    Accepted printings that share a set name.

    Attributes:
        set_name: Human-readable set name (the grouping key)
        printings: Printings in the order they were added
    """

    set_name: str
    printings: list[Printing] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of printings in the group."""
        return len(self.printings)

    def add(self, printing: Printing) -> None:
        """Append a printing to the group."""
        self.printings.append(printing)


@dataclass
class RunResult:
    """
    Outcome of one deck list run.

    Attributes:
        cards: Resolved cards in deck list order
        groups: Set groups ranked by count (highest first)
    """

    cards: list[Card] = field(default_factory=list)
    groups: list[SetGroup] = field(default_factory=list)

    @property
    def total_printings(self) -> int:
        """Total printings across all groups."""
        return sum(group.count for group in self.groups)
