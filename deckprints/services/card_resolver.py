"""
Card Resolution Service.

Resolves deck list lines to canonical Scryfall cards.

INVARIANTS:
1. Lines are resolved strictly in order, one request at a time
2. Every request waits on the shared throttle first
3. The first unresolvable line is TERMINAL (CardResolutionError)
4. No partial results: either every line resolves or none are returned
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from deckprints.clients.scryfall import ScryfallError
from deckprints.models.card import Card
from deckprints.models.failure import CardResolutionError, FailureKind
from deckprints.services.name_normalizer import normalize_lines
from deckprints.services.rate_limiter import RequestThrottle

logger = logging.getLogger(__name__)


class CardLookup(Protocol):
    """Remote exact-name lookup."""

    async def fetch_card_by_name(self, name: str) -> Card | None: ...


class CardResolver:
    """
    Resolves raw deck list lines -> Card using an exact-name lookup.

    CONTRACT:
    - Input: Untrusted deck list lines
    - Output: Ordered list of distinct Cards OR terminal CardResolutionError
    - No partial results on failure
    """

    def __init__(self, lookup: CardLookup, throttle: RequestThrottle) -> None:
        """
        Initialize resolver.

        Args:
            lookup: Exact-name card lookup (normally a ScryfallClient)
            throttle: Throttle awaited before every lookup
        """
        self._lookup = lookup
        self._throttle = throttle

    async def resolve_all(self, lines: Iterable[str]) -> list[Card]:
        """
        Resolve every non-empty line, stopping at the first failure.

        A name repeated in the list is looked up once and its card is
        returned once.

        Args:
            lines: Raw deck list lines

        Returns:
            Cards in first-seen order

        Raises:
            CardResolutionError: On the first line that does not resolve
        """
        cards: list[Card] = []
        resolved_names: set[str] = set()
        seen_inputs: set[str] = set()

        for name in normalize_lines(lines):
            if name in seen_inputs:
                continue
            seen_inputs.add(name)

            card = await self._resolve_one(name)

            # Different spellings can resolve to the same card
            if card.name in resolved_names:
                continue
            resolved_names.add(card.name)
            cards.append(card)

        logger.info("Resolved %d cards", len(cards))
        return cards

    async def _resolve_one(self, name: str) -> Card:
        """Look up one name, raising CardResolutionError if it does not resolve."""
        await self._throttle.wait()

        try:
            card = await self._lookup.fetch_card_by_name(name)
        except ScryfallError as e:
            logger.warning("Lookup failed for %r: %s", name, e)
            raise CardResolutionError(
                name,
                kind=FailureKind.EXTERNAL_API_ERROR,
                detail=str(e),
            ) from e

        if card is None:
            logger.info("Card not found: %r", name)
            raise CardResolutionError(name)

        logger.debug("Resolved %r -> %r", name, card.name)
        return card
