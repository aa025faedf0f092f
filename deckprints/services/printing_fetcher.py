"""
Printing retrieval.

Fetches every printing of a resolved card. A card whose printings cannot
be fetched contributes nothing; it never fails the run.
"""

import logging
from typing import Protocol

from deckprints.clients.scryfall import ScryfallError
from deckprints.models.card import Card, Printing
from deckprints.services.rate_limiter import RequestThrottle

logger = logging.getLogger(__name__)


class PrintingSource(Protocol):
    """Remote printing search."""

    async def fetch_printings(self, prints_search_uri: str) -> list[Printing]: ...


class PrintingFetcher:
    """Fetches printings for resolved cards, absorbing failures."""

    def __init__(self, source: PrintingSource, throttle: RequestThrottle) -> None:
        self._source = source
        self._throttle = throttle

    async def fetch_printings(self, card: Card) -> list[Printing]:
        """
        Fetch all printings of a card.

        Args:
            card: Resolved card

        Returns:
            Printings in Scryfall's order, or [] if the fetch failed
        """
        await self._throttle.wait()

        try:
            printings = await self._source.fetch_printings(card.prints_search_uri)
        except ScryfallError as e:
            logger.warning("Could not fetch printings for %r: %s", card.name, e)
            return []

        logger.debug("Fetched %d printings for %r", len(printings), card.name)
        return printings
