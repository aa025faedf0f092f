"""
Deck list printing pipeline.

Workflow:
1. Resolve every deck list line to a card (stops on the first miss)
2. Fetch each card's printings, one card at a time
3. Filter and group printings by set
4. Rank the set groups

Nothing is fetched or aggregated unless step 1 succeeds for the whole list.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from deckprints.analysis.ranker import rank_set_groups
from deckprints.models.card import Printing
from deckprints.models.filters import FilterCriteria
from deckprints.models.set_group import RunResult
from deckprints.services.aggregator import aggregate
from deckprints.services.card_resolver import CardLookup, CardResolver
from deckprints.services.printing_fetcher import PrintingFetcher, PrintingSource
from deckprints.services.rate_limiter import RequestThrottle

logger = logging.getLogger(__name__)


class ScryfallPort(CardLookup, PrintingSource, Protocol):
    """Both remote ports, as provided by ScryfallClient."""


class PrintingsPipeline:
    """
    Runs a deck list through resolution, fetching, aggregation and ranking.

    One instance can serve several runs; no run state is kept between them
    apart from the throttle's last request time.
    """

    def __init__(self, scryfall: ScryfallPort, throttle: RequestThrottle | None = None) -> None:
        """
        Initialize the pipeline.

        Args:
            scryfall: Remote lookup and printing ports
            throttle: Request throttle shared by all requests.
                Defaults to settings.request_interval_ms.
        """
        self.throttle = throttle or RequestThrottle.from_settings()
        self.resolver = CardResolver(scryfall, self.throttle)
        self.fetcher = PrintingFetcher(scryfall, self.throttle)

    async def run(self, raw_lines: Iterable[str], criteria: FilterCriteria) -> RunResult:
        """
        Find and rank the printings of every card in a deck list.

        Args:
            raw_lines: Deck list lines, optionally prefixed with quantities
            criteria: Filter snapshot applied to every printing

        Returns:
            RunResult with resolved cards and ranked set groups

        Raises:
            CardResolutionError: If any line does not resolve
        """
        logger.info("Loading initial card data...")
        cards = await self.resolver.resolve_all(raw_lines)

        logger.info("Getting all printings for %d cards...", len(cards))
        printings_by_card: list[list[Printing]] = []
        for card in cards:
            printings_by_card.append(await self.fetcher.fetch_printings(card))

        groups = aggregate(printings_by_card, criteria)

        logger.info("Sorting %d set groups...", len(groups))
        result = RunResult(cards=cards, groups=rank_set_groups(groups))

        logger.info(
            "Found %d printings across %d sets",
            result.total_printings,
            len(result.groups),
        )
        return result
