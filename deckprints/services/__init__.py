"""
deckprints services.

Resolution, fetching, filtering and aggregation for deck list printings.
"""

from deckprints.services.aggregator import aggregate
from deckprints.services.card_resolver import CardLookup, CardResolver
from deckprints.services.filter_engine import accepts
from deckprints.services.name_normalizer import normalize_line, normalize_lines
from deckprints.services.pipeline import PrintingsPipeline, ScryfallPort
from deckprints.services.printing_fetcher import PrintingFetcher, PrintingSource
from deckprints.services.rate_limiter import RequestThrottle

__all__ = [
    # Deck list lines
    "normalize_line",
    "normalize_lines",
    # Rate limiting
    "RequestThrottle",
    # Remote ports
    "CardLookup",
    "PrintingSource",
    "ScryfallPort",
    # Pipeline stages
    "CardResolver",
    "PrintingFetcher",
    "accepts",
    "aggregate",
    "PrintingsPipeline",
]
