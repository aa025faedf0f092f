"""
Find the printings of every card in a deck list from the command line.

Usage:
    deckprints deck.txt
    deckprints deck.txt --set-type expansion --set-type core --rarity rare
    cat deck.txt | deckprints --exclude "Island"
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from deckprints.analysis.ranker import exclude_card
from deckprints.clients.scryfall import ScryfallClient
from deckprints.config import settings
from deckprints.models.failure import CardResolutionError, InvalidFilterError
from deckprints.models.filters import RARITIES, SET_TYPES, FilterCriteria
from deckprints.models.set_group import RunResult
from deckprints.services.pipeline import PrintingsPipeline
from deckprints.services.rate_limiter import RequestThrottle

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID_FILTER = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deckprints",
        description="Group every printing of a deck list's cards by set.",
    )
    parser.add_argument(
        "decklist",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Deck list file, one card per line (default: stdin)",
    )
    parser.add_argument(
        "--set-type",
        action="append",
        default=[],
        dest="set_types",
        metavar="TYPE",
        help=f"Only include these set types. One of: {', '.join(sorted(SET_TYPES))}",
    )
    parser.add_argument(
        "--rarity",
        action="append",
        default=[],
        dest="rarities",
        metavar="RARITY",
        help=f"Only include these rarities. One of: {', '.join(sorted(RARITIES))}",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Hide a resolved card's printings from the output",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def log_level(verbose: bool) -> int:
    """DEBUG when -v is passed or DECKPRINTS_DEBUG is set, else INFO."""
    return logging.DEBUG if verbose or settings.debug else logging.INFO


def format_run_result(result: RunResult) -> str:
    """
    Render ranked set groups as plain text.

    Example:
        Dominaria United (2)
          Lightning Bolt [common] https://scryfall.com/card/dmu/...
    """
    lines: list[str] = []
    for group in result.groups:
        lines.append(f"{group.set_name} ({group.count})")
        for printing in group.printings:
            entry = f"  {printing.card_name} [{printing.rarity}]"
            if printing.scryfall_uri:
                entry += f" {printing.scryfall_uri}"
            lines.append(entry)
    return "\n".join(lines)


async def find_printings(
    lines: Sequence[str],
    criteria: FilterCriteria,
    exclude: Sequence[str] = (),
) -> RunResult:
    """Run the pipeline against Scryfall and apply any exclusions."""
    throttle = RequestThrottle.from_settings()
    async with ScryfallClient(page_throttle=throttle) as scryfall:
        result = await PrintingsPipeline(scryfall, throttle).run(lines, criteria)

    for name in exclude:
        result = exclude_card(result, name)
    return result


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    with args.decklist as f:
        lines = f.read().splitlines()

    try:
        criteria = FilterCriteria.from_selection(args.set_types, args.rarities)
    except InvalidFilterError as e:
        print(f"{e.message}. {e.detail}", file=sys.stderr)
        return EXIT_INVALID_FILTER

    try:
        result = asyncio.run(find_printings(lines, criteria, args.exclude))
    except CardResolutionError as e:
        logger.error("Resolution failed: %s", e.detail or e.message)
        print(e.message, file=sys.stderr)
        return EXIT_NOT_FOUND

    print(format_run_result(result), file=out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
