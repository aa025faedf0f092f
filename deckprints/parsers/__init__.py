from deckprints.parsers.scryfall import (
    extract_image_url,
    parse_card,
    parse_printing,
    parse_printing_page,
)

__all__ = [
    "extract_image_url",
    "parse_card",
    "parse_printing",
    "parse_printing_page",
]
