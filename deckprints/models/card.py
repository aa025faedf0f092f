from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Card:
    """
    A canonical card resolved from a deck list line.

    Attributes:
        name: Oracle name as Scryfall reports it
        prints_search_uri: Scryfall search URI listing every printing of the card
        image_url: Representative image, None if Scryfall has no image
        scryfall_uri: Scryfall web page for the card
    """

    name: str
    prints_search_uri: str
    image_url: str | None = None
    scryfall_uri: str | None = None


@dataclass(frozen=True, slots=True)
class Printing:
    """
    One physical printing of a card.

    Attributes:
        card_name: Name of the card this is a printing of
        set_name: Human-readable set name (e.g., "Dominaria United")
        set_type: Scryfall set type (e.g., "expansion", "masters")
        rarity: Scryfall rarity (common, uncommon, rare, special, mythic, bonus)
        image_url: Image of this printing, None if unavailable
        scryfall_uri: Scryfall web page for this printing
        set_code: Scryfall set code (e.g., "dmu")
    """

    card_name: str
    set_name: str
    set_type: str
    rarity: str
    image_url: str | None = None
    scryfall_uri: str | None = None
    set_code: str | None = None
