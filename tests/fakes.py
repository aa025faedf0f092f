"""In-memory stand-ins for the Scryfall ports."""

from deckprints.clients.scryfall import ScryfallError
from deckprints.models.card import Card, Printing


def make_card(name: str) -> Card:
    slug = name.lower().replace(" ", "-")
    return Card(name=name, prints_search_uri=f"prints://{slug}")


def make_printing(
    card_name: str,
    set_name: str,
    set_type: str = "expansion",
    rarity: str = "common",
) -> Printing:
    return Printing(card_name=card_name, set_name=set_name, set_type=set_type, rarity=rarity)


class FakeScryfall:
    """
    Records every call and answers from dictionaries.

    Names in `failing_names` and URIs in `failing_uris` raise ScryfallError.
    Names absent from `cards` are not found.
    """

    def __init__(
        self,
        cards: dict[str, Card] | None = None,
        printings: dict[str, list[Printing]] | None = None,
        failing_names: set[str] | None = None,
        failing_uris: set[str] | None = None,
    ) -> None:
        self.cards = cards or {}
        self.printings = printings or {}
        self.failing_names = failing_names or set()
        self.failing_uris = failing_uris or set()
        self.calls: list[tuple[str, str]] = []

    @property
    def lookups(self) -> list[str]:
        return [arg for kind, arg in self.calls if kind == "named"]

    @property
    def printing_fetches(self) -> list[str]:
        return [arg for kind, arg in self.calls if kind == "prints"]

    async def fetch_card_by_name(self, name: str) -> Card | None:
        self.calls.append(("named", name))
        if name in self.failing_names:
            raise ScryfallError(f"Scryfall request failed: HTTP 503 for {name!r}")
        return self.cards.get(name)

    async def fetch_printings(self, prints_search_uri: str) -> list[Printing]:
        self.calls.append(("prints", prints_search_uri))
        if prints_search_uri in self.failing_uris:
            raise ScryfallError("Scryfall request failed: timed out")
        return list(self.printings.get(prints_search_uri, []))


class RecordingThrottle:
    """Throttle that records how often it was awaited without waiting."""

    def __init__(self) -> None:
        self.waits = 0

    async def wait(self) -> None:
        self.waits += 1
