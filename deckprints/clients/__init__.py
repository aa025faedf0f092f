from deckprints.clients.scryfall import ScryfallClient, ScryfallError

__all__ = ["ScryfallClient", "ScryfallError"]
