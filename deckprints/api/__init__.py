from deckprints.api.health import router as health_router
from deckprints.api.printings import router as printings_router

__all__ = [
    "health_router",
    "printings_router",
]
