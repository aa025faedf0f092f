"""
Scryfall card object parsing.

Turns Scryfall card JSON into Card and Printing records.

Card objects: https://scryfall.com/docs/api/cards
"""

from typing import Any

from deckprints.models.card import Card, Printing

# Multi-faced cards carry per-face images; the small size fits a face thumbnail
FACE_IMAGE_SIZE = "small"
CARD_IMAGE_SIZE = "normal"


def _require(payload: dict[str, Any], key: str) -> str:
    """Fetch a required string field, raising ValueError if absent."""
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"Scryfall object missing required field '{key}'")
    return value


def extract_image_url(payload: dict[str, Any]) -> str | None:
    """
    Pick the image to show for a card object.

    Multi-faced cards with per-face images use the front face's small image.
    Everything else uses the card's normal image.

    Args:
        payload: Scryfall card object

    Returns:
        Image URL or None if the object has no images
    """
    faces = payload.get("card_faces")
    if isinstance(faces, list) and faces and isinstance(faces[0], dict):
        face_images = faces[0].get("image_uris")
        if isinstance(face_images, dict) and face_images.get(FACE_IMAGE_SIZE):
            return str(face_images[FACE_IMAGE_SIZE])

    images = payload.get("image_uris")
    if isinstance(images, dict) and images.get(CARD_IMAGE_SIZE):
        return str(images[CARD_IMAGE_SIZE])

    return None


def parse_card(payload: dict[str, Any]) -> Card:
    """
    Build a Card from a Scryfall named-card response.

    Args:
        payload: Scryfall card object

    Returns:
        Card with its printing search URI

    Raises:
        ValueError: If name or prints_search_uri is missing
    """
    return Card(
        name=_require(payload, "name"),
        prints_search_uri=_require(payload, "prints_search_uri"),
        image_url=extract_image_url(payload),
        scryfall_uri=payload.get("scryfall_uri"),
    )


def parse_printing(payload: dict[str, Any]) -> Printing:
    """
    Build a Printing from one entry of a printing search.

    Args:
        payload: Scryfall card object for a single printing

    Returns:
        Printing record

    Raises:
        ValueError: If name, set_name, set_type or rarity is missing
    """
    return Printing(
        card_name=_require(payload, "name"),
        set_name=_require(payload, "set_name"),
        set_type=_require(payload, "set_type"),
        rarity=_require(payload, "rarity"),
        image_url=extract_image_url(payload),
        scryfall_uri=payload.get("scryfall_uri"),
        set_code=payload.get("set"),
    )


def parse_printing_page(payload: dict[str, Any]) -> tuple[list[Printing], str | None]:
    """
    Parse one page of a Scryfall printing search.

    A page without a `data` list yields no printings. A page whose
    `next_page` is missing or not a URL string is treated as the last one.

    Args:
        payload: Scryfall list object

    Returns:
        (printings, next_page URL or None when this is the last page)

    Raises:
        ValueError: If any entry is malformed
    """
    entries = payload.get("data") or []
    if not isinstance(entries, list):
        raise ValueError("Scryfall list object 'data' is not a list")

    if not all(isinstance(entry, dict) for entry in entries):
        raise ValueError("Scryfall list object contains a non-object entry")

    printings = [parse_printing(entry) for entry in entries]

    next_page = payload.get("next_page")
    if not payload.get("has_more") or not isinstance(next_page, str) or not next_page:
        return printings, None
    return printings, next_page
