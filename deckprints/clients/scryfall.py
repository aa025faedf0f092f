"""
Scryfall API client.

Implements the two remote ports the pipeline needs:
- exact-name card lookup (`/cards/named?exact=`)
- printing search via a card's `prints_search_uri`

API docs: https://scryfall.com/docs/api
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any

import httpx

from deckprints.config import settings
from deckprints.models.card import Card, Printing
from deckprints.parsers.scryfall import parse_card, parse_printing_page

if TYPE_CHECKING:
    from deckprints.services.rate_limiter import RequestThrottle

logger = logging.getLogger(__name__)


class ScryfallError(Exception):
    """Raised when a Scryfall request fails or returns an unusable body."""

    pass


class ScryfallClient:
    """
    Async client for the Scryfall card API.

    Use as an async context manager. An existing httpx.AsyncClient can be
    passed in for connection reuse; it is left open on exit.

    Usage:
        async with ScryfallClient() as scryfall:
            card = await scryfall.fetch_card_by_name("Lightning Bolt")
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        follow_next_page: bool | None = None,
        page_throttle: RequestThrottle | None = None,
    ) -> None:
        """
        Initialize the Scryfall client.

        Args:
            base_url: Scryfall API base URL. Defaults to settings.scryfall_api_url.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout.
            http_client: Optional httpx client to reuse
            follow_next_page: Follow paginated printing searches.
                Defaults to settings.follow_next_page.
            page_throttle: Throttle awaited before each extra page request
        """
        self.base_url = (base_url or settings.scryfall_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.follow_next_page = (
            follow_next_page if follow_next_page is not None else settings.follow_next_page
        )
        self._page_throttle = page_throttle
        self._http = http_client
        self._owns_http = http_client is None

    async def __aenter__(self) -> ScryfallClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
                follow_redirects=True,
            )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            raise RuntimeError("ScryfallClient must be used as an async context manager")
        return self._http

    async def _get_json(self, url: str) -> dict[str, Any]:
        """GET a URL and decode its JSON object body, wrapping every failure."""
        try:
            response = await self._client().get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise ScryfallError(
                f"Scryfall request failed: HTTP {e.response.status_code} for {url}"
            ) from e
        except httpx.HTTPError as e:
            raise ScryfallError(f"Scryfall request failed: {e}") from e
        except ValueError as e:
            raise ScryfallError(f"Scryfall returned invalid JSON for {url}") from e

        if not isinstance(payload, dict):
            raise ScryfallError(f"Scryfall returned a non-object body for {url}")
        return payload

    async def fetch_card_by_name(self, name: str) -> Card | None:
        """
        Look up a card by exact name.

        Args:
            name: Card name, matched exactly (case-insensitive on Scryfall's side)

        Returns:
            Card, or None if Scryfall has no card with that name

        Raises:
            ScryfallError: If the request fails or the response is malformed
        """
        url = f"{self.base_url}/cards/named"

        try:
            response = await self._client().get(url, params={"exact": name})
        except httpx.HTTPError as e:
            raise ScryfallError(f"Scryfall request failed: {e}") from e

        if response.status_code == 404:
            logger.debug("No card named %r", name)
            return None

        try:
            response.raise_for_status()
            return parse_card(response.json())
        except httpx.HTTPStatusError as e:
            raise ScryfallError(
                f"Scryfall request failed: HTTP {e.response.status_code} for {name!r}"
            ) from e
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise ScryfallError(f"Scryfall returned a malformed card for {name!r}: {e}") from e

    async def fetch_printings(self, prints_search_uri: str) -> list[Printing]:
        """
        Fetch every printing listed by a printing search URI.

        Args:
            prints_search_uri: The `prints_search_uri` of a resolved card

        Returns:
            Printings in Scryfall's order (possibly empty)

        Raises:
            ScryfallError: If any request fails or a page is malformed
        """
        printings: list[Printing] = []
        url: str | None = prints_search_uri

        while url is not None:
            payload = await self._get_json(url)
            try:
                page, next_page = parse_printing_page(payload)
            except (ValueError, TypeError, KeyError, AttributeError) as e:
                raise ScryfallError(f"Scryfall returned malformed printings: {e}") from e

            printings.extend(page)

            if not self.follow_next_page or not next_page:
                break

            url = next_page
            if self._page_throttle is not None:
                await self._page_throttle.wait()

        return printings
