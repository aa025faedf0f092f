"""Tests for printing retrieval."""

from fakes import FakeScryfall, RecordingThrottle, make_card, make_printing

from deckprints.services.printing_fetcher import PrintingFetcher


class TestFetchPrintings:
    async def test_returns_printings_from_search_uri(self) -> None:
        bolt = make_card("Lightning Bolt")
        printings = [
            make_printing("Lightning Bolt", "Magic 2010"),
            make_printing("Lightning Bolt", "Magic 2010"),
            make_printing("Lightning Bolt", "Masters 25"),
        ]
        scryfall = FakeScryfall(printings={bolt.prints_search_uri: printings})
        fetcher = PrintingFetcher(scryfall, RecordingThrottle())  # type: ignore[arg-type]

        result = await fetcher.fetch_printings(bolt)

        assert result == printings
        assert scryfall.printing_fetches == [bolt.prints_search_uri]

    async def test_duplicates_not_removed(self) -> None:
        bolt = make_card("Lightning Bolt")
        same = make_printing("Lightning Bolt", "Magic 2010")
        scryfall = FakeScryfall(printings={bolt.prints_search_uri: [same, same]})
        fetcher = PrintingFetcher(scryfall, RecordingThrottle())  # type: ignore[arg-type]

        assert len(await fetcher.fetch_printings(bolt)) == 2

    async def test_failure_returns_empty(self) -> None:
        """A failed fetch contributes no printings instead of failing."""
        bolt = make_card("Lightning Bolt")
        scryfall = FakeScryfall(failing_uris={bolt.prints_search_uri})
        fetcher = PrintingFetcher(scryfall, RecordingThrottle())  # type: ignore[arg-type]

        assert await fetcher.fetch_printings(bolt) == []

    async def test_throttle_awaited(self) -> None:
        throttle = RecordingThrottle()
        fetcher = PrintingFetcher(FakeScryfall(), throttle)  # type: ignore[arg-type]

        await fetcher.fetch_printings(make_card("Island"))
        await fetcher.fetch_printings(make_card("Plains"))

        assert throttle.waits == 2
