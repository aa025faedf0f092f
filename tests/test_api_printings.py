"""Tests for the printings API endpoint."""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from fakes import FakeScryfall, RecordingThrottle, make_card, make_printing
from httpx import ASGITransport, AsyncClient

from deckprints.api import printings as printings_module
from deckprints.api.printings import get_pipeline
from deckprints.main import app
from deckprints.services.pipeline import PrintingsPipeline


@pytest.fixture
def scryfall() -> FakeScryfall:
    island = make_card("Island")
    mountain = make_card("Mountain")
    return FakeScryfall(
        cards={"Island": island, "Mountain": mountain},
        printings={
            island.prints_search_uri: [
                make_printing("Island", "A", "core", "common"),
                make_printing("Island", "A", "core", "common"),
                make_printing("Island", "B", "expansion", "rare"),
                make_printing("Island", "A", "core", "common"),
            ],
            mountain.prints_search_uri: [
                make_printing("Mountain", "A", "core", "common"),
                make_printing("Mountain", "A", "core", "common"),
            ],
        },
        failing_names={"Flaky Card"},
    )


@pytest.fixture
async def client(scryfall: FakeScryfall):
    """Provide an async test client with a fake Scryfall behind the pipeline."""

    async def override_get_pipeline() -> AsyncGenerator[PrintingsPipeline, None]:
        yield PrintingsPipeline(scryfall, RecordingThrottle())  # type: ignore[arg-type]

    app.dependency_overrides[get_pipeline] = override_get_pipeline

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestFindPrintings:
    async def test_returns_ranked_groups(self, client: AsyncClient) -> None:
        response = await client.post("/printings", json={"decklist": "4 Island\n\nMountain"})

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "success"
        assert body["failure"] is None
        data = body["data"]
        assert [(g["set_name"], g["count"]) for g in data["groups"]] == [("A", 5), ("B", 1)]
        assert [c["name"] for c in data["cards"]] == ["Island", "Mountain"]
        assert data["total_printings"] == 6

    async def test_group_contains_printings(self, client: AsyncClient) -> None:
        response = await client.post("/printings", json={"decklist": "Island"})

        group_b = response.json()["data"]["groups"][1]
        assert group_b["printings"] == [
            {
                "card_name": "Island",
                "set_name": "B",
                "set_code": None,
                "set_type": "expansion",
                "rarity": "rare",
                "image_url": None,
                "scryfall_uri": None,
            }
        ]

    async def test_applies_filters(self, client: AsyncClient) -> None:
        response = await client.post(
            "/printings",
            json={"decklist": "Island\nMountain", "set_types": ["core"], "rarities": []},
        )

        data = response.json()["data"]
        assert [(g["set_name"], g["count"]) for g in data["groups"]] == [("A", 5)]

    async def test_unknown_card_is_known_failure(
        self, client: AsyncClient, scryfall: FakeScryfall
    ) -> None:
        response = await client.post("/printings", json={"decklist": "Island\nXyzzy\nMountain"})

        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["data"] is None
        assert body["failure"]["kind"] == "not_found"
        assert body["failure"]["message"] == "Card not found: Xyzzy"
        assert scryfall.printing_fetches == []

    async def test_lookup_error_is_known_failure(self, client: AsyncClient) -> None:
        response = await client.post("/printings", json={"decklist": "Flaky Card"})

        failure = response.json()["failure"]
        assert failure["kind"] == "external_api_error"
        assert failure["message"] == "Card not found: Flaky Card"

    async def test_invalid_filter_is_known_failure(
        self, client: AsyncClient, scryfall: FakeScryfall
    ) -> None:
        response = await client.post(
            "/printings", json={"decklist": "Island", "rarities": ["legendary"]}
        )

        failure = response.json()["failure"]
        assert failure["kind"] == "invalid_input"
        assert "legendary" in failure["message"]
        assert scryfall.calls == []

    async def test_missing_decklist_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/printings", json={})

        assert response.status_code == 422

    async def test_refuses_while_run_in_progress(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        lock = asyncio.Lock()
        monkeypatch.setattr(printings_module, "_run_lock", lock)

        await lock.acquire()
        try:
            response = await client.post("/printings", json={"decklist": "Island"})
        finally:
            lock.release()

        body = response.json()
        assert body["outcome"] == "refusal"
        assert body["failure"]["kind"] == "run_in_progress"

    async def test_unexpected_error_is_unknown_failure(
        self, client: AsyncClient, scryfall: FakeScryfall, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def explode(name: str) -> None:
            raise RuntimeError("secret internals")

        monkeypatch.setattr(scryfall, "fetch_card_by_name", explode)

        response = await client.post("/printings", json={"decklist": "Island"})

        failure = response.json()["failure"]
        assert response.json()["outcome"] == "unknown_failure"
        assert failure["kind"] == "unknown"
        assert failure["detail"] == "RuntimeError"
        assert "secret" not in failure["message"]
