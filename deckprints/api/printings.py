"""
Printings API endpoint.

Accepts a deck list and filter selection, returns the cards' printings
grouped by set and ranked by count.

Only one run executes at a time per process. A submission arriving while
another run is in flight is refused rather than queued.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from deckprints.clients.scryfall import ScryfallClient
from deckprints.models.failure import (
    ApiResponse,
    FailureKind,
    KnownError,
    RefusalError,
    create_unknown_failure,
    finalize_response,
)
from deckprints.models.filters import FilterCriteria
from deckprints.models.set_group import RunResult
from deckprints.services.pipeline import PrintingsPipeline
from deckprints.services.rate_limiter import RequestThrottle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/printings", tags=["printings"])

_run_lock = asyncio.Lock()


class PrintingsRequest(BaseModel):
    """Deck list submission."""

    decklist: str = Field(..., description="One card per line, optional quantity prefix")
    set_types: list[str] = Field(default_factory=list, description="Empty = all set types")
    rarities: list[str] = Field(default_factory=list, description="Empty = all rarities")


class CardResponse(BaseModel):
    """A resolved deck list card."""

    name: str
    image_url: str | None = None
    scryfall_uri: str | None = None


class PrintingResponse(BaseModel):
    """One printing within a set group."""

    card_name: str
    set_name: str
    set_code: str | None = None
    set_type: str
    rarity: str
    image_url: str | None = None
    scryfall_uri: str | None = None


class SetGroupResponse(BaseModel):
    """Printings from one set."""

    set_name: str
    count: int = Field(ge=0)
    printings: list[PrintingResponse] = Field(default_factory=list)


class PrintingsResponse(BaseModel):
    """Ranked printings for a deck list."""

    cards: list[CardResponse] = Field(default_factory=list)
    groups: list[SetGroupResponse] = Field(default_factory=list)
    total_printings: int = Field(ge=0)


async def get_pipeline() -> AsyncGenerator[PrintingsPipeline, None]:
    """Provide a pipeline backed by a fresh Scryfall client."""
    throttle = RequestThrottle.from_settings()
    async with ScryfallClient(page_throttle=throttle) as scryfall:
        yield PrintingsPipeline(scryfall, throttle)


def run_result_to_response(result: RunResult) -> PrintingsResponse:
    """Convert a RunResult to its API representation."""
    return PrintingsResponse(
        cards=[
            CardResponse(name=c.name, image_url=c.image_url, scryfall_uri=c.scryfall_uri)
            for c in result.cards
        ],
        groups=[
            SetGroupResponse(
                set_name=group.set_name,
                count=group.count,
                printings=[
                    PrintingResponse(
                        card_name=p.card_name,
                        set_name=p.set_name,
                        set_code=p.set_code,
                        set_type=p.set_type,
                        rarity=p.rarity,
                        image_url=p.image_url,
                        scryfall_uri=p.scryfall_uri,
                    )
                    for p in group.printings
                ],
            )
            for group in result.groups
        ],
        total_printings=result.total_printings,
    )


@router.post("", response_model=ApiResponse[PrintingsResponse])
async def find_printings(
    request: PrintingsRequest,
    pipeline: Annotated[PrintingsPipeline, Depends(get_pipeline)],
) -> ApiResponse[Any]:
    """
    Resolve a deck list and rank the sets its printings come from.

    The whole deck list must resolve; the first unknown card name fails the
    request and no printings are returned.
    """
    if _run_lock.locked():
        refusal = RefusalError(
            kind=FailureKind.RUN_IN_PROGRESS,
            message="Another deck list is still being processed.",
            suggestion="Wait for it to finish and submit again.",
        )
        return finalize_response(refusal.to_response())

    try:
        criteria = FilterCriteria.from_selection(request.set_types, request.rarities)
    except KnownError as e:
        return finalize_response(e.to_response())

    async with _run_lock:
        try:
            result = await pipeline.run(request.decklist.splitlines(), criteria)
        except KnownError as e:
            return finalize_response(e.to_response())
        except Exception as e:
            logger.exception("Printing run failed")
            return create_unknown_failure(e)

    return finalize_response(ApiResponse.success(run_result_to_response(result)))
