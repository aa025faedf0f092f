from deckprints.models.card import Card, Printing
from deckprints.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    CardResolutionError,
    FailureDetail,
    FailureKind,
    InvalidFilterError,
    KnownError,
    OutcomeType,
    RefusalError,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from deckprints.models.filters import RARITIES, SET_TYPES, FilterCriteria
from deckprints.models.set_group import RunResult, SetGroup

__all__ = [
    "ApiResponse",
    "Card",
    "CardResolutionError",
    "FailureDetail",
    "FailureKind",
    "FilterCriteria",
    "InvalidFilterError",
    "KnownError",
    "OutcomeType",
    "Printing",
    "RARITIES",
    "RefusalError",
    "RunResult",
    "SET_TYPES",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "SetGroup",
    "create_unknown_failure",
    "finalize_response",
    "is_finalized",
]
