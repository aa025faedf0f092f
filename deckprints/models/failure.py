"""
Failure Explanation Envelope.

Every API response is wrapped in an ApiResponse classified as one of:
- Success: the run completed and produced ranked set groups
- Refusal: the system chose not to start (e.g. a run is already in flight)
- KnownFailure: the system knows why the run failed (e.g. card not found)
- UnknownFailure: the system does not know why the run failed

All user-visible responses pass through `finalize_response()`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"

    # Service failures
    EXTERNAL_API_ERROR = "external_api_error"
    RUN_IN_PROGRESS = "run_in_progress"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """Universal response envelope for all API endpoints."""

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def refusal(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a refusal response.

        Use when the system chose not to proceed.
        Example: another deck list is still being resolved.
        """
        return cls(
            outcome=OutcomeType.REFUSAL,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: a deck list line does not name a card.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def unknown_failure(
        cls,
        detail: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create an unknown failure response.

        NOTE: Prefer create_unknown_failure() which auto-finalizes.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
                detail=detail,
                suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class RefusalError(Exception):
    """Exception for requests the system declines to start."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.refusal(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class CardResolutionError(KnownError):
    """
    A deck list line could not be resolved to a card.

    Terminal for the whole run: no cards from the batch are kept.

    Attributes:
        failed_name: The normalized name that failed to resolve
    """

    def __init__(
        self,
        failed_name: str,
        kind: FailureKind = FailureKind.NOT_FOUND,
        detail: str | None = None,
    ):
        self.failed_name = failed_name
        super().__init__(
            kind=kind,
            message=f"Card not found: {failed_name}",
            detail=detail,
            suggestion="Check that the card name is spelled exactly as printed.",
            status_code=404 if kind == FailureKind.NOT_FOUND else 502,
        )


class InvalidFilterError(KnownError):
    """A filter selection names a set type or rarity Scryfall does not use."""

    def __init__(self, dimension: str, values: list[str], allowed: frozenset[str]):
        self.dimension = dimension
        self.values = values
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Unknown {dimension}: {', '.join(values)}",
            detail=f"Must be one of: {', '.join(sorted(allowed))}",
            suggestion="Clear the filter or pick a listed value.",
            status_code=400,
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.UNKNOWN_FAILURE: (
        "I failed and I don't know why. Try simplifying the deck list or retrying."
    ),
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}


# Track finalized responses by id
_finalized_responses: set[int] = set()


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Args:
        response: The ApiResponse to finalize

    Returns:
        The same response, marked as having passed through the boundary

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    _finalized_responses.add(id(response))

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check if a response has passed through the authority boundary."""
    return id(response) in _finalized_responses


def create_unknown_failure(exception: Exception) -> ApiResponse[Any]:
    """
    Create a finalized unknown failure response from an exception.

    Only the exception type is exposed, never its message.
    """
    return finalize_response(ApiResponse.unknown_failure(detail=type(exception).__name__))
