"""
Failure classification for storefront operations.

Store mutations never raise for expected failures. They return a
``StoreResult`` that is truthy on success and falsy on failure, carrying
a classified ``FailureDetail`` so the page layer can explain what happened.

Failure kinds:
- NOT_FOUND: comic id absent from the catalog, or line item absent from the cart
- OUT_OF_RANGE: quantity outside the allowed line-item range
- CORRUPT_STATE: a stored record could not be parsed (recovered, never surfaced)
- STORAGE_UNAVAILABLE: the durable store rejected a write
- EMPTY_RESULT: an operation needs data that is not there (e.g., empty cart)
- INVALID_INPUT: malformed input such as an unreadable catalog fixture

Exceptions are reserved for the few cases that cannot continue:
``KnownError`` subclasses raised at catalog load and checkout.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"

    # Resource failures
    NOT_FOUND = "not_found"
    EMPTY_RESULT = "empty_result"

    # Durable store failures
    CORRUPT_STATE = "corrupt_state"
    STORAGE_UNAVAILABLE = "storage_unavailable"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"


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


class StoreResult(BaseModel):
    """
    Outcome of a cart or wishlist mutation.

    Truthy on success, falsy on failure, so callers can keep the simple
    ``if cart.add(comic_id): ...`` form.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls) -> "StoreResult":
        """Create a success result."""
        return cls(outcome=OutcomeType.SUCCESS)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "StoreResult":
        """Create a known failure result."""
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @property
    def ok(self) -> bool:
        return self.outcome == OutcomeType.SUCCESS

    @property
    def kind(self) -> FailureKind | None:
        return self.failure.kind if self.failure else None

    def __bool__(self) -> bool:
        return self.ok


# Standard exception types that map to known failures


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
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)


class CatalogLoadError(KnownError):
    """Raised when the catalog fixture cannot be loaded or validated."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=message,
            detail=detail,
            suggestion="Check the catalog fixture path and its JSON contents.",
        )
