from comicverse.models.cart import CartLineItem
from comicverse.models.comic import Comic, Creators
from comicverse.models.failure import (
    CatalogLoadError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    StoreResult,
)

__all__ = [
    "CartLineItem",
    "CatalogLoadError",
    "Comic",
    "Creators",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "OutcomeType",
    "StoreResult",
]
