"""
Cart store.

Ordered line items keyed by comic id, persisted as one record on every
mutation. The cart is re-read from the repository on each call, so two
stores sharing a backend see each other's writes (last writer wins).

INVARIANTS:
- At most one line item per comic id
- Every stored quantity is within [MIN_LINE_QUANTITY, max_quantity]
- Prices are snapshots taken when the line was created
- Unknown ids and missing lines are reported through StoreResult, never raised
"""

import logging

from comicverse.config import MAX_LINE_QUANTITY, MIN_LINE_QUANTITY
from comicverse.models.cart import CartLineItem
from comicverse.models.failure import FailureKind, StoreResult
from comicverse.services.badges import BadgeKind, BadgeNotifier
from comicverse.services.catalog import CatalogStore
from comicverse.services.repositories import CartRepository

logger = logging.getLogger(__name__)


class CartStore:
    def __init__(
        self,
        catalog: CatalogStore,
        repository: CartRepository,
        notifier: BadgeNotifier | None = None,
        max_quantity: int = MAX_LINE_QUANTITY,
    ):
        self.catalog = catalog
        self.repository = repository
        self.notifier = notifier
        self.max_quantity = max_quantity

    # --- Queries ---

    def items(self) -> list[CartLineItem]:
        """Line items in insertion order."""
        return self.repository.load()

    def get(self, comic_id: str) -> CartLineItem | None:
        return next((item for item in self.items() if item.id == comic_id), None)

    def is_empty(self) -> bool:
        return not self.items()

    def item_count(self) -> int:
        """Total quantity across all line items."""
        return sum(item.quantity for item in self.items())

    def subtotal(self) -> float:
        """Sum of snapshot price times quantity."""
        return sum((item.line_total for item in self.items()), 0.0)

    # --- Mutations ---

    def add(self, comic_id: str, quantity: int = 1) -> StoreResult:
        """
        Add ``quantity`` copies of a comic.

        A new line snapshots the catalog price. An existing line accumulates,
        clamped to ``max_quantity``.

        Returns:
            Success, or a NOT_FOUND / OUT_OF_RANGE / STORAGE_UNAVAILABLE failure.
            The cart is unchanged on failure.
        """
        if not MIN_LINE_QUANTITY <= quantity <= self.max_quantity:
            return StoreResult.known_failure(
                kind=FailureKind.OUT_OF_RANGE,
                message=(
                    f"Please enter a valid quantity ({MIN_LINE_QUANTITY}-{self.max_quantity})."
                ),
                detail=f"quantity={quantity}",
            )

        comic = self.catalog.by_id(comic_id)
        if comic is None:
            logger.warning("Comic not found: %s", comic_id)
            return StoreResult.known_failure(
                kind=FailureKind.NOT_FOUND,
                message="That comic is not in the catalog.",
                detail=f"comic_id={comic_id}",
            )

        items = self.items()
        existing = next((item for item in items if item.id == comic_id), None)
        if existing:
            existing.quantity = min(existing.quantity + quantity, self.max_quantity)
        else:
            items.append(CartLineItem.from_comic(comic, quantity))

        logger.debug("Added %d x %s to cart", quantity, comic_id)
        return self._save(items)

    def set_quantity(self, comic_id: str, quantity: int) -> StoreResult:
        """
        Overwrite the quantity of an existing line.

        A quantity of zero or below removes the line. Quantities above
        ``max_quantity`` are clamped.

        Returns:
            Success, or NOT_FOUND if the comic has no line in the cart.
        """
        if quantity <= 0:
            return self.remove(comic_id)

        items = self.items()
        existing = next((item for item in items if item.id == comic_id), None)
        if existing is None:
            return StoreResult.known_failure(
                kind=FailureKind.NOT_FOUND,
                message="That comic is not in your cart.",
                detail=f"comic_id={comic_id}",
            )

        existing.quantity = min(quantity, self.max_quantity)
        logger.debug("Set cart quantity of %s to %d", comic_id, existing.quantity)
        return self._save(items)

    def remove(self, comic_id: str) -> StoreResult:
        """Remove the line for ``comic_id``. Removing an absent line succeeds."""
        items = [item for item in self.items() if item.id != comic_id]
        logger.debug("Removed %s from cart", comic_id)
        return self._save(items)

    def clear(self) -> StoreResult:
        """Delete the whole cart record."""
        if not self.repository.clear():
            return _storage_failure()
        self._notify(0)
        return StoreResult.success()

    # --- Internal ---

    def _save(self, items: list[CartLineItem]) -> StoreResult:
        if not self.repository.save(items):
            return _storage_failure()
        self._notify(sum(item.quantity for item in items))
        return StoreResult.success()

    def _notify(self, count: int) -> None:
        if self.notifier is not None:
            self.notifier.publish(BadgeKind.CART, count)


def _storage_failure() -> StoreResult:
    return StoreResult.known_failure(
        kind=FailureKind.STORAGE_UNAVAILABLE,
        message="Your cart could not be saved. Please try again.",
        suggestion="Check that local storage is enabled.",
    )
