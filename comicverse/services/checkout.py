"""
Cart summary and demo checkout.

The cart page shows subtotal, an example sales tax, and a total. Checkout
is a demonstration: it takes no payment, it records what was in the cart
and empties it.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from comicverse.config import settings
from comicverse.models.cart import CartLineItem
from comicverse.models.failure import FailureKind, KnownError
from comicverse.services.cart_store import CartStore
from comicverse.services.formatting import format_price

logger = logging.getLogger(__name__)


class EmptyCartError(KnownError):
    """Raised when checking out a cart with no items."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.EMPTY_RESULT,
            message="Your cart is empty!",
            suggestion="Browse the catalog and add a comic first.",
        )


@dataclass(frozen=True, slots=True)
class CartSummary:
    """Totals shown on the cart page."""

    subtotal: float
    tax_rate: float
    tax: float
    total: float
    item_count: int
    line_count: int

    @property
    def tax_label(self) -> str:
        return f"Tax ({self.tax_rate * 100:g}%)"

    def lines(self) -> list[tuple[str, str]]:
        """Label/value rows in display order."""
        return [
            ("Subtotal", format_price(self.subtotal)),
            (self.tax_label, format_price(self.tax)),
            ("Total", format_price(self.total)),
        ]


@dataclass(frozen=True, slots=True)
class CheckoutReceipt:
    """What was ordered. No payment is taken."""

    items: tuple[CartLineItem, ...]
    summary: CartSummary
    placed_at: datetime = field(default_factory=lambda: datetime.now(UTC))


def summarize_items(items: list[CartLineItem], tax_rate: float | None = None) -> CartSummary:
    """Compute totals for a list of line items."""
    rate = settings.tax_rate if tax_rate is None else tax_rate
    subtotal = sum((item.line_total for item in items), 0.0)
    tax = subtotal * rate
    return CartSummary(
        subtotal=subtotal,
        tax_rate=rate,
        tax=tax,
        total=subtotal + tax,
        item_count=sum(item.quantity for item in items),
        line_count=len(items),
    )


def summarize_cart(cart: CartStore, tax_rate: float | None = None) -> CartSummary:
    """Compute totals for the current cart."""
    return summarize_items(cart.items(), tax_rate)


def checkout(cart: CartStore, tax_rate: float | None = None) -> CheckoutReceipt:
    """
    Place a demonstration order for the current cart and clear it.

    Args:
        cart: The session's cart
        tax_rate: Overrides the configured tax rate

    Returns:
        Receipt with the ordered items and totals.

    Raises:
        EmptyCartError: If the cart has no items
    """
    items = cart.items()
    if not items:
        raise EmptyCartError()

    receipt = CheckoutReceipt(items=tuple(items), summary=summarize_items(items, tax_rate))

    if not cart.clear():
        logger.warning("Order placed but the cart could not be cleared")

    logger.info(
        "Checkout complete: %d items, total %s",
        receipt.summary.item_count,
        format_price(receipt.summary.total),
    )
    return receipt
