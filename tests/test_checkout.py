"""Tests for cart totals and the demo checkout."""

import pytest

from comicverse.models.cart import CartLineItem
from comicverse.models.failure import FailureKind
from comicverse.services.cart_store import CartStore
from comicverse.services.catalog import CatalogStore
from comicverse.services.checkout import (
    EmptyCartError,
    checkout,
    summarize_cart,
    summarize_items,
)
from comicverse.services.key_value_state import (
    InMemoryBackend,
    PersistentState,
    StorageUnavailableError,
)
from comicverse.services.repositories import CartRepository


class UndeletableBackend(InMemoryBackend):
    """Backend that accepts writes but refuses deletes."""

    def delete(self, key: str) -> None:
        raise StorageUnavailableError("locked")


class TestSummary:
    def test_empty_cart(self, cart: CartStore) -> None:
        summary = summarize_cart(cart)

        assert summary.subtotal == 0.0
        assert summary.tax == 0.0
        assert summary.total == 0.0
        assert summary.item_count == 0
        assert summary.line_count == 0

    def test_default_tax_rate(self, cart: CartStore) -> None:
        """Tax defaults to the configured 8%."""
        cart.add("006", 2)

        summary = summarize_cart(cart)

        assert summary.subtotal == pytest.approx(245.98)
        assert summary.tax == pytest.approx(245.98 * 0.08)
        assert summary.total == pytest.approx(245.98 * 1.08)
        assert summary.item_count == 2
        assert summary.line_count == 1

    def test_display_lines(self, cart: CartStore) -> None:
        cart.add("006", 2)

        assert summarize_cart(cart).lines() == [
            ("Subtotal", "$245.98"),
            ("Tax (8%)", "$19.68"),
            ("Total", "$265.66"),
        ]

    def test_custom_tax_rate(self) -> None:
        items = [CartLineItem("1", "T", 10.0, "", 3)]

        summary = summarize_items(items, tax_rate=0.0725)

        assert summary.tax == pytest.approx(2.175)
        assert summary.tax_label == "Tax (7.25%)"


class TestCheckout:
    def test_empty_cart_raises(self, cart: CartStore) -> None:
        with pytest.raises(EmptyCartError) as exc_info:
            checkout(cart)

        assert exc_info.value.kind == FailureKind.EMPTY_RESULT
        assert exc_info.value.message == "Your cart is empty!"

    def test_receipt_and_cart_cleared(self, cart: CartStore) -> None:
        cart.add("001", 1)
        cart.add("006", 2)

        receipt = checkout(cart)

        assert [item.id for item in receipt.items] == ["001", "006"]
        assert receipt.summary.item_count == 3
        assert receipt.summary.subtotal == pytest.approx(414.17 + 122.99 * 2)
        assert receipt.placed_at.tzinfo is not None
        assert cart.is_empty()

    def test_clear_failure_still_returns_receipt(
        self, catalog: CatalogStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        cart = CartStore(catalog, CartRepository(PersistentState(UndeletableBackend())))
        cart.add("001")

        receipt = checkout(cart)

        assert receipt.summary.item_count == 1
        assert "could not be cleared" in caplog.text
