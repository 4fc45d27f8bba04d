"""
Typed repositories for the cart and wishlist records.

Each repository owns one storage key and converts between the stored JSON
shape and domain objects. Store logic above this layer never sees raw
JSON, so it can run against any KeyValueBackend.

Stored shapes:
- cart:     [{"id", "title", "price", "coverImage", "quantity"}, ...]
- wishlist: ["001", "004", ...]

A record that does not match its shape is treated as corrupt and read
back as empty. Stored cart quantities above MAX_LINE_QUANTITY are clamped.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from comicverse.config import MAX_LINE_QUANTITY
from comicverse.models.cart import CartLineItem
from comicverse.models.payloads import CartLineItemPayload
from comicverse.services.key_value_state import PersistentState

logger = logging.getLogger(__name__)

DEFAULT_CART_KEY = "comicverse_cart"
DEFAULT_WISHLIST_KEY = "comicverse_wishlist"

_CART_ADAPTER = TypeAdapter(list[CartLineItemPayload])
_WISHLIST_ADAPTER = TypeAdapter(list[str])


class CartRepository:
    """Persists the cart as one ordered list of line items."""

    def __init__(self, state: PersistentState, key: str = DEFAULT_CART_KEY):
        self.state = state
        self.key = key

    def load(self) -> list[CartLineItem]:
        raw = self.state.read(self.key, list)
        try:
            payloads = _CART_ADAPTER.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding invalid cart record under %s (%d errors)", self.key, e.error_count()
            )
            return []

        items: list[CartLineItem] = []
        seen: set[str] = set()
        for payload in payloads:
            # One line per comic id; later duplicates are dropped
            if payload.id in seen:
                logger.warning("Dropping duplicate cart line for comic %s", payload.id)
                continue
            seen.add(payload.id)
            item = payload.to_model()
            if item.quantity > MAX_LINE_QUANTITY:
                logger.warning(
                    "Clamping stored quantity %d for comic %s to %d",
                    item.quantity,
                    item.id,
                    MAX_LINE_QUANTITY,
                )
                item.quantity = MAX_LINE_QUANTITY
            items.append(item)
        return items

    def save(self, items: list[CartLineItem]) -> bool:
        records = [
            CartLineItemPayload.from_model(item).model_dump(mode="json", by_alias=True)
            for item in items
        ]
        return self.state.write(self.key, records)

    def clear(self) -> bool:
        return self.state.remove(self.key)


class WishlistRepository:
    """Persists the wishlist as one ordered list of comic ids."""

    def __init__(self, state: PersistentState, key: str = DEFAULT_WISHLIST_KEY):
        self.state = state
        self.key = key

    def load(self) -> list[str]:
        raw = self.state.read(self.key, list)
        try:
            ids = _WISHLIST_ADAPTER.validate_python(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding invalid wishlist record under %s (%d errors)",
                self.key,
                e.error_count(),
            )
            return []
        # Set semantics with insertion order preserved
        return list(dict.fromkeys(ids))

    def save(self, ids: list[str]) -> bool:
        return self.state.write(self.key, list(ids))

    def clear(self) -> bool:
        return self.state.remove(self.key)
