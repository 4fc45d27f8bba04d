"""
ComicVerse services.

Catalog access, cart and wishlist state, and the browse/checkout logic
behind the storefront pages.
"""

from comicverse.services.badges import BadgeKind, BadgeNotifier, BadgeUpdate
from comicverse.services.browse import BrowseSession
from comicverse.services.cart_store import CartStore
from comicverse.services.catalog import CatalogStore, HomeSections, get_catalog, load_catalog
from comicverse.services.checkout import (
    CartSummary,
    CheckoutReceipt,
    EmptyCartError,
    checkout,
    summarize_cart,
    summarize_items,
)
from comicverse.services.formatting import escape_html, format_date, format_price, truncate
from comicverse.services.key_value_state import (
    InMemoryBackend,
    KeyValueBackend,
    PersistentState,
    SqlBackend,
    StorageUnavailableError,
)
from comicverse.services.repositories import CartRepository, WishlistRepository
from comicverse.services.wishlist_store import WishlistStore

__all__ = [
    # Badges
    "BadgeKind",
    "BadgeNotifier",
    "BadgeUpdate",
    # Browse
    "BrowseSession",
    # Catalog
    "CatalogStore",
    "HomeSections",
    "get_catalog",
    "load_catalog",
    # Cart and wishlist
    "CartRepository",
    "CartStore",
    "WishlistRepository",
    "WishlistStore",
    # Checkout
    "CartSummary",
    "CheckoutReceipt",
    "EmptyCartError",
    "checkout",
    "summarize_cart",
    "summarize_items",
    # Formatting
    "escape_html",
    "format_date",
    "format_price",
    "truncate",
    # Persistence
    "InMemoryBackend",
    "KeyValueBackend",
    "PersistentState",
    "SqlBackend",
    "StorageUnavailableError",
]
