"""
Storefront session setup.

``create_storefront()`` builds everything one browser session needs, once:
the catalog, the durable store, the cart and wishlist over it, and the
badge notifier the page chrome listens to. Pages receive the Storefront
and never reach for module-level state.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from comicverse.config import Settings, settings
from comicverse.db.database import create_db_engine, create_session_factory, init_db
from comicverse.filtering.debounce import Scheduler
from comicverse.services.badges import BadgeKind, BadgeNotifier
from comicverse.services.browse import BrowseSession, ResultsListener
from comicverse.services.cart_store import CartStore
from comicverse.services.catalog import CatalogStore, HomeSections, get_catalog, load_catalog
from comicverse.services.checkout import CartSummary, CheckoutReceipt, checkout, summarize_cart
from comicverse.services.key_value_state import KeyValueBackend, PersistentState, SqlBackend
from comicverse.services.repositories import CartRepository, WishlistRepository
from comicverse.services.wishlist_store import WishlistStore

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings | None = None) -> None:
    """Configure root logging for an interactive session."""
    app_settings = app_settings or settings
    logging.basicConfig(
        level=logging.DEBUG if app_settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@dataclass
class Storefront:
    """Per-session collaborators shared by every page."""

    settings: Settings
    catalog: CatalogStore
    state: PersistentState
    badges: BadgeNotifier
    cart: CartStore
    wishlist: WishlistStore

    def browse(
        self,
        params: Mapping[str, str] | None = None,
        scheduler: Scheduler | None = None,
        on_results: ResultsListener | None = None,
    ) -> BrowseSession:
        """Start a browse page session, applying any URL parameters."""
        session = BrowseSession(
            self.catalog,
            scheduler=scheduler,
            debounce_ms=self.settings.search_debounce_ms,
            on_results=on_results,
        )
        if params:
            session.apply_url_parameters(params)
        return session

    def home(self) -> HomeSections:
        """Rows for the home page."""
        return self.catalog.home_sections()

    def cart_summary(self) -> CartSummary:
        return summarize_cart(self.cart, self.settings.tax_rate)

    def checkout(self) -> CheckoutReceipt:
        return checkout(self.cart, self.settings.tax_rate)

    def refresh_badges(self) -> None:
        """Publish current counts, e.g. when a page first loads."""
        self.badges.publish(BadgeKind.CART, self.cart.item_count())
        self.badges.publish(BadgeKind.WISHLIST, self.wishlist.count())


def _default_backend(app_settings: Settings) -> SqlBackend:
    engine = create_db_engine(app_settings.database_url)
    init_db(engine)
    factory = create_session_factory(engine)
    return SqlBackend(factory, namespace=app_settings.profile)


def create_storefront(
    app_settings: Settings | None = None,
    backend: KeyValueBackend | None = None,
    catalog: CatalogStore | None = None,
) -> Storefront:
    """
    Build a storefront session.

    Args:
        app_settings: Settings to use. Defaults to the environment settings.
        backend: Durable store. Defaults to the configured SQL database,
            scoped to ``app_settings.profile``.
        catalog: Catalog to use. Defaults to ``app_settings.catalog_path``
            or the packaged fixture.

    Raises:
        CatalogLoadError: If the catalog fixture cannot be loaded
    """
    app_settings = app_settings or settings

    if catalog is None:
        if app_settings.catalog_path:
            catalog = load_catalog(app_settings.catalog_path)
        else:
            catalog = get_catalog()

    state = PersistentState(backend if backend is not None else _default_backend(app_settings))
    badges = BadgeNotifier()

    storefront = Storefront(
        settings=app_settings,
        catalog=catalog,
        state=state,
        badges=badges,
        cart=CartStore(
            catalog,
            CartRepository(state, app_settings.cart_storage_key),
            notifier=badges,
        ),
        wishlist=WishlistStore(
            catalog,
            WishlistRepository(state, app_settings.wishlist_storage_key),
            notifier=badges,
        ),
    )
    logger.info(
        "%s session ready (profile=%s, %d comics)",
        app_settings.app_name,
        app_settings.profile,
        len(catalog),
    )
    return storefront
