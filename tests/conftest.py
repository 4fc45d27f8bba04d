from collections.abc import Iterator
from datetime import date

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from comicverse.models.comic import Comic
from comicverse.models.db import Base
from comicverse.services.badges import BadgeNotifier, BadgeUpdate
from comicverse.services.cart_store import CartStore
from comicverse.services.catalog import CatalogStore, get_catalog
from comicverse.services.key_value_state import InMemoryBackend, PersistentState
from comicverse.services.repositories import CartRepository, WishlistRepository
from comicverse.services.wishlist_store import WishlistStore


def _make_comic(
    comic_id: str,
    title: str = "Untitled",
    publisher: str = "Marvel",
    price: float = 10.0,
    release_date: date = date(2024, 1, 1),
    genre: str = "Superhero",
    characters: tuple[str, ...] = (),
    featured: bool = False,
    popular: bool = False,
) -> Comic:
    return Comic(
        id=comic_id,
        title=title,
        publisher=publisher,
        price=price,
        release_date=release_date,
        genre=genre,
        characters=characters,
        cover_image=f"images/{comic_id}.jpg",
        featured=featured,
        popular=popular,
    )


@pytest.fixture
def make_comic():
    """Factory for ad-hoc Comic records."""
    return _make_comic


@pytest.fixture
def catalog() -> CatalogStore:
    """The packaged 12-comic catalog."""
    return get_catalog()


@pytest.fixture
def scenario_catalog() -> CatalogStore:
    """Two-comic catalog: A (Zorro, X, $10) and B (Apple, Y, $5)."""
    return CatalogStore(
        [
            _make_comic("A", title="Zorro", publisher="X", price=10.0),
            _make_comic("B", title="Apple", publisher="Y", price=5.0),
        ]
    )


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def state(backend: InMemoryBackend) -> PersistentState:
    return PersistentState(backend)


@pytest.fixture
def notifier() -> BadgeNotifier:
    return BadgeNotifier()


@pytest.fixture
def badge_updates(notifier: BadgeNotifier) -> list[BadgeUpdate]:
    """Every badge update published during the test."""
    updates: list[BadgeUpdate] = []
    notifier.subscribe(updates.append)
    return updates


@pytest.fixture
def cart(catalog: CatalogStore, state: PersistentState, notifier: BadgeNotifier) -> CartStore:
    return CartStore(catalog, CartRepository(state), notifier=notifier)


@pytest.fixture
def wishlist(
    catalog: CatalogStore, state: PersistentState, notifier: BadgeNotifier
) -> WishlistStore:
    return WishlistStore(catalog, WishlistRepository(state), notifier=notifier)


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Provide a database session for tests."""
    with session_factory() as session:
        yield session
