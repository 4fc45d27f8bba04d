"""
Catalog service.

Loads and caches the read-only comic catalog from the packaged fixture.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from comicverse.filtering.criteria import SortKey
from comicverse.filtering.query import sort_comics
from comicverse.models.comic import Comic
from comicverse.models.failure import CatalogLoadError
from comicverse.models.payloads import ComicPayload

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "comics.json"

_FIXTURE_ADAPTER = TypeAdapter(list[ComicPayload])

# Home page section sizes
NEW_RELEASES_LIMIT = 6
POPULAR_LIMIT = 6
SPOTLIGHT_LIMIT = 4
SPOTLIGHT_PUBLISHERS = ("Marvel", "DC", "Image")


@dataclass(frozen=True, slots=True)
class HomeSections:
    """Comic rows shown on the home page."""

    featured: list[Comic]
    new_releases: list[Comic]
    popular: list[Comic]
    spotlights: dict[str, list[Comic]]


class CatalogStore:
    """
    Read-only collection of comics.

    Listings preserve fixture order except ``new_releases``. Nothing here
    mutates the underlying records; lookups that miss return None.
    """

    def __init__(self, comics: Iterable[Comic]):
        self._comics: tuple[Comic, ...] = tuple(comics)
        self._by_id: dict[str, Comic] = {}
        for comic in self._comics:
            # First record wins if a caller passes duplicates
            self._by_id.setdefault(comic.id, comic)

    def __len__(self) -> int:
        return len(self._comics)

    def __contains__(self, comic_id: object) -> bool:
        return comic_id in self._by_id

    def by_id(self, comic_id: str) -> Comic | None:
        """Get a comic by id, or None if it is not in the catalog."""
        return self._by_id.get(comic_id)

    def all(self) -> list[Comic]:
        """All comics in fixture order."""
        return list(self._comics)

    def by_publisher(self, publisher: str, limit: int | None = None) -> list[Comic]:
        """Comics from ``publisher`` (exact match), at most ``limit`` of them."""
        return _take([c for c in self._comics if c.publisher == publisher], limit)

    def featured(self) -> list[Comic]:
        return [c for c in self._comics if c.featured]

    def popular(self, limit: int | None = None) -> list[Comic]:
        return _take([c for c in self._comics if c.popular], limit)

    def new_releases(self, limit: int | None = NEW_RELEASES_LIMIT) -> list[Comic]:
        """Newest comics first. Comics released the same day keep fixture order."""
        return _take(sort_comics(self._comics, SortKey.DATE_DESC), limit)

    def publisher_spotlights(
        self,
        publishers: Iterable[str] = SPOTLIGHT_PUBLISHERS,
        limit: int | None = SPOTLIGHT_LIMIT,
    ) -> dict[str, list[Comic]]:
        """
        Home page spotlight rows, keyed by publisher in the order given.

        Examples:
            >>> catalog.publisher_spotlights()["DC"]
            >>> catalog.publisher_spotlights(["Image"], limit=2)
        """
        return {publisher: self.by_publisher(publisher, limit) for publisher in publishers}

    def home_sections(self) -> HomeSections:
        return HomeSections(
            featured=self.featured(),
            new_releases=self.new_releases(NEW_RELEASES_LIMIT),
            popular=self.popular(POPULAR_LIMIT),
            spotlights=self.publisher_spotlights(SPOTLIGHT_PUBLISHERS, SPOTLIGHT_LIMIT),
        )

    def distinct_publishers(self) -> list[str]:
        """Publisher names in first-seen order."""
        return list(dict.fromkeys(c.publisher for c in self._comics))

    def distinct_genres(self) -> list[str]:
        """Genre names in first-seen order."""
        return list(dict.fromkeys(c.genre for c in self._comics))


def _take(comics: list[Comic], limit: int | None) -> list[Comic]:
    return comics if limit is None else comics[: max(limit, 0)]


def load_catalog(path: Path | str | None = None) -> CatalogStore:
    """
    Load the catalog from a JSON fixture.

    Args:
        path: Path to JSON file. Defaults to data/comics.json

    Returns:
        CatalogStore holding the validated comics.

    Raises:
        CatalogLoadError: If the file is missing, unparsable, fails
            validation, or repeats a comic id
    """
    path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    if not path.exists():
        raise CatalogLoadError(f"Catalog fixture not found at {path}.")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(
            f"Catalog fixture at {path} is not valid JSON.",
            detail=str(e),
        ) from e
    except UnicodeDecodeError as e:
        raise CatalogLoadError(
            f"Catalog fixture at {path} is not valid UTF-8.",
            detail=str(e),
        ) from e
    except OSError as e:
        raise CatalogLoadError(
            f"Catalog fixture at {path} could not be read.",
            detail=str(e),
        ) from e

    try:
        records = _FIXTURE_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise CatalogLoadError(
            f"Catalog fixture at {path} contains invalid records.",
            detail=f"{e.error_count()} validation errors",
        ) from e

    seen: set[str] = set()
    duplicates = []
    for record in records:
        if record.id in seen:
            duplicates.append(record.id)
        seen.add(record.id)
    if duplicates:
        raise CatalogLoadError(
            f"Catalog fixture at {path} repeats comic ids.",
            detail=f"Duplicate ids: {duplicates[:10]}",
        )

    catalog = CatalogStore(record.to_model() for record in records)
    logger.info("Loaded %d comics from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> CatalogStore:
    """
    Get the cached default catalog.

    Cached after first load; the fixture is read-only.

    Raises:
        CatalogLoadError: If the packaged fixture cannot be loaded
    """
    return load_catalog()
