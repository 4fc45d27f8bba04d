"""
Catalog query and sort engine.

Pure transforms over a sequence of comics. Inputs are never mutated;
every call returns a new list.

Matching rules (all criteria ANDed, empty criteria match everything):
- search_text: title contains the text, case-insensitive, surrounding whitespace ignored
- publisher: exact equality (publishers are a closed set)
- genre: exact equality
- character: any character name contains the text, case-insensitive
"""

import logging
import unicodedata
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from comicverse.filtering.criteria import FilterCriteria, SortKey
from comicverse.models.comic import Comic

logger = logging.getLogger(__name__)


def _norm(s: str | None) -> str:
    """Lowercase and strip a string for case-insensitive comparison."""
    return (s or "").strip().casefold()


def filter_comics(comics: Iterable[Comic], criteria: FilterCriteria) -> list[Comic]:
    """
    Filter comics by criteria, preserving input order.

    Args:
        comics: Comics to filter (typically ``CatalogStore.all()``)
        criteria: Active filter predicates

    Returns:
        Comics matching every active criterion.

    Examples:
        >>> filter_comics(catalog.all(), FilterCriteria(publisher="Marvel"))
        >>> filter_comics(catalog.all(), FilterCriteria(character="wolv"))
    """
    search = _norm(criteria.search_text)
    character = _norm(criteria.character)
    publisher = criteria.publisher or None
    genre = criteria.genre or None

    results = []
    for comic in comics:
        if search and search not in comic.title.casefold():
            continue

        if publisher and comic.publisher != publisher:
            continue

        if genre and comic.genre != genre:
            continue

        if character and not any(character in name.casefold() for name in comic.characters):
            continue

        results.append(comic)

    return results


def title_collation_key(title: str) -> tuple[str, str]:
    """
    Locale-style collation key for titles.

    Compares first ignoring accents and case ("Pérez" sorts with "Perez"),
    then breaks ties on the case-folded original.
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), title.casefold()


def _release_date(comic: Comic) -> date:
    value: Any = comic.release_date
    # Dates built outside the fixture loader may still be ISO strings
    return value if isinstance(value, date) else date.fromisoformat(str(value))


_SORTS: dict[SortKey, tuple[Callable[[Comic], Any], bool]] = {
    SortKey.TITLE_ASC: (lambda c: title_collation_key(c.title), False),
    SortKey.TITLE_DESC: (lambda c: title_collation_key(c.title), True),
    SortKey.PRICE_ASC: (lambda c: c.price, False),
    SortKey.PRICE_DESC: (lambda c: c.price, True),
    SortKey.DATE_ASC: (_release_date, False),
    SortKey.DATE_DESC: (_release_date, True),
}


def sort_comics(comics: Iterable[Comic], key: SortKey | str | None) -> list[Comic]:
    """
    Sort comics into a new list.

    Sorting is stable: comics that compare equal keep their input order.
    An absent or unknown key returns the input order unchanged.
    """
    items = list(comics)
    sort_key = SortKey.parse(key)
    if sort_key is None:
        if key:
            logger.debug("Ignoring unknown sort key %r", key)
        return items

    key_func, reverse = _SORTS[sort_key]
    items.sort(key=key_func, reverse=reverse)
    return items


def query_comics(
    comics: Iterable[Comic],
    criteria: FilterCriteria,
    key: SortKey | str | None = None,
) -> list[Comic]:
    """Filter then sort."""
    return sort_comics(filter_comics(comics, criteria), key)
