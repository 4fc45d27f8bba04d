"""
Browse page session.

Holds the current filter criteria and sort key for one browse page and
re-runs the catalog query whenever they change. Dropdown changes apply
immediately; free-text fields (search, character) are debounced so the
query runs once typing pauses.
"""

import logging
from collections.abc import Callable, Mapping

from comicverse.filtering.criteria import DEFAULT_SORT_KEY, FilterCriteria, SortKey
from comicverse.filtering.debounce import DEFAULT_DEBOUNCE_MS, Debouncer, Scheduler
from comicverse.filtering.query import query_comics
from comicverse.models.comic import Comic
from comicverse.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

ResultsListener = Callable[[list[Comic]], None]


class BrowseSession:
    def __init__(
        self,
        catalog: CatalogStore,
        scheduler: Scheduler | None = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        on_results: ResultsListener | None = None,
    ):
        self.catalog = catalog
        self.criteria = FilterCriteria()
        self.sort_key: SortKey | None = DEFAULT_SORT_KEY
        self.on_results = on_results
        self._debounced_apply = Debouncer(self.apply, wait_ms=debounce_ms, scheduler=scheduler)
        self.results: list[Comic] = []
        self.apply()

    def apply(self) -> list[Comic]:
        """Run the query with the current criteria and sort key."""
        self.results = query_comics(self.catalog.all(), self.criteria, self.sort_key)
        logger.debug("Browse query matched %d of %d comics", len(self.results), len(self.catalog))
        if self.on_results is not None:
            self.on_results(self.results)
        return self.results

    def update_criteria(self, **changes: str | None) -> list[Comic]:
        """Change dropdown-style criteria (publisher, genre) and re-query now."""
        self.criteria = self.criteria.update(**changes)
        return self.apply()

    def type_search(self, text: str) -> None:
        """Record search box input; the query runs after the debounce window."""
        self.criteria = self.criteria.update(search_text=text)
        self._debounced_apply()

    def type_character(self, text: str) -> None:
        """Record character box input; the query runs after the debounce window."""
        self.criteria = self.criteria.update(character=text)
        self._debounced_apply()

    def flush(self) -> bool:
        """Run a pending debounced query immediately."""
        return self._debounced_apply.flush()

    def set_sort(self, key: SortKey | str | None) -> list[Comic]:
        """Change the sort order. Unknown keys leave the filtered order as is."""
        self.sort_key = SortKey.parse(key)
        return self.apply()

    def clear_filters(self) -> list[Comic]:
        """Reset every criterion and the sort key to their defaults."""
        self._debounced_apply.cancel()
        self.criteria = FilterCriteria()
        self.sort_key = DEFAULT_SORT_KEY
        return self.apply()

    def apply_url_parameters(self, params: Mapping[str, str]) -> list[Comic]:
        """
        Apply initial filters from page URL parameters (e.g., ``?publisher=Marvel``).

        Unrecognized parameters are ignored.
        """
        publisher = params.get("publisher")
        if publisher:
            return self.update_criteria(publisher=publisher)
        return self.results

    def results_info(self) -> str:
        """Result count line shown above the grid."""
        total = len(self.catalog)
        count = len(self.results)
        if count == total:
            return f"Showing all {count} comics"
        return f"Showing {count} of {total} comics"
