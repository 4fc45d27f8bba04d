"""
Catalog filtering for the browse page.

Query (filter + sort) is a pure transform; debouncing controls when the
browse page re-runs it while the user is typing.
"""

from comicverse.filtering.criteria import DEFAULT_SORT_KEY, FilterCriteria, SortKey
from comicverse.filtering.debounce import (
    DEFAULT_DEBOUNCE_MS,
    Debouncer,
    ManualScheduler,
    Scheduler,
    TimerScheduler,
)
from comicverse.filtering.query import (
    filter_comics,
    query_comics,
    sort_comics,
    title_collation_key,
)

__all__ = [
    # Criteria
    "DEFAULT_SORT_KEY",
    "FilterCriteria",
    "SortKey",
    # Debounce
    "DEFAULT_DEBOUNCE_MS",
    "Debouncer",
    "ManualScheduler",
    "Scheduler",
    "TimerScheduler",
    # Query
    "filter_comics",
    "query_comics",
    "sort_comics",
    "title_collation_key",
]
