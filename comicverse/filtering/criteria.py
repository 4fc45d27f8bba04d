from dataclasses import dataclass, replace
from enum import Enum


class SortKey(str, Enum):
    """Sort options offered on the browse page."""

    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey | None":
        """Return the matching key, or None for empty or unknown values."""
        if value is None or isinstance(value, SortKey):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_SORT_KEY = SortKey.TITLE_ASC


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Optional filter predicates for a catalog query.

    Attributes:
        search_text: Case-insensitive substring of the title
        publisher: Exact publisher name
        genre: Exact genre name
        character: Case-insensitive substring of any character name

    Empty or None values match everything.
    """

    search_text: str | None = None
    publisher: str | None = None
    genre: str | None = None
    character: str | None = None

    def is_empty(self) -> bool:
        return not any(
            (
                (self.search_text or "").strip(),
                self.publisher,
                self.genre,
                (self.character or "").strip(),
            )
        )

    def update(self, **changes: str | None) -> "FilterCriteria":
        """Copy with some fields replaced."""
        return replace(self, **changes)
