"""
Wishlist store.

A set of comic ids with insertion order preserved, persisted as one
record. Like the cart, every call re-reads the record.
"""

import logging

from comicverse.models.comic import Comic
from comicverse.services.badges import BadgeKind, BadgeNotifier
from comicverse.services.catalog import CatalogStore
from comicverse.services.repositories import WishlistRepository

logger = logging.getLogger(__name__)


class WishlistStore:
    """
    Saved-for-later comics.

    Membership is tracked by id only. ``entries()`` resolves ids against the
    catalog and skips ids the catalog no longer knows.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        repository: WishlistRepository,
        notifier: BadgeNotifier | None = None,
    ):
        self.catalog = catalog
        self.repository = repository
        self.notifier = notifier

    def ids(self) -> list[str]:
        return self.repository.load()

    def count(self) -> int:
        return len(self.ids())

    def contains(self, comic_id: str) -> bool:
        return comic_id in self.ids()

    def add(self, comic_id: str) -> bool:
        """
        Add ``comic_id``.

        Returns:
            True if it was newly added, False if already present or the
            write failed.
        """
        ids = self.ids()
        if comic_id in ids:
            return False
        ids.append(comic_id)
        return self._save(ids)

    def remove(self, comic_id: str) -> bool:
        """Remove ``comic_id``. Returns True if it was present and the removal was saved."""
        ids = self.ids()
        if comic_id not in ids:
            return False
        ids.remove(comic_id)
        return self._save(ids)

    def toggle(self, comic_id: str) -> bool:
        """
        Flip membership of ``comic_id`` in a single read-modify-write.

        Returns:
            True if the comic is now on the wishlist. A failed write leaves
            membership unchanged and the previous state is returned.
        """
        ids = self.ids()
        if comic_id in ids:
            ids.remove(comic_id)
            now_present = False
        else:
            ids.append(comic_id)
            now_present = True
        if not self._save(ids):
            return not now_present
        return now_present

    def entries(self) -> list[Comic]:
        """Wishlisted comics in the order they were added."""
        comics = []
        for comic_id in self.ids():
            comic = self.catalog.by_id(comic_id)
            if comic is None:
                logger.debug("Skipping stale wishlist id %s", comic_id)
                continue
            comics.append(comic)
        return comics

    def clear(self) -> bool:
        cleared = self.repository.clear()
        if cleared:
            self._notify(0)
        return cleared

    def _save(self, ids: list[str]) -> bool:
        if not self.repository.save(ids):
            return False
        self._notify(len(ids))
        return True

    def _notify(self, count: int) -> None:
        if self.notifier is not None:
            self.notifier.publish(BadgeKind.WISHLIST, count)
