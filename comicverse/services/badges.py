"""
Badge count notifications.

The page chrome shows a count next to the cart (and wishlist) links. Stores
publish a BadgeUpdate after every mutation; the page layer subscribes and
redraws. Publishing is synchronous and in subscription order.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class BadgeKind(str, Enum):
    CART = "cart"
    WISHLIST = "wishlist"


@dataclass(frozen=True, slots=True)
class BadgeUpdate:
    """New count for one badge."""

    kind: BadgeKind
    count: int

    @property
    def visible(self) -> bool:
        """Badges are hidden when the count is zero."""
        return self.count > 0


BadgeListener = Callable[[BadgeUpdate], None]


class BadgeNotifier:
    """Fan-out of badge updates to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[BadgeListener] = []
        self._last: dict[BadgeKind, BadgeUpdate] = {}

    def subscribe(self, listener: BadgeListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A callable that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, kind: BadgeKind, count: int) -> BadgeUpdate:
        """Send a new count to every listener."""
        update = BadgeUpdate(kind=kind, count=count)
        self._last[kind] = update
        for listener in list(self._listeners):
            try:
                listener(update)
            except Exception:
                # The store mutation has already been persisted
                logger.exception("Badge listener failed for %s", kind.value)
        return update

    def last(self, kind: BadgeKind) -> BadgeUpdate | None:
        """Most recent update published for ``kind``."""
        return self._last.get(kind)
