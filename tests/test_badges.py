"""Tests for badge count notifications."""

import pytest

from comicverse.services.badges import BadgeKind, BadgeNotifier, BadgeUpdate


class TestBadgeUpdate:
    def test_hidden_at_zero(self) -> None:
        assert BadgeUpdate(BadgeKind.CART, 0).visible is False
        assert BadgeUpdate(BadgeKind.CART, 3).visible is True


class TestBadgeNotifier:
    def test_listeners_called_in_order(self, notifier: BadgeNotifier) -> None:
        seen: list[str] = []
        notifier.subscribe(lambda u: seen.append(f"first:{u.count}"))
        notifier.subscribe(lambda u: seen.append(f"second:{u.count}"))

        notifier.publish(BadgeKind.CART, 4)

        assert seen == ["first:4", "second:4"]

    def test_unsubscribe(self, notifier: BadgeNotifier) -> None:
        seen: list[BadgeUpdate] = []
        unsubscribe = notifier.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        notifier.publish(BadgeKind.WISHLIST, 1)

        assert seen == []

    def test_last_update_per_kind(self, notifier: BadgeNotifier) -> None:
        assert notifier.last(BadgeKind.CART) is None

        notifier.publish(BadgeKind.CART, 2)
        notifier.publish(BadgeKind.WISHLIST, 5)
        notifier.publish(BadgeKind.CART, 3)

        assert notifier.last(BadgeKind.CART) == BadgeUpdate(BadgeKind.CART, 3)
        assert notifier.last(BadgeKind.WISHLIST) == BadgeUpdate(BadgeKind.WISHLIST, 5)

    def test_failing_listener_does_not_block_others(
        self, notifier: BadgeNotifier, caplog: pytest.LogCaptureFixture
    ) -> None:
        seen: list[BadgeUpdate] = []

        def broken(update: BadgeUpdate) -> None:
            raise RuntimeError("render failed")

        notifier.subscribe(broken)
        notifier.subscribe(seen.append)

        update = notifier.publish(BadgeKind.CART, 1)

        assert seen == [update]
        assert "Badge listener failed" in caplog.text
