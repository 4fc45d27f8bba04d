from dataclasses import dataclass

from comicverse.models.comic import Comic


@dataclass(slots=True)
class CartLineItem:
    """
    One cart entry: a quantity of a single comic at a snapshotted price.

    The price is copied from the catalog when the line is created and is
    never re-read afterwards.
    """

    id: str
    title: str
    price: float
    cover_image: str
    quantity: int = 1

    @classmethod
    def from_comic(cls, comic: Comic, quantity: int = 1) -> "CartLineItem":
        """Create a line item with a price snapshot of ``comic``."""
        return cls(
            id=comic.id,
            title=comic.title,
            price=comic.price,
            cover_image=comic.cover_image,
            quantity=quantity,
        )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
