"""
Pydantic schemas for serialized records.

Two shapes cross the package boundary as JSON:
- catalog fixture entries (``comics.json``), validated once at load time
- persisted cart line items, validated every time the cart is read back

Field aliases keep the camelCase keys used by the stored records.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from comicverse.models.cart import CartLineItem
from comicverse.models.comic import Comic, Creators


class CreatorsPayload(BaseModel):
    writer: str | None = None
    artist: str | None = None
    colorist: str | None = None


class ComicPayload(BaseModel):
    """A catalog fixture entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str
    publisher: str
    price: float = Field(..., ge=0)
    release_date: date = Field(..., alias="releaseDate")
    genre: str
    characters: list[str] = Field(default_factory=list)
    cover_image: str = Field(default="", alias="coverImage")
    synopsis: str = ""
    creators: CreatorsPayload = Field(default_factory=CreatorsPayload)
    featured: bool = False
    popular: bool = False

    def to_model(self) -> Comic:
        """Convert to the immutable domain model."""
        return Comic(
            id=self.id,
            title=self.title,
            publisher=self.publisher,
            price=self.price,
            release_date=self.release_date,
            genre=self.genre,
            characters=tuple(self.characters),
            cover_image=self.cover_image,
            synopsis=self.synopsis,
            creators=Creators(
                writer=self.creators.writer,
                artist=self.creators.artist,
                colorist=self.creators.colorist,
            ),
            featured=self.featured,
            popular=self.popular,
        )


class CartLineItemPayload(BaseModel):
    """A persisted cart line item: ``{id, title, price, coverImage, quantity}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    price: float = Field(..., ge=0)
    cover_image: str = Field(default="", alias="coverImage")
    quantity: int = Field(..., ge=1)

    @classmethod
    def from_model(cls, item: CartLineItem) -> "CartLineItemPayload":
        return cls(
            id=item.id,
            title=item.title,
            price=item.price,
            cover_image=item.cover_image,
            quantity=item.quantity,
        )

    def to_model(self) -> CartLineItem:
        return CartLineItem(
            id=self.id,
            title=self.title,
            price=self.price,
            cover_image=self.cover_image,
            quantity=self.quantity,
        )
