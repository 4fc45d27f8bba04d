from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class Creators:
    """Credited creators of a comic. Any role may be missing."""

    writer: str | None = None
    artist: str | None = None
    colorist: str | None = None


@dataclass(frozen=True, slots=True)
class Comic:
    """
    A comic book in the catalog.

    Attributes:
        id: Unique catalog identifier (e.g., "001")
        title: Display title
        publisher: Publisher name (closed set, e.g., "Marvel", "DC", "Image")
        price: Unit price in dollars
        release_date: Calendar release date
        genre: Genre name (e.g., "Superhero", "Horror")
        characters: Featured characters, in billing order
        cover_image: Cover image URI
        synopsis: Short description for the detail page
        creators: Writer/artist/colorist credits
        featured: Shown in the home page featured row
        popular: Shown in the home page popular row
    """

    id: str
    title: str
    publisher: str
    price: float
    release_date: date
    genre: str
    characters: tuple[str, ...] = ()
    cover_image: str = ""
    synopsis: str = ""
    creators: Creators = Creators()
    featured: bool = False
    popular: bool = False
