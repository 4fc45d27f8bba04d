"""Display formatting helpers shared by the page renderers."""

import html
from datetime import date


def format_price(price: float) -> str:
    """Format a dollar amount, e.g. ``414.17 -> "$414.17"``."""
    return f"${price:.2f}"


def format_date(value: date | str) -> str:
    """Format a release date, e.g. ``"2024-01-15" -> "January 15, 2024"``."""
    d = value if isinstance(value, date) else date.fromisoformat(value)
    return f"{d:%B} {d.day}, {d.year}"


def escape_html(text: str | None) -> str:
    """Escape text for safe inclusion in HTML content or attribute values."""
    return html.escape(text or "", quote=True)


def truncate(text: str, length: int = 20, suffix: str = "...") -> str:
    """Shorten ``text`` to ``length`` characters plus ``suffix`` (used for cover fallbacks)."""
    if len(text) <= length:
        return text
    return text[:length] + suffix
