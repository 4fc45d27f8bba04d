"""
SQLAlchemy ORM models for persistent storage.

The durable store is a flat key-value table. Each row holds one whole
record (the cart or the wishlist) serialized as JSON text, scoped by a
namespace that plays the role of a browser profile.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class KeyValueRecordDB(Base):
    """
    A single stored value.

    Writes replace the whole value; there is no partial update.
    """

    __tablename__ = "key_value_records"
    __table_args__ = (UniqueConstraint("namespace", "key", name="uq_namespace_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    namespace: Mapped[str] = mapped_column(String(255), index=True)
    key: Mapped[str] = mapped_column(String(255))
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<KeyValueRecordDB(namespace={self.namespace}, key={self.key})>"
