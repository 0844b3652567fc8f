"""Thing model: an item offered for sale."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from storefront.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .favorite import Favorite


class Thing(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Purchasable item listed on the products page.

    Fields
    ------
    name : str
        Product title.
    price : int
        Price in minor currency units (``9999`` is ``99.99``).
    description : str | None
        Free-form marketing copy.
    """

    __tablename__ = "things"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (CheckConstraint("price >= 0", name="price_non_negative"),)

    favorites: Mapped[list[Favorite]] = relationship(
        "Favorite",
        back_populates="thing",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def display_price(self) -> str:
        """Return the price formatted with two decimal places (``"99.99"``)."""
        units, cents = divmod(int(self.price or 0), 100)
        return f"{units}.{cents:02d}"

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Thing name is required.")
        return value.strip()

    @validates("price")
    def _validate_price(self, key: str, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("Price must be an integer amount of minor units.")
        if value < 0:
            raise ValueError("Price must not be negative.")
        return value
