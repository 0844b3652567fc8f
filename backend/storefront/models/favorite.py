"""Favorite join between users and things."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.core.extensions import db

from .base import TimestampMixin

if TYPE_CHECKING:
    from .thing import Thing
    from .user import User


class Favorite(TimestampMixin, db.Model):
    """Mark a :class:`Thing` as liked by a :class:`User`."""

    __tablename__ = "favorites"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    thing_id: Mapped[int] = mapped_column(
        ForeignKey("things.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    user: Mapped[User] = relationship("User", back_populates="favorites")
    thing: Mapped[Thing] = relationship("Thing", back_populates="favorites")

    def __repr__(self) -> str:
        return f"<Favorite user_id={self.user_id} thing_id={self.thing_id}>"
