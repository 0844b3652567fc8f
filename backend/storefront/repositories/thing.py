"""Thing repository backing the product listing."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from storefront.models.favorite import Favorite
from storefront.models.thing import Thing
from storefront.repositories.base import BaseRepository


class ThingRepository(BaseRepository[Thing]):
    """Persistence-only repository for :class:`Thing`."""

    model = Thing

    def _sortable_fields(self):
        return {
            "id": Thing.id,
            "name": Thing.name,
            "price": Thing.price,
            "created_at": Thing.created_at,
        }

    def favorites_of(self, user_id: int) -> Sequence[Thing]:
        """Return the things ``user_id`` marked as favorite, ordered by name."""
        stmt = (
            select(Thing)
            .join(Favorite, Favorite.thing_id == Thing.id)
            .where(Favorite.user_id == user_id)
            .order_by(Thing.name.asc(), Thing.id.asc())
        )
        return list(self.session.execute(stmt).scalars())
