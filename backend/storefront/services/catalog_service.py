"""Product catalogue queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from storefront.models.thing import Thing
from storefront.repositories import ThingRepository
from storefront.services._shared.errors import NotFoundError


class CatalogService:
    """Read-only access to the things for sale and users' favorites."""

    def __init__(self, session: Session | None = None) -> None:
        self.things = ThingRepository(session)

    def list_things(self, sort: Iterable[str] | None = None) -> Sequence[Thing]:
        return self.things.list_all(sort=sort)

    def get_thing(self, thing_id: int) -> Thing:
        thing = self.things.get(thing_id)
        if thing is None:
            raise NotFoundError("Thing", thing_id)
        return thing

    def favorites_of(self, user_id: int) -> Sequence[Thing]:
        return self.things.favorites_of(user_id)
