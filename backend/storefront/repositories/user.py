"""User repository."""

from __future__ import annotations

from sqlalchemy import select

from storefront.models.user import User
from storefront.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`."""

    model = User

    def _sortable_fields(self):
        return {"id": User.id, "email": User.email, "name": User.name}

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :returns: User instance or ``None`` when not found.
        """
        stmt = select(User).where(User.email == email.strip().lower())
        return self.session.execute(stmt).scalars().first()
