"""Authentication services: the ``login(credentials)`` action and identity lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from flask_jwt_extended import create_access_token
from sqlalchemy.orm import Session

from storefront.models.user import User
from storefront.repositories import UserRepository
from storefront.services._shared.errors import InvalidCredentialsError, NotFoundError

LOGGER = logging.getLogger(__name__)


class AuthService:
    """Check credentials and resolve the logged-in user."""

    def __init__(self, session: Session | None = None) -> None:
        self.users = UserRepository(session)

    def login(self, credentials: Mapping[str, str]) -> User:
        """Return the user matching ``credentials`` (``email`` and ``password``).

        :raises InvalidCredentialsError: Unknown email or wrong password. The
            message does not reveal which.
        """
        email = str(credentials.get("email", ""))
        user = self.users.get_by_email(email)
        if user is None or not user.verify_password(str(credentials.get("password", ""))):
            LOGGER.info("Rejected login attempt")
            raise InvalidCredentialsError()
        LOGGER.info("User %s logged in", user.id)
        return user

    def issue_access_token(self, user: User) -> str:
        """Issue a JWT access token for ``user``."""
        return create_access_token(identity=str(user.id))

    def whoami(self, identity: str | int) -> User:
        """Return the user referenced by a JWT identity or a session user id."""
        try:
            user_id = int(identity)
        except (TypeError, ValueError):
            raise NotFoundError("User", str(identity)) from None
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user
