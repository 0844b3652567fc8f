"""
Domain-level exceptions used within the service layer.

These exceptions never depend on Flask or HTTP. The API layer translates them
to :mod:`storefront.core.errors` problems; the HTML views turn them into
flashed messages.
"""

from __future__ import annotations

from dataclasses import dataclass


class ServiceError(Exception):
    """Base class for all service-level errors."""


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found.

    :param entity: Entity name (e.g., "Thing").
    :param key: Identifier or search key.
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


class InvalidCredentialsError(ServiceError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)
