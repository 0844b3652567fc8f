"""Service layer public API."""

from __future__ import annotations

from ._shared.errors import InvalidCredentialsError, NotFoundError, ServiceError
from .auth_service import AuthService
from .catalog_service import CatalogService

__all__ = [
    "AuthService",
    "CatalogService",
    "InvalidCredentialsError",
    "NotFoundError",
    "ServiceError",
]
