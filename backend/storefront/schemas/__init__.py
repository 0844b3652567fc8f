"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, TokenResponseSchema, WhoAmISchema
from .thing import ThingQuerySchema, ThingSchema

__all__ = [
    "LoginSchema",
    "ThingQuerySchema",
    "ThingSchema",
    "TokenResponseSchema",
    "WhoAmISchema",
]
