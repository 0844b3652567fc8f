"""Repository exports."""

from __future__ import annotations

from .base import BaseRepository
from .thing import ThingRepository
from .user import UserRepository

__all__ = ["BaseRepository", "ThingRepository", "UserRepository"]
