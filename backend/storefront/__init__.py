"""Expose the application factory at package level.

``from storefront import create_app`` for WSGI servers and the Flask CLI
(``flask --app storefront run``).
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
