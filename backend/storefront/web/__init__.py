"""Server-rendered pages: the app shell, navbar, login form and product listing."""

from __future__ import annotations

from flask import Flask

from .views import bp


def init_app(app: Flask) -> None:
    """Mount the HTML pages at the site root."""
    app.register_blueprint(bp)


__all__ = ["bp", "init_app"]
