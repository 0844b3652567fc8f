"""Tests for the ``flask seed`` command group."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from storefront.core.extensions import db
from storefront.factory import create_app
from storefront.models import Favorite, Thing, User

pytestmark = pytest.mark.usefixtures("restore_logging")


def _make_app(tmp_path, **overrides):
    class CliConfig:
        TESTING = True
        SECRET_KEY = "test-secret"
        JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'cli.db'}"
        SQLALCHEMY_TRACK_MODIFICATIONS = False
        LOG_LEVEL = "WARNING"
        SEED_READY_ATTEMPTS = 1

    for key, value in overrides.items():
        setattr(CliConfig, key, value)
    return create_app(CliConfig)


def _counts(app):
    with app.app_context():
        try:
            return tuple(
                db.session.scalar(select(func.count()).select_from(model))
                for model in (User, Thing, Favorite)
            )
        finally:
            db.session.remove()


def test_fresh_recreates_schema_and_seeds(tmp_path):
    app = _make_app(tmp_path)

    result = app.test_cli_runner().invoke(args=["seed", "fresh", "--yes"])

    assert result.exit_code == 0, result.output
    assert "Seed summary:" in result.output
    assert "created= 6" in result.output
    assert _counts(app) == (2, 6, 4)


def test_fresh_is_repeatable(tmp_path):
    app = _make_app(tmp_path)
    runner = app.test_cli_runner()

    runner.invoke(args=["seed", "fresh", "--yes"])
    result = runner.invoke(args=["seed", "fresh", "--yes"])

    assert result.exit_code == 0, result.output
    assert _counts(app) == (2, 6, 4)


def test_fresh_asks_for_confirmation(tmp_path):
    app = _make_app(tmp_path)

    result = app.test_cli_runner().invoke(args=["seed", "fresh"], input="n\n")

    assert result.exit_code == 1
    assert "Aborted" in result.output


def test_fresh_refuses_production(tmp_path):
    app = _make_app(tmp_path, TESTING=False, DEBUG=False, APP_ENV="production")

    result = app.test_cli_runner().invoke(args=["seed", "fresh", "--yes"])

    assert result.exit_code == 2
    assert "restricted to non-production" in result.output


def test_run_on_existing_schema_reports_duplicates(tmp_path):
    app = _make_app(tmp_path)
    runner = app.test_cli_runner()
    runner.invoke(args=["seed", "fresh", "--yes"])

    result = runner.invoke(args=["seed", "--verbose", "run"])

    assert result.exit_code == 0, result.output
    assert "users" in result.output
    assert "failed= 2" in result.output
    assert _counts(app)[0] == 2
