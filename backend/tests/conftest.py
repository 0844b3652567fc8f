"""Pytest fixtures configuring an isolated transactional database layer.

Each test runs inside a transaction against an in-memory SQLite database; the
session joins it through SAVEPOINTs so data changes never leak between cases.
"""

from __future__ import annotations

import os

import pytest
from sqlalchemy.orm import scoped_session, sessionmaker

from storefront.core.extensions import db as _db
from storefront.factory import create_app


class TestConfig:
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Avoids hitting external services.
    """

    TESTING = True
    DEBUG = False
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_BASE_PREFIX = "/api"
    LOG_LEVEL = "INFO"
    SEED_READY_ATTEMPTS = 1


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing."""
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestConfig)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session."""
    with app.app_context():
        _db.create_all()
    yield _db
    with app.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(app, db):
    """Keep a dedicated connection open for the whole session."""
    with app.app_context():
        conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def session(app, db, connection):
    """Provide a SQLAlchemy session wrapped in an outer transaction.

    Notes
    -----
    The SQLAlchemy 2.0 recipe: begin a top-level transaction on the shared
    connection and let the session join it with ``create_savepoint``, so
    ``commit()`` in application code only releases a SAVEPOINT and the outer
    rollback discards everything.
    """
    ctx = app.app_context()
    ctx.push()
    top_trans = connection.begin()

    SessionFactory = sessionmaker(
        bind=connection,
        join_transaction_mode="create_savepoint",
        autoflush=False,
    )
    scoped = scoped_session(SessionFactory)

    # Monkey-patch db.session so app code uses this scoped session
    original_session = db.session
    db.session.remove()
    db.session = scoped

    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        top_trans.rollback()
        ctx.pop()


@pytest.fixture()
def client(app, session):
    """Return a Flask test client sharing the transactional session."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(request):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    if "session" in request.fixturenames:
        SQLAlchemySession.set(request.getfixturevalue("session"))
    yield
    SQLAlchemySession.set(None)


@pytest.fixture()
def restore_logging():
    """Put the root logger back after a test that builds its own app."""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def user(session):
    """Persist and return a shopper whose password is ``Passw0rd!``."""
    from tests.factories.user import UserFactory

    user = UserFactory(email="shopper@example.com", name="Shopper")
    # Load attributes now; test-client teardown detaches the instance.
    session.refresh(user)
    return user


@pytest.fixture()
def auth_header(app, user):
    """Authorization header carrying a valid access token for ``user``."""
    from flask_jwt_extended import create_access_token

    with app.app_context():
        token = create_access_token(identity=str(user.id))
    return {"Authorization": f"Bearer {token}"}
