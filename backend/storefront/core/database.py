"""Schema reset and readiness helpers around the shared SQLAlchemy instance.

The seed script needs two things from the database before it inserts rows: a
signal that the server accepts connections, and a way to drop and recreate
every table. Both live here so the CLI and the standalone script share them.
"""

from __future__ import annotations

import logging
import sqlite3
import time

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

LOGGER = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def _sqlite_on_connect(dbapi_connection, connection_record):  # pragma: no cover - driver glue
    # pysqlite handles BEGIN itself and breaks SAVEPOINT; hand it to SQLAlchemy.
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@event.listens_for(Engine, "begin")
def _sqlite_on_begin(conn):  # pragma: no cover - driver glue
    if conn.dialect.name == "sqlite":
        conn.exec_driver_sql("BEGIN")


def ensure_ready(database: SQLAlchemy, *, attempts: int = 5, delay: float = 0.5) -> None:
    """Block until ``SELECT 1`` succeeds.

    :param database: Flask-SQLAlchemy extension bound to the current app.
    :param attempts: Number of pings before giving up (at least one).
    :param delay: Seconds slept between failed pings.
    :raises RuntimeError: When the database never answers.
    """
    attempts = max(int(attempts), 1)
    for attempt in range(1, attempts + 1):
        try:
            database.session.execute(text("SELECT 1"))
        except OperationalError as exc:
            database.session.rollback()
            LOGGER.warning("Database not ready (attempt %s/%s): %s", attempt, attempts, exc)
            if attempt == attempts:
                raise RuntimeError(
                    f"Database did not become ready after {attempts} attempt(s)"
                ) from exc
            time.sleep(delay)
        else:
            return


def sync(database: SQLAlchemy, *, force: bool = False) -> None:
    """Create all tables, dropping the existing ones first when ``force`` is set."""
    database.session.remove()
    if force:
        LOGGER.info("Dropping database schema...")
        database.drop_all()
    LOGGER.info("Creating database schema...")
    database.create_all()


__all__ = ["ensure_ready", "sync"]
