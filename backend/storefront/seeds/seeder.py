"""Keyed row seeders.

``seed(Model, rows)`` builds a :class:`Seeder` that inserts a batch of rows and
returns them keyed by the names used in the row table, so later seeders can
reference earlier records by name::

    users = seed(User, {"barack": {"email": "barack@example.gov", ...}})
    favorites = seed(
        Favorite,
        lambda *, users: {"barack loves bunny": {"user_id": users["barack"].id, ...}},
    )

``rows`` is either a static mapping ``{key: {field: value}}`` or a callable
receiving the resolved sibling collections as keyword arguments and returning
such a mapping. Field values that are callables are deferred and evaluated
right before the record is built.

Each row is created inside its own SAVEPOINT. A failing row is wrapped in
:class:`BadRow`, logged and recorded on :attr:`Seeded.errors`; its siblings
are still created. A failure outside row creation (the row function raising,
a dependency that produced nothing) is logged and the seeder returns ``None``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, Union

from sqlalchemy.orm import Session

LOGGER = logging.getLogger(__name__)

Row = Mapping[str, Any]
Rows = Mapping[str, Row]
RowFactory = Callable[..., Rows]
RowSpec = Union[Rows, RowFactory]


class SeedError(Exception):
    """Base class for seeding failures."""


class BadRow(SeedError):
    """A single row that could not be created.

    :param key: Row key from the row table (``"barack"``).
    :param row: Field values the record was built from.
    :param cause: Underlying exception raised by the model or the database.
    """

    def __init__(self, key: str, row: Mapping[str, Any], cause: BaseException) -> None:
        super().__init__(key, cause)
        self.key = key
        self.row = dict(row)
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        rendered = json.dumps(self.row, indent=2, default=str)
        return f"[{self.key}] {self.cause} while creating {rendered}"


class Seeded(dict):
    """Created records keyed by row key.

    Rows that failed are absent from the mapping and listed in ``errors``.
    """

    def __init__(self, collection: str) -> None:
        super().__init__()
        self.collection = collection
        self.errors: dict[str, BadRow] = {}

    @property
    def ok(self) -> bool:
        return not self.errors

    def __repr__(self) -> str:
        return f"<Seeded {self.collection} created={len(self)} failed={len(self.errors)}>"


def _resolve(value: Any) -> Any:
    return value() if callable(value) else value


class Seeder:
    """Insert a keyed batch of rows for one model.

    Call it with the session and, for function-form row tables, the sibling
    collections the row function needs. Siblings may be given already
    resolved (a mapping) or pending (a static-form :class:`Seeder`, or any
    zero-argument callable); pending siblings are resolved before the row
    function runs.
    """

    def __init__(self, model: type, rows: RowSpec, *, name: str | None = None) -> None:
        self.model = model
        self.rows = rows
        self.name = name or model.__name__

    @property
    def depends_on_siblings(self) -> bool:
        return callable(self.rows)

    def __repr__(self) -> str:
        form = "function" if self.depends_on_siblings else f"{len(self.rows)} rows"
        return f"<Seeder {self.name} ({form})>"

    def __call__(self, session: Session, others: Mapping[str, Any] | None = None) -> Seeded | None:
        try:
            rows = self._rows(session, others or {})
            seeded = self._create_all(session, rows)
            self._log_result(seeded)
        except Exception as exc:
            LOGGER.error(
                "Error seeding %s: %s",
                self.name,
                exc,
                exc_info=True,
                extra={"collection": self.name},
            )
            return None
        return seeded

    def _log_result(self, seeded: Seeded) -> None:
        LOGGER.info(
            "Seeded %s %s OK",
            len(seeded),
            self.name,
            extra={
                "collection": self.name,
                "rows_created": len(seeded),
                "rows_failed": len(seeded.errors),
            },
        )
        if seeded.errors:
            LOGGER.warning(
                "%s %s row(s) failed: %s",
                len(seeded.errors),
                self.name,
                ", ".join(seeded.errors),
                extra={"collection": self.name},
            )

    # ------------------------------------------------------------------ rows

    def _rows(self, session: Session, others: Mapping[str, Any]) -> Rows:
        """Return the concrete row table, resolving siblings for the function form."""
        if not callable(self.rows):
            return self.rows

        resolved: dict[str, Any] = {}
        for name, other in others.items():
            if isinstance(other, Seeder):
                if other.depends_on_siblings:
                    raise SeedError(
                        f"{self.name} depends on {name!r}, a function-form seeder that "
                        "needs its own siblings; run it through a SeedPlan instead"
                    )
                value = other(session)
            elif callable(other):
                value = other()
            else:
                value = other
            if value is None:
                raise SeedError(f"{self.name} depends on {name!r}, which produced no rows")
            resolved[name] = value

        rows = self.rows(**resolved)
        if not isinstance(rows, Mapping):
            raise SeedError(
                f"{self.name} row function returned {type(rows).__name__}, expected a mapping"
            )
        return rows

    def _create_all(self, session: Session, rows: Rows) -> Seeded:
        seeded = Seeded(self.name)
        for key, row in rows.items():
            fields: dict[str, Any] = dict(row)
            try:
                fields = {field: _resolve(value) for field, value in row.items()}
                record = self._create(session, fields)
            except Exception as exc:
                bad = BadRow(key, fields, exc)
                LOGGER.error("%s", bad, extra={"collection": self.name, "row_key": key})
                seeded.errors[key] = bad
                continue
            LOGGER.debug("Created %s %r", self.name, key, extra={"row_key": key})
            seeded[key] = record
        return seeded

    def _create(self, session: Session, fields: Mapping[str, Any]) -> Any:
        with session.begin_nested():
            record = self.model(**fields)
            session.add(record)
            session.flush()
        return record


def seed(model: type, rows: RowSpec, *, name: str | None = None) -> Seeder:
    """Build a :class:`Seeder` for ``model`` from a row table or a row function."""
    return Seeder(model, rows, name=name)


__all__ = ["BadRow", "RowSpec", "SeedError", "Seeded", "Seeder", "seed"]
