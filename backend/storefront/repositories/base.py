"""Generic repository base for SQLAlchemy 2.x.

Repositories stay persistence-only: they build and run queries against the
session they were given (or the Flask-scoped one) and never commit. Services
own transaction boundaries.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from storefront.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


def _apply_sorting(
    stmt: Select[Any], sortable: Mapping[str, Any], tokens: Iterable[str] | None
) -> Select[Any]:
    """Apply whitelisted ``ORDER BY`` clauses from tokens like ``["-price", "name"]``.

    Unknown tokens are ignored.
    """
    clauses: list[Any] = []
    for raw in tokens or ():
        descending = raw.startswith("-")
        column = sortable.get(raw.lstrip("-+"))
        if column is None:
            continue
        clauses.append(column.desc() if descending else column.asc())
    if clauses:
        stmt = stmt.order_by(*clauses)
    return stmt


class BaseRepository(Generic[E]):
    """Persistence-only repository for a single model.

    Subclasses MUST define ``model`` and MAY override ``_sortable_fields``.
    """

    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the injected session, or the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    def _sortable_fields(self) -> Mapping[str, Any]:
        return {"id": getattr(self.model, "id")}

    def get(self, entity_id: int) -> E | None:
        """Fetch an entity by primary key."""
        return self.session.get(self.model, entity_id)

    def list_all(self, *, sort: Iterable[str] | None = None) -> Sequence[E]:
        """Return every row, ordered by ``sort`` tokens then primary key."""
        stmt = select(self.model)
        stmt = _apply_sorting(stmt, self._sortable_fields(), sort)
        stmt = stmt.order_by(getattr(self.model, "id").asc())
        return list(self.session.execute(stmt).scalars())
