"""Table-scoped data access primitives backed by SQLAlchemy."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from loguru import logger
from sqlalchemy import Column, Table, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from petcatalog.db import models  # noqa: F401  # registers the pets table on Base.metadata
from petcatalog.db.session import Base, get_engine, get_session
from petcatalog.domain.errors import StorageError, StorageWriteFailed

# Column name -> value; entries are ANDed. None matches NULL, collections match any member.
Selection = Mapping[str, Any]

# Driver errors for values the backend cannot bind (e.g. integers past 64 bits).
_BACKEND_ERRORS = (SQLAlchemyError, OverflowError)


def _table(name: str) -> Table:
    table = Base.metadata.tables.get(name)
    if table is None:
        raise StorageError(f"no such table: {name}")
    return table


def _column(table: Table, name: str) -> Column:
    column = table.c.get(name)
    if column is None:
        raise StorageError(f"table {table.name} has no column named {name}")
    return column


def _where(stmt, table: Table, selection: Optional[Selection]):
    for name, value in (selection or {}).items():
        column = _column(table, name)
        if value is None:
            stmt = stmt.where(column.is_(None))
        elif isinstance(value, (list, tuple, set, frozenset)):
            stmt = stmt.where(column.in_(list(value)))
        else:
            stmt = stmt.where(column == value)
    return stmt


def _order_by(table: Table, sort_order: Optional[str]) -> list:
    """Parse "name ASC, weight DESC" into SQLAlchemy order clauses."""
    clauses = []
    for term in (sort_order or "").split(","):
        parts = term.split()
        if not parts:
            continue
        if len(parts) > 2:
            raise StorageError(f"invalid sort term: {term.strip()}")
        column = _column(table, parts[0])
        direction = parts[1].lower() if len(parts) == 2 else "asc"
        if direction == "asc":
            clauses.append(column.asc())
        elif direction == "desc":
            clauses.append(column.desc())
        else:
            raise StorageError(f"invalid sort direction: {parts[1]}")
    return clauses


def _values(table: Table, values: Mapping[str, Any]) -> dict[str, Any]:
    for name in values:
        _column(table, name)
    return dict(values)


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session, addressed by table and column names."""

    def __init__(self) -> None:
        self.ensure_schema()

    def ensure_schema(self) -> None:
        try:
            Base.metadata.create_all(bind=get_engine())
        except SQLAlchemyError as exc:
            raise StorageError(f"could not create schema: {exc}") from exc

    def query(
        self,
        table_name: str,
        projection: Optional[Sequence[str]] = None,
        selection: Optional[Selection] = None,
        sort_order: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        table = _table(table_name)
        try:
            columns: Iterable[Any] = [_column(table, name) for name in projection] if projection else [table]
            stmt = _where(select(*columns), table, selection)
            order = _order_by(table, sort_order)
            if order:
                stmt = stmt.order_by(*order)
            with get_session() as session:
                return [dict(row) for row in session.execute(stmt).mappings().all()]
        except _BACKEND_ERRORS as exc:
            raise StorageError(f"query on {table_name} failed: {exc}") from exc

    def insert(self, table_name: str, values: Mapping[str, Any]) -> Optional[int]:
        """Insert one row and return its id, or None when the backend rejects it."""
        table = _table(table_name)
        with get_session() as session:
            try:
                stmt = insert(table)
                if values:
                    stmt = stmt.values(**_values(table, values))
                result = session.execute(stmt)
                session.commit()
            except _BACKEND_ERRORS as exc:
                session.rollback()
                logger.error("Insert into {} rejected: {}", table_name, exc)
                return None
            key = result.inserted_primary_key
            if not key or key[0] is None:
                return None
            return int(key[0])

    def delete(self, table_name: str, selection: Optional[Selection] = None) -> int:
        table = _table(table_name)
        with get_session() as session:
            try:
                stmt = _where(delete(table), table, selection)
                result = session.execute(stmt)
                session.commit()
            except _BACKEND_ERRORS as exc:
                session.rollback()
                raise StorageWriteFailed(f"delete on {table_name} failed: {exc}") from exc
            return int(result.rowcount or 0)

    def update(
        self,
        table_name: str,
        values: Mapping[str, Any],
        selection: Optional[Selection] = None,
    ) -> int:
        table = _table(table_name)
        with get_session() as session:
            try:
                stmt = _where(update(table), table, selection).values(**_values(table, values))
                result = session.execute(stmt)
                session.commit()
            except _BACKEND_ERRORS as exc:
                session.rollback()
                raise StorageWriteFailed(f"update on {table_name} failed: {exc}") from exc
            return int(result.rowcount or 0)
