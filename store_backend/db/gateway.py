# File: store_backend/db/gateway.py

"""
Persistence gateway.

Every SQL statement the API runs goes through ``DatabaseGateway.execute``.
The gateway is built once at startup and handed to the application, which
passes it on to the services; nothing imports a global engine.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.sql import Executable

from store_backend.core.config import Settings
from store_backend.core.exceptions import (
    ConstraintViolation,
    DatabaseUnavailable,
    QueryError,
)
from store_backend.db.session import build_engine

logger = logging.getLogger(__name__)


class QueryResult:
    """Rows returned by a statement plus the number of rows it touched."""

    def __init__(self, rows: List[Dict[str, Any]], rowcount: int = 0):
        self.rows = rows
        self.rowcount = rowcount

    def first(self) -> Optional[Dict[str, Any]]:
        if self.rows:
            return self.rows[0]
        return None

    def __len__(self) -> int:
        return len(self.rows)


class DatabaseGateway:
    def __init__(self, engine: Engine):
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseGateway":
        return cls(build_engine(settings.database_url, ssl=settings.db_ssl))

    @property
    def engine(self) -> Engine:
        return self._engine

    def connect(self) -> None:
        """
        Check out one pooled connection and run a trivial query.

        Raises ``DatabaseUnavailable`` when that fails; the caller decides
        that this is fatal.
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise DatabaseUnavailable(
                f"cannot connect to {self._engine.url.render_as_string(hide_password=True)}"
            ) from exc
        logger.info("Connected to %s database", self._engine.dialect.name)

    def execute(
        self,
        statement: Executable,
        params: Optional[Mapping[str, Any]] = None,
    ) -> QueryResult:
        """
        Run one parameterized statement in its own transaction.

        Values are always bound parameters, never formatted into the SQL.
        Integrity errors come back as ``ConstraintViolation``, every other
        database failure as ``QueryError``.
        """
        try:
            with self._engine.begin() as conn:
                if params:
                    result = conn.execute(statement, dict(params))
                else:
                    result = conn.execute(statement)
                rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
                return QueryResult(rows, result.rowcount)
        except IntegrityError as exc:
            raise ConstraintViolation(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            raise QueryError(str(exc)) from exc

    def dispose(self) -> None:
        self._engine.dispose()
