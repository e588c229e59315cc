"""
Database connector — SQLAlchemy engine factory and the database handle.
Supports SQLite, MySQL and PostgreSQL. Lists tables, describes columns and runs
parameterized statements built by the query builder.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from core.errors import DatabaseError
from core.query_builder import Query

logger = logging.getLogger(__name__)


def create_engine_from_url(url: str, echo: bool = False) -> Engine:
    """Build and test a SQLAlchemy engine for the given URL."""
    engine = create_engine(url, pool_pre_ping=True, echo=echo)
    # Validate the connection immediately
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except OperationalError as e:
        engine.dispose()
        raise ValueError(f"Could not connect to database: {e}") from e
    return engine


@dataclass(frozen=True)
class ExecResult:
    last_insert_id: Optional[int]
    rowcount: int


def _native_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Database:
    """Thin handle over an Engine; every failure surfaces as DatabaseError."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @property
    def dialect(self):
        return self.engine.dialect

    def list_tables(self) -> list[str]:
        try:
            return list(inspect(self.engine).get_table_names())
        except SQLAlchemyError as e:
            raise DatabaseError(_native_message(e)) from e

    def describe_columns(self, table_name: str) -> list[dict]:
        """
        Column metadata for one table, in declaration order:
        [{name, type, nullable, primary_key}]
        """
        try:
            insp = inspect(self.engine)
            raw_cols = insp.get_columns(table_name)
            pk_cols = set(insp.get_pk_constraint(table_name).get("constrained_columns") or [])
        except SQLAlchemyError as e:
            raise DatabaseError(_native_message(e)) from e

        return [
            {
                "name": col["name"],
                "type": str(col["type"]),
                "nullable": bool(col.get("nullable", True)),
                "primary_key": col["name"] in pk_cols,
            }
            for col in raw_cols
        ]

    def fetch_all(self, query: Query) -> list[dict[str, Any]]:
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(query.sql), query.params)
                return [dict(row) for row in result.mappings()]
        except (SQLAlchemyError, OverflowError) as e:
            logger.warning("Query failed: %s", e)
            raise DatabaseError(_native_message(e)) from e

    def execute(self, query: Query) -> ExecResult:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(query.sql), query.params)
                rowcount = result.rowcount
                last_id = None
                if query.returning:
                    last_id = result.scalar()
                elif query.is_insert:
                    last_id = result.lastrowid
                return ExecResult(last_insert_id=last_id, rowcount=rowcount)
        except (SQLAlchemyError, OverflowError) as e:
            logger.warning("Statement failed: %s", e)
            raise DatabaseError(_native_message(e)) from e

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database ping failed: %s", e)
            return False
