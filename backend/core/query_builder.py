"""
Query builder — turns an operation plus table metadata into parameterized SQL.

Identifiers are quoted by the target dialect; every value travels as a bound
parameter, never inside the statement text.
"""
from dataclasses import dataclass, field
from typing import Any

from core.errors import BadRequest, invalid_field
from models.catalog import LogicalType, Record, Table


@dataclass(frozen=True)
class Query:
    sql: str
    params: dict[str, Any] = field(default_factory=dict)
    returning: bool = False     # statement yields the new id as a row
    is_insert: bool = False


def _q(dialect, name: str) -> str:
    """Quote an identifier for the given dialect."""
    return dialect.identifier_preparer.quote_identifier(name)


def build_list(dialect, table: Table, limit: int, offset: int) -> Query:
    sql = (
        f"SELECT * FROM {_q(dialect, table.name)} "
        f"ORDER BY {_q(dialect, table.primary_key)} "
        f"LIMIT :limit OFFSET :offset"
    )
    return Query(sql, {"limit": limit, "offset": offset})


def build_get(dialect, table: Table, ident: int) -> Query:
    sql = f"SELECT * FROM {_q(dialect, table.name)} WHERE {_q(dialect, table.primary_key)} = :ident"
    return Query(sql, {"ident": ident})


def build_insert(dialect, table: Table, record: Record) -> Query:
    """
    Every non-key column gets the supplied value, or is left out when it is
    nullable or has no logical default, or else receives its type default.
    """
    names: list[str] = []
    params: dict[str, Any] = {}
    for name, col in table.columns.items():
        if col.is_primary_key:
            continue
        if name in record:
            value = record[name]
        elif col.nullable or col.sql_type == LogicalType.OTHER:
            continue
        else:
            value = col.default_value
        params[f"v{len(names)}"] = value
        names.append(name)

    target = _q(dialect, table.name)
    if names:
        cols = ", ".join(_q(dialect, n) for n in names)
        binds = ", ".join(f":{key}" for key in params)
        sql = f"INSERT INTO {target} ({cols}) VALUES ({binds})"
    elif dialect.name == "mysql":
        sql = f"INSERT INTO {target} () VALUES ()"
    else:
        sql = f"INSERT INTO {target} DEFAULT VALUES"

    returning = dialect.name == "postgresql"
    if returning:
        sql += f" RETURNING {_q(dialect, table.primary_key)}"
    return Query(sql, params, returning=returning, is_insert=True)


def build_update(dialect, table: Table, ident: int, record: Record) -> Query:
    if table.primary_key in record:
        raise invalid_field(table.primary_key)

    assignments: list[str] = []
    params: dict[str, Any] = {}
    for name, value in record.items():
        col = table.column(name)
        if col is None or col.sql_type == LogicalType.OTHER:
            continue
        key = f"v{len(assignments)}"
        assignments.append(f"{_q(dialect, name)} = :{key}")
        params[key] = value

    if not assignments:
        raise BadRequest("no fields to update")

    params["ident"] = ident
    sql = (
        f"UPDATE {_q(dialect, table.name)} SET {', '.join(assignments)} "
        f"WHERE {_q(dialect, table.primary_key)} = :ident"
    )
    return Query(sql, params)


def build_delete(dialect, table: Table, ident: int) -> Query:
    sql = f"DELETE FROM {_q(dialect, table.name)} WHERE {_q(dialect, table.primary_key)} = :ident"
    return Query(sql, {"ident": ident})
