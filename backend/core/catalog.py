"""
Schema catalog — one introspection pass at startup.
Maps declared column types onto the logical INT / STRING / OTHER types used for
payload validation and records each table's single primary-key column.
"""
import logging

from core.db_connector import Database
from core.errors import CatalogError, DatabaseError
from models.catalog import Catalog, Column, LogicalType, Table

logger = logging.getLogger(__name__)

_INT_TYPES = {"int", "integer"}


def infer_logical_type(declared: str) -> tuple[LogicalType, object]:
    """Returns (logical type, type default) for a declared column type."""
    t = declared.lower().strip()
    if "text" in t or "varchar" in t:
        return LogicalType.STRING, ""
    if t.split("(")[0].strip() in _INT_TYPES:
        return LogicalType.INT, 0
    return LogicalType.OTHER, None


def build_table(name: str, raw_cols: list[dict]) -> Table:
    columns: dict[str, Column] = {}
    pk_cols: list[str] = []
    for raw in raw_cols:
        sql_type, default = infer_logical_type(raw["type"])
        col = Column(
            name=raw["name"],
            sql_type=sql_type,
            declared_type=raw["type"],
            nullable=raw["nullable"],
            is_primary_key=raw["primary_key"],
            default_value=default,
        )
        if col.is_primary_key:
            pk_cols.append(col.name)
        columns[col.name] = col

    if len(pk_cols) != 1:
        raise CatalogError(
            f"table {name} must have exactly one primary key column, found {len(pk_cols)}"
        )
    return Table(name=name, columns=columns, primary_key=pk_cols[0])


def build_catalog(db: Database) -> Catalog:
    try:
        listed = db.list_tables()
    except DatabaseError as e:
        raise CatalogError(f"could not list tables: {e.message}") from e

    names: list[str] = []
    table_map: dict[str, Table] = {}
    for name in listed:
        if not isinstance(name, str) or not name:
            logger.warning("Skipping malformed table entry %r", name)
            continue
        try:
            raw_cols = db.describe_columns(name)
        except DatabaseError as e:
            raise CatalogError(f"could not describe table {name}: {e.message}") from e
        table_map[name] = build_table(name, raw_cols)
        names.append(name)

    logger.info("Discovered %d tables", len(names))
    return Catalog(tables=tuple(names), table_map=table_map)
