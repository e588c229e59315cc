import sqlite3

import pytest

from core.catalog import build_catalog, build_table, infer_logical_type
from core.db_connector import Database, create_engine_from_url
from core.errors import CatalogError, DatabaseError
from models.catalog import LogicalType


@pytest.mark.parametrize("declared, expected", [
    ("int", (LogicalType.INT, 0)),
    ("int(11)", (LogicalType.INT, 0)),
    ("INTEGER", (LogicalType.INT, 0)),
    ("VARCHAR(255)", (LogicalType.STRING, "")),
    ("text", (LogicalType.STRING, "")),
    ("MEDIUMTEXT", (LogicalType.STRING, "")),
    ("bigint", (LogicalType.OTHER, None)),
    ("REAL", (LogicalType.OTHER, None)),
    ("TIMESTAMP", (LogicalType.OTHER, None)),
    ("char(3)", (LogicalType.OTHER, None)),
])
def test_infer_logical_type(declared, expected):
    assert infer_logical_type(declared) == expected


def test_build_catalog_sqlite(database):
    catalog = build_catalog(database)
    assert catalog.tables == ("items", "users")

    items = catalog.get("items")
    assert items.primary_key == "id"
    assert list(items.columns) == ["id", "title", "description", "updated", "rating"]
    assert items.columns["id"].is_primary_key
    assert items.columns["title"].sql_type == LogicalType.STRING
    assert not items.columns["title"].nullable
    assert items.columns["updated"].nullable
    assert items.columns["rating"].sql_type == LogicalType.OTHER

    users = catalog.get("users")
    assert users.primary_key == "user_id"
    assert users.columns["user_id"].sql_type == LogicalType.INT
    assert users.columns["created_at"].sql_type == LogicalType.OTHER


def _add_table(path, ddl):
    conn = sqlite3.connect(path)
    conn.execute(ddl)
    conn.commit()
    conn.close()


@pytest.mark.parametrize("ddl", [
    "CREATE TABLE no_key (a INTEGER, b TEXT)",
    "CREATE TABLE two_keys (a INTEGER, b INTEGER, PRIMARY KEY (a, b))",
])
def test_build_catalog_requires_single_primary_key(temp_sqlite_db, ddl):
    _add_table(temp_sqlite_db, ddl)
    engine = create_engine_from_url(f"sqlite:///{temp_sqlite_db}")
    try:
        with pytest.raises(CatalogError, match="exactly one primary key"):
            build_catalog(Database(engine))
    finally:
        engine.dispose()


class FakeDatabase:
    def __init__(self, tables, columns=None, fail_list=False, fail_describe=False):
        self._tables = tables
        self._columns = columns or {}
        self._fail_list = fail_list
        self._fail_describe = fail_describe

    def list_tables(self):
        if self._fail_list:
            raise DatabaseError("access denied")
        return self._tables

    def describe_columns(self, name):
        if self._fail_describe:
            raise DatabaseError("table vanished")
        return self._columns[name]


KEYED = [{"name": "id", "type": "int", "nullable": False, "primary_key": True}]


def test_build_catalog_skips_malformed_listing_rows():
    db = FakeDatabase(["a", None, "", 3, "b"], {"a": KEYED, "b": KEYED})
    catalog = build_catalog(db)
    assert catalog.tables == ("a", "b")


def test_build_catalog_list_failure():
    with pytest.raises(CatalogError, match="access denied"):
        build_catalog(FakeDatabase([], fail_list=True))


def test_build_catalog_describe_failure():
    with pytest.raises(CatalogError, match="table vanished"):
        build_catalog(FakeDatabase(["a"], fail_describe=True))


def test_build_table_keeps_declared_type():
    table = build_table("t", KEYED + [{"name": "v", "type": "varchar(10)", "nullable": True, "primary_key": False}])
    assert table.columns["v"].declared_type == "varchar(10)"
    assert table.columns["v"].default_value == ""
    assert table.columns["id"].default_value == 0
