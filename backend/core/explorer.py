"""
Explorer service — the CRUD operations behind the HTTP routes.
Resolves tables from the catalog, validates payloads, builds and runs SQL and
marshals results.
"""
import logging
from typing import Any

from core import query_builder as qb
from core.db_connector import Database
from core.errors import NotFound
from core.marshaler import marshal_rows
from core.validator import coerce_payload
from models.catalog import Catalog, Record, Table

logger = logging.getLogger(__name__)


class Explorer:
    def __init__(self, db: Database, catalog: Catalog, empty_list_not_found: bool = False):
        self.db = db
        self.catalog = catalog
        self.empty_list_not_found = empty_list_not_found

    @property
    def dialect(self):
        return self.db.dialect

    def table(self, name: str) -> Table:
        table = self.catalog.get(name)
        if table is None:
            raise NotFound("unknown table")
        return table

    def list_tables(self) -> list[str]:
        return list(self.catalog.tables)

    def list_records(self, table_name: str, limit: int, offset: int) -> list[Record]:
        table = self.table(table_name)
        rows = self.db.fetch_all(qb.build_list(self.dialect, table, limit, offset))
        if not rows and self.empty_list_not_found:
            raise NotFound("record not found")
        return marshal_rows(rows, table)

    def get_record(self, table_name: str, ident: int) -> Record:
        table = self.table(table_name)
        rows = self.db.fetch_all(qb.build_get(self.dialect, table, ident))
        if not rows:
            raise NotFound("record not found")
        return marshal_rows(rows, table)[0]

    def create_record(self, table_name: str, body: bytes) -> dict[str, Any]:
        table = self.table(table_name)
        record = coerce_payload(body, table)
        result = self.db.execute(qb.build_insert(self.dialect, table, record))
        logger.info("Inserted into %s id=%s", table.name, result.last_insert_id)
        return {table.primary_key: result.last_insert_id}

    def update_record(self, table_name: str, ident: int, body: bytes) -> int:
        table = self.table(table_name)
        record = coerce_payload(body, table)
        result = self.db.execute(qb.build_update(self.dialect, table, ident, record))
        return result.rowcount

    def delete_record(self, table_name: str, ident: int) -> int:
        table = self.table(table_name)
        result = self.db.execute(qb.build_delete(self.dialect, table, ident))
        return result.rowcount
