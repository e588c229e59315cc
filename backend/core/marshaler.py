"""Result marshaler — database rows to JSON-serializable records."""
from typing import Any, Iterable, Mapping

from models.catalog import LogicalType, Record, Table

_RAW_TYPES = (bytes, bytearray, memoryview)


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def marshal_value(value: Any, sql_type: LogicalType) -> Any:
    if not isinstance(value, _RAW_TYPES):
        return value
    text = bytes(value).decode("utf-8", errors="replace")
    if sql_type == LogicalType.INT:
        return _parse_int(text)
    return text


def marshal_rows(rows: Iterable[Mapping[str, Any]], table: Table) -> list[Record]:
    records = []
    for row in rows:
        record: Record = {}
        for name, value in row.items():
            col = table.column(name)
            record[name] = marshal_value(value, col.sql_type if col else LogicalType.OTHER)
        records.append(record)
    return records
