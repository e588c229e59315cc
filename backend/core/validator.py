"""Payload validator — coerces a JSON request body into column-typed values."""
import json
import math

from core.errors import BadRequest, invalid_field
from models.catalog import LogicalType, Record, Table

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _reject_constant(name: str):
    raise ValueError(f"unsupported constant {name}")


def parse_body(raw: bytes) -> dict:
    try:
        data = json.loads(raw or b"", parse_constant=_reject_constant)
    except ValueError as e:
        raise BadRequest(f"invalid json: {e}") from e
    if not isinstance(data, dict):
        raise BadRequest("invalid json: body must be an object")
    return data


def coerce_payload(raw: bytes, table: Table) -> Record:
    """
    Validate known columns against their logical types.
    OTHER columns are dropped; keys that match no column pass through untouched.
    """
    record: Record = parse_body(raw)

    for name, col in table.columns.items():
        if name not in record:
            continue
        value = record[name]

        if col.sql_type == LogicalType.INT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise invalid_field(name)
            if isinstance(value, float) and not math.isfinite(value):
                raise invalid_field(name)
            value = int(value)   # truncates toward zero
            if not fits_int64(value):
                raise invalid_field(name)
            record[name] = value
        elif col.sql_type == LogicalType.STRING:
            if value is None:
                if not col.nullable:
                    raise invalid_field(name)
                continue
            if not isinstance(value, str):
                raise invalid_field(name)
        else:
            del record[name]

    return record
