"""Pydantic schemas for the in-memory schema catalog."""
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict


class LogicalType(str, Enum):
    INT = "int"
    STRING = "string"
    OTHER = "other"


class Column(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sql_type: LogicalType
    declared_type: str = ""
    nullable: bool = True
    is_primary_key: bool = False
    default_value: Optional[Union[int, str]] = None   # 0 for INT, "" for STRING


class Table(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    columns: dict[str, Column]        # catalog order
    primary_key: str

    def column(self, name: str) -> Optional[Column]:
        return self.columns.get(name)


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    tables: tuple[str, ...] = ()
    table_map: dict[str, Table] = {}

    def get(self, name: str) -> Optional[Table]:
        return self.table_map.get(name)


# One row at the API boundary: column name -> coerced value.
Record = dict[str, Any]
