from models.catalog import Catalog, Column, LogicalType, Record, Table  # noqa: F401
