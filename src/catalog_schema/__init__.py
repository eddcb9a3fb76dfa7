"""Abstract table metadata model produced by the catalog readers."""

from .column_schema import ColumnSchema
from .column_type import ColumnType
from .foreign_key_schema import ForeignKeySchema
from .table_schema import TableSchema

__all__ = [
    "ColumnSchema",
    "ColumnType",
    "ForeignKeySchema",
    "TableSchema",
]
