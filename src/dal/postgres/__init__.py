"""PostgreSQL catalog reader and its helpers."""

from .catalog_reader import PostgresCatalogReader, find_sequence_name
from .config import PostgresCatalogConfig, PostgresConnectionConfig
from .quoting import quote_column_name, quote_simple_table_name, quote_table_name, quote_value
from .type_map import POSTGRES_TYPE_MAP, abstract_type_for

__all__ = [
    "POSTGRES_TYPE_MAP",
    "PostgresCatalogConfig",
    "PostgresCatalogReader",
    "PostgresConnectionConfig",
    "abstract_type_for",
    "find_sequence_name",
    "quote_column_name",
    "quote_simple_table_name",
    "quote_table_name",
    "quote_value",
]
