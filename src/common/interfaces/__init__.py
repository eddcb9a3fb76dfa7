"""Interfaces shared by the DAL and its callers."""

from .query_executor import QueryExecutor
from .schema_reader import SchemaReader

__all__ = [
    "QueryExecutor",
    "SchemaReader",
]
