from typing import List, Optional, Protocol, runtime_checkable

from catalog_schema import TableSchema


@runtime_checkable
class SchemaReader(Protocol):
    """Protocol for reading table metadata out of a database's system catalogs."""

    async def list_table_names(self, schema: Optional[str] = None) -> List[str]:
        """List table names in the given schema (the default schema when omitted)."""
        ...

    async def load_table_schema(self, name: str) -> Optional[TableSchema]:
        """Load the metadata for a table.

        Args:
            name: Table name, optionally schema-qualified and/or double-quoted.

        Returns:
            The table metadata, or None if the table does not exist.
        """
        ...
