import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from catalog_schema import ColumnSchema, ForeignKeySchema, TableSchema
from common.interfaces.query_executor import QueryExecutor
from dal.errors import CatalogIntegrityError
from dal.postgres.config import PostgresCatalogConfig
from dal.postgres.queries import (
    build_columns_query,
    build_foreign_keys_query,
    build_table_names_query,
)
from dal.postgres.type_map import abstract_type_for
from dal.postgres.type_modifiers import numeric_precision, numeric_scale
from dal.tracing import trace_query_operation

logger = logging.getLogger(__name__)

# nextval('seq'), nextval('seq'::regclass), nextval('"Seq"'::regclass), nextval('s.seq'::regclass)
SEQUENCE_DEFAULT_PATTERN = re.compile(r"nextval\('([\w.\"]+)'(?:::regclass)?\)")


class PostgresCatalogReader:
    """Reads table metadata from the PostgreSQL system catalogs (9.4 and above).

    The reader runs its queries on a connection owned by the caller and never
    opens, closes or caches anything itself. Each lookup is a fresh snapshot.
    """

    def __init__(self, conn: QueryExecutor, config: Optional[PostgresCatalogConfig] = None):
        """Initialize with a query executor (typically an asyncpg connection)."""
        self._conn = conn
        self._config = config or PostgresCatalogConfig.from_env()

    @property
    def default_schema(self) -> str:
        return self._config.default_schema

    def resolve_table_names(self, name: str) -> Tuple[str, str]:
        """Split a table reference into ``(schema_name, table_name)``.

        Double quotes are dropped and the name is split at the first dot.
        Unqualified names belong to the default schema.
        """
        parts = name.replace('"', "").split(".", 1)
        if len(parts) == 2:
            return parts[0], parts[1]
        return self.default_schema, parts[0]

    async def load_table_schema(self, name: str) -> Optional[TableSchema]:
        """Load the metadata for a table.

        Args:
            name: Table name, optionally schema-qualified and/or double-quoted.

        Returns:
            The table metadata, or None if the table does not exist.
        """
        schema_name, table_name = self.resolve_table_names(name)
        columns = await self.find_columns(schema_name, table_name)
        if not columns:
            logger.debug("Table %s.%s not found in catalog", schema_name, table_name)
            return None

        foreign_keys = await self.find_constraints(schema_name, table_name)
        primary_key = [column.name for column in columns if column.is_primary_key]
        sequence_name = find_sequence_name(columns)

        logger.debug(
            "Loaded %s.%s: %d columns, %d foreign keys, sequence=%s",
            schema_name,
            table_name,
            len(columns),
            len(foreign_keys),
            sequence_name,
        )
        return TableSchema(
            schema_name=schema_name,
            name=table_name,
            columns={column.name: column for column in columns},
            primary_key=primary_key,
            sequence_name=sequence_name,
            foreign_keys=foreign_keys,
        )

    async def list_table_names(self, schema: Optional[str] = None) -> List[str]:
        """List ordinary and partitioned table names in a schema, sorted by name."""
        schema_name = schema or self.default_schema
        sql = build_table_names_query(schema_name)
        rows = await self._fetch("list_tables", sql, schema_name)
        return [row["table_name"] for row in rows]

    async def find_columns(self, schema_name: str, table_name: str) -> List[ColumnSchema]:
        """Collect the table's columns in physical order.

        An empty list means the table does not exist.
        """
        sql = build_columns_query(schema_name, table_name)
        rows = await self._fetch("columns", sql, schema_name, table_name)
        return [self.load_column_schema(row) for row in rows]

    async def find_constraints(self, schema_name: str, table_name: str) -> List[ForeignKeySchema]:
        """Collect the table's foreign keys in catalog order."""
        sql = build_foreign_keys_query(schema_name, table_name)
        rows = await self._fetch("foreign_keys", sql, schema_name, table_name)

        foreign_keys = []
        for row in rows:
            if row["foreign_table_schema"] != self.default_schema:
                foreign_table = f"{row['foreign_table_schema']}.{row['foreign_table_name']}"
            else:
                foreign_table = row["foreign_table_name"]

            columns = row["columns"].split(",")
            foreign_columns = row["foreign_columns"].split(",")
            if len(columns) != len(foreign_columns):
                raise CatalogIntegrityError(
                    f"Foreign key {row.get('constraint_name')!r} on {schema_name}.{table_name} "
                    f"pairs {len(columns)} local columns with {len(foreign_columns)} "
                    f"columns of {foreign_table}",
                    table=f"{schema_name}.{table_name}",
                )

            foreign_keys.append(
                ForeignKeySchema(
                    foreign_table=foreign_table,
                    column_pairs=list(zip(foreign_columns, columns)),
                )
            )
        return foreign_keys

    def load_column_schema(self, info: Mapping[str, Any]) -> ColumnSchema:
        """Build a column from one row of the column metadata query."""
        db_type = info["data_type"]
        default_value = info["column_default"]
        type_oid = info["type_oid"]
        modifier = info["modifier"]
        size = info["size"]

        return ColumnSchema(
            name=info["column_name"],
            db_type=db_type,
            type=abstract_type_for(db_type),
            allow_null=not info["not_null"],
            is_primary_key=bool(info["is_pkey"]),
            auto_increment=default_value is not None and "nextval" in default_value,
            default_value=default_value,
            precision=numeric_precision(type_oid, modifier),
            scale=numeric_scale(type_oid, modifier),
            size=int(size) if size is not None else None,
            enum_values=_parse_enum_values(info["enum_values"]) if info["is_enum"] else None,
            unsigned=False,
            comment=info["column_comment"],
        )

    async def _fetch(self, operation: str, sql: str, schema_name: str, table_name: str = ""):
        attributes = {"db.schema": schema_name}
        if table_name:
            attributes["db.table"] = table_name
        return await trace_query_operation(
            f"dal.catalog.{operation}", sql, self._conn.fetch(sql), attributes
        )


def find_sequence_name(columns: Iterable[ColumnSchema]) -> Optional[str]:
    """Return the sequence feeding the first primary key column defaulting to nextval().

    Defaults that do not look like ``nextval('<name>'[::regclass])`` are ignored.
    """
    for column in columns:
        if not column.is_primary_key or not column.default_value:
            continue
        match = SEQUENCE_DEFAULT_PATTERN.search(column.default_value)
        if match:
            return match.group(1)
        logger.debug(
            "Primary key %s has a default that is not a sequence call: %s",
            column.name,
            column.default_value,
        )
    return None


def _parse_enum_values(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return raw.replace("''", "'").split(",")
