"""Mapping from PostgreSQL physical type names to abstract column types.

Both the SQL-standard spellings (``character varying``) and the internal
``pg_type.typname`` spellings (``varchar``) are listed, since the catalog
reader reports the latter.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from catalog_schema import ColumnType

POSTGRES_TYPE_MAP: Mapping[str, ColumnType] = MappingProxyType(
    {
        "abstime": ColumnType.TIMESTAMP,
        "bit": ColumnType.STRING,
        "bit varying": ColumnType.STRING,
        "varbit": ColumnType.STRING,
        "bool": ColumnType.BOOLEAN,
        "boolean": ColumnType.BOOLEAN,
        "box": ColumnType.STRING,
        "bpchar": ColumnType.STRING,
        "char": ColumnType.STRING,
        "character": ColumnType.STRING,
        "character varying": ColumnType.STRING,
        "varchar": ColumnType.STRING,
        "bytea": ColumnType.BINARY,
        "cidr": ColumnType.STRING,
        "circle": ColumnType.STRING,
        "date": ColumnType.DATE,
        "decimal": ColumnType.DECIMAL,
        "numeric": ColumnType.DECIMAL,
        "real": ColumnType.FLOAT,
        "float4": ColumnType.FLOAT,
        "double precision": ColumnType.FLOAT,
        "float8": ColumnType.FLOAT,
        "inet": ColumnType.STRING,
        "smallint": ColumnType.SMALLINT,
        "int2": ColumnType.SMALLINT,
        "integer": ColumnType.INTEGER,
        "int4": ColumnType.INTEGER,
        "bigint": ColumnType.BIGINT,
        "int8": ColumnType.BIGINT,
        "interval": ColumnType.STRING,
        "json": ColumnType.STRING,
        "jsonb": ColumnType.STRING,
        "line": ColumnType.STRING,
        "lseg": ColumnType.STRING,
        "macaddr": ColumnType.STRING,
        "money": ColumnType.MONEY,
        "name": ColumnType.STRING,
        "oid": ColumnType.BIGINT,  # internal to pg, should not appear in user tables
        "path": ColumnType.STRING,
        "point": ColumnType.STRING,
        "polygon": ColumnType.STRING,
        "text": ColumnType.TEXT,
        "time": ColumnType.TIME,
        "time without time zone": ColumnType.TIME,
        "timetz": ColumnType.TIME,
        "time with time zone": ColumnType.TIME,
        "timestamp": ColumnType.TIMESTAMP,
        "timestamp without time zone": ColumnType.TIMESTAMP,
        "timestamptz": ColumnType.TIMESTAMP,
        "timestamp with time zone": ColumnType.TIMESTAMP,
        "unknown": ColumnType.STRING,
        "uuid": ColumnType.STRING,
        "xml": ColumnType.STRING,
    }
)


def abstract_type_for(db_type: Optional[str]) -> ColumnType:
    """Return the abstract type of a physical type name; unknown types are strings."""
    if not db_type:
        return ColumnType.STRING
    return POSTGRES_TYPE_MAP.get(db_type, ColumnType.STRING)
