from enum import Enum


class ColumnType(str, Enum):
    """Abstract, vendor-independent column types."""

    PK = "pk"
    BIGPK = "bigpk"
    STRING = "string"
    TEXT = "text"
    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"
    BINARY = "binary"
    BOOLEAN = "boolean"
    MONEY = "money"


# Abstract type -> Python type name used when typecasting column values.
# Anything not listed is handled as a string.
PYTHON_TYPES = {
    ColumnType.PK: "int",
    ColumnType.BIGPK: "int",
    ColumnType.SMALLINT: "int",
    ColumnType.INTEGER: "int",
    ColumnType.BIGINT: "int",
    ColumnType.BOOLEAN: "bool",
    ColumnType.FLOAT: "float",
}

# Types for which an empty string is a meaningful value rather than "no value".
STRING_LIKE_TYPES = frozenset({ColumnType.STRING, ColumnType.TEXT, ColumnType.BINARY})


def python_type_for(column_type: ColumnType) -> str:
    """Return the Python type name values of the given abstract type map to."""
    return PYTHON_TYPES.get(column_type, "str")
