from typing import Any, Optional, Tuple

from pydantic import BaseModel

from .column_type import STRING_LIKE_TYPES, ColumnType, python_type_for

# Spellings PostgreSQL and drivers use for false; any other non-empty string is true.
_FALSEY = frozenset({"0", "f", "false", "n", "no", "off"})


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSEY
    return bool(value)


_CASTS = {"int": int, "bool": _to_bool, "float": float, "str": str}
_TARGET_TYPES = {"int": int, "bool": bool, "float": float, "str": str}


class ColumnSchema(BaseModel):
    """Metadata of a single table column as read from the database catalog."""

    name: str
    db_type: str
    type: ColumnType = ColumnType.STRING
    allow_null: bool = True
    is_primary_key: bool = False
    auto_increment: bool = False
    default_value: Optional[str] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    size: Optional[int] = None
    enum_values: Optional[Tuple[str, ...]] = None
    unsigned: bool = False
    comment: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def python_type(self) -> str:
        """Name of the Python type this column's values are converted to."""
        return python_type_for(self.type)

    def typecast(self, value: Any) -> Any:
        """Convert a raw value coming from the database to this column's Python type.

        An empty string means "no value" for every type except string-like ones.
        Boolean columns read "0", "f", "false", "n", "no" and "off" as False.
        """
        if value == "" and self.type not in STRING_LIKE_TYPES:
            return None
        if value is None or type(value) is _TARGET_TYPES[self.python_type]:
            return value
        return _CASTS[self.python_type](value)
