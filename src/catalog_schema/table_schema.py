from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, field_serializer, field_validator

from .column_schema import ColumnSchema
from .foreign_key_schema import ForeignKeySchema


class TableSchema(BaseModel):
    """Snapshot of a table's metadata: columns, primary key, sequence and foreign keys.

    ``columns`` is a read-only mapping in physical column order.
    """

    schema_name: str
    name: str
    columns: Mapping[str, ColumnSchema] = Field(default_factory=dict, validate_default=True)
    primary_key: Tuple[str, ...] = Field(default_factory=tuple)
    sequence_name: Optional[str] = None
    foreign_keys: Tuple[ForeignKeySchema, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("columns", mode="after")
    @classmethod
    def _freeze_columns(cls, value: Mapping[str, ColumnSchema]) -> Mapping[str, ColumnSchema]:
        return MappingProxyType(dict(value))

    @field_serializer("columns")
    def _serialize_columns(self, value: Mapping[str, ColumnSchema]) -> Dict[str, Any]:
        return dict(value)

    @property
    def column_names(self) -> List[str]:
        return list(self.columns)

    def get_column(self, name: str) -> Optional[ColumnSchema]:
        """Return the named column, or None if the table has no such column."""
        return self.columns.get(name)
