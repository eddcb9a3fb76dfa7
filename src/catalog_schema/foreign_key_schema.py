from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, Field


class ForeignKeySchema(BaseModel):
    """A foreign key constraint declared on a table.

    ``foreign_table`` is the referenced table, schema-qualified only when it lives
    outside the default schema. ``column_pairs`` holds ``(referenced, local)``
    column names in key order.
    """

    foreign_table: str
    column_pairs: Tuple[Tuple[str, str], ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def local_columns(self) -> List[str]:
        return [local for _, local in self.column_pairs]

    @property
    def foreign_columns(self) -> List[str]:
        return [foreign for foreign, _ in self.column_pairs]

    def as_list(self) -> List[Union[str, Dict[str, str]]]:
        """Render as ``[foreign_table, {referenced: local}, ...]``."""
        return [self.foreign_table, *({foreign: local} for foreign, local in self.column_pairs)]
