from typing import Optional


class CatalogIntegrityError(ValueError):
    """Raised when catalog rows contradict each other in a way normal metadata never does."""

    def __init__(self, message: str, table: Optional[str] = None) -> None:
        super().__init__(message)
        self.table = table
