from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class QueryExecutor(Protocol):
    """Protocol for anything that can run a read-only SQL string and return rows.

    An ``asyncpg.Connection`` satisfies this protocol as-is.
    """

    async def fetch(self, sql: str, *params: Any) -> Sequence[Mapping[str, Any]]:
        """Run the query and return rows keyed by column label."""
        ...
