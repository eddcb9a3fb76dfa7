import hashlib
from typing import Any, Awaitable, Dict, Optional

from opentelemetry import trace

from common.config.env import get_env_bool


def trace_enabled() -> bool:
    """Return True when DAL query tracing is enabled."""
    return bool(get_env_bool("DAL_TRACE_QUERIES", False))


def _hash_sql(sql: str) -> str:
    return hashlib.sha256(sql.encode("utf-8")).hexdigest()


async def trace_query_operation(
    name: str,
    sql: Optional[str],
    operation: Awaitable,
    attributes: Optional[Dict[str, Any]] = None,
):
    """Await a catalog query, wrapped in an OTEL span when tracing is enabled."""
    if not trace_enabled():
        return await operation

    tracer = trace.get_tracer("dal")
    with tracer.start_as_current_span(name) as span:
        span.set_attribute("db.system", "postgresql")
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        if sql:
            span.set_attribute("db.statement_hash", _hash_sql(sql))
        try:
            result = await operation
            span.set_attribute("db.status", "ok")
            span.set_attribute("db.row_count", len(result))
            return result
        except Exception:
            span.set_attribute("db.status", "error")
            raise
