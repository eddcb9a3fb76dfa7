import logging
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg

from dal.postgres.catalog_reader import PostgresCatalogReader
from dal.postgres.config import PostgresCatalogConfig, PostgresConnectionConfig

logger = logging.getLogger(__name__)


class Database:
    """Owns an optional asyncpg pool for callers that do not manage connections themselves."""

    _pool: Optional[asyncpg.Pool] = None
    _catalog_config: Optional[PostgresCatalogConfig] = None

    @classmethod
    async def init(
        cls,
        config: Optional[PostgresConnectionConfig] = None,
        catalog_config: Optional[PostgresCatalogConfig] = None,
    ):
        """Initialize the connection pool.

        The pool is created once per process. Later calls return without
        touching it; a different catalog config passed to such a call is
        ignored with a warning until the pool is closed.
        """
        if cls._pool is not None:
            if catalog_config is not None and catalog_config != cls._catalog_config:
                logger.warning(
                    "Database already initialized; ignoring new catalog config %r "
                    "(keeping %r). Call Database.close() first to change it.",
                    catalog_config,
                    cls._catalog_config,
                )
            return

        config = config or PostgresConnectionConfig.from_env()
        cls._catalog_config = catalog_config or PostgresCatalogConfig.from_env()
        try:
            cls._pool = await asyncpg.create_pool(
                config.dsn,
                min_size=config.min_pool_size,
                max_size=config.max_pool_size,
                command_timeout=config.command_timeout,
                server_settings={"application_name": "pgcatalog"},
            )
        except Exception as e:
            await cls.close()
            raise ConnectionError(f"Failed to initialize database pool: {e}") from e
        logger.info(
            "Database connection pool established: %s@%s/%s",
            config.user,
            config.host,
            config.db_name,
        )

    @classmethod
    async def close(cls):
        """Close the connection pool."""
        if cls._pool:
            await cls._pool.close()
            logger.info("Database connection pool closed")
        cls._pool = None
        cls._catalog_config = None

    @classmethod
    @asynccontextmanager
    async def get_connection(cls):
        """Yield a pooled connection, released back to the pool on exit."""
        if cls._pool is None:
            raise RuntimeError("Database pool not initialized. Call Database.init() first.")
        async with cls._pool.acquire() as conn:
            yield conn

    @classmethod
    @asynccontextmanager
    async def get_catalog_reader(cls):
        """Yield a catalog reader bound to a pooled connection."""
        async with cls.get_connection() as conn:
            yield PostgresCatalogReader(conn, cls._catalog_config)
