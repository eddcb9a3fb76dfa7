from dataclasses import dataclass
from typing import Optional

from common.config.env import get_env_int, get_env_str

DEFAULT_SCHEMA = "public"


@dataclass(frozen=True)
class PostgresCatalogConfig:
    """Settings that shape how catalog metadata is read and rendered."""

    default_schema: str = DEFAULT_SCHEMA

    @classmethod
    def from_env(cls) -> "PostgresCatalogConfig":
        """Load catalog reader config from environment variables."""
        default_schema = get_env_str("PG_DEFAULT_SCHEMA", DEFAULT_SCHEMA)
        if not default_schema or not default_schema.strip():
            raise ValueError("PG_DEFAULT_SCHEMA must not be empty.")
        return cls(default_schema=default_schema.strip())


@dataclass(frozen=True)
class PostgresConnectionConfig:
    """Connection pool settings for the PostgreSQL database being introspected."""

    host: str
    port: int
    db_name: str
    user: str
    password: Optional[str]
    min_pool_size: int
    max_pool_size: int
    command_timeout: int

    @property
    def dsn(self) -> str:
        auth = self.user if self.password is None else f"{self.user}:{self.password}"
        return f"postgresql://{auth}@{self.host}:{self.port}/{self.db_name}"

    @classmethod
    def from_env(cls) -> "PostgresConnectionConfig":
        """Load connection config from environment variables."""
        min_pool_size = get_env_int("DB_POOL_MIN_SIZE", 1)
        max_pool_size = get_env_int("DB_POOL_MAX_SIZE", 5)
        if min_pool_size < 0 or max_pool_size < 1 or min_pool_size > max_pool_size:
            raise ValueError(
                f"Invalid pool sizing: DB_POOL_MIN_SIZE={min_pool_size}, "
                f"DB_POOL_MAX_SIZE={max_pool_size}."
            )

        return cls(
            host=get_env_str("DB_HOST", "localhost"),
            port=get_env_int("DB_PORT", 5432),
            db_name=get_env_str("DB_NAME", "postgres"),
            user=get_env_str("DB_USER", "postgres"),
            password=get_env_str("DB_PASS"),
            min_pool_size=min_pool_size,
            max_pool_size=max_pool_size,
            command_timeout=get_env_int("DB_COMMAND_TIMEOUT", 60),
        )
