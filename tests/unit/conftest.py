"""Unit test environment helpers."""

import pytest

_ENV_VARS = (
    "PG_DEFAULT_SCHEMA",
    "DB_HOST",
    "DB_PORT",
    "DB_NAME",
    "DB_USER",
    "DB_PASS",
    "DB_POOL_MIN_SIZE",
    "DB_POOL_MAX_SIZE",
    "DB_COMMAND_TIMEOUT",
    "DAL_TRACE_QUERIES",
)


@pytest.fixture(autouse=True)
def _minimal_env(monkeypatch):
    """Start every unit test from a clean database environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Reset global Database state after each test."""
    from dal.database import Database

    original_pool = Database._pool
    original_catalog_config = Database._catalog_config

    yield

    Database._pool = original_pool
    Database._catalog_config = original_catalog_config
