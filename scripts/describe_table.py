import argparse
import asyncio
import json
import logging
import sys

import asyncpg
from dotenv import load_dotenv

from dal.postgres import PostgresCatalogConfig, PostgresCatalogReader, PostgresConnectionConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

load_dotenv()


async def describe(table: str, list_schema: bool) -> int:
    """Print the catalog metadata of a table (or the tables of a schema) as JSON."""
    config = PostgresConnectionConfig.from_env()
    conn = await asyncpg.connect(config.dsn, command_timeout=config.command_timeout)
    try:
        reader = PostgresCatalogReader(conn, PostgresCatalogConfig.from_env())
        if list_schema:
            print(json.dumps(await reader.list_table_names(table or None), indent=2))
            return 0

        table_schema = await reader.load_table_schema(table)
    finally:
        await conn.close()

    if table_schema is None:
        logger.error("Table %s not found", table)
        return 1
    payload = table_schema.model_dump(mode="json")
    payload["foreign_keys"] = [fk.as_list() for fk in table_schema.foreign_keys]
    print(json.dumps(payload, indent=2))
    return 0


def main():
    """Parse arguments and describe a PostgreSQL table."""
    parser = argparse.ArgumentParser(description="Describe a PostgreSQL table from its catalog.")
    parser.add_argument("table", nargs="?", default="", help="Table name, e.g. public.users")
    parser.add_argument(
        "--list", action="store_true", help="List table names of the given schema instead"
    )
    args = parser.parse_args()
    if not args.table and not args.list:
        parser.error("a table name is required unless --list is given")
    sys.exit(asyncio.run(describe(args.table, args.list)))


if __name__ == "__main__":
    main()
