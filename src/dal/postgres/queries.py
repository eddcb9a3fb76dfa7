"""Catalog query templates used by the PostgreSQL catalog reader.

Table and schema names are inlined as quoted literals rather than bound as
parameters, so every builder takes raw names and quotes them itself.
"""

from dal.postgres.quoting import quote_value

COLUMNS_SQL = """
SELECT
    a.attname AS column_name,
    t.typname AS data_type,
    a.atttypid AS type_oid,
    t.typtype = 'e' AS is_enum,
    a.atttypmod AS modifier,
    a.attnotnull AS not_null,
    CAST(pg_get_expr(ad.adbin, ad.adrelid) AS varchar) AS column_default,
    pg_catalog.col_description(c.oid, a.attnum) AS column_comment,
    array_to_string(
        (SELECT array_agg(e.enumlabel ORDER BY e.enumsortorder)
         FROM pg_enum e
         WHERE e.enumtypid = a.atttypid)::varchar[],
        ','
    ) AS enum_values,
    CAST(
        information_schema._pg_char_max_length(
            information_schema._pg_truetypid(a, t),
            information_schema._pg_truetypmod(a, t)
        ) AS numeric
    ) AS size,
    a.attnum = ANY (ct.conkey) AS is_pkey
FROM
    pg_class c
    LEFT JOIN pg_attribute a ON a.attrelid = c.oid
    LEFT JOIN pg_attrdef ad ON a.attrelid = ad.adrelid AND a.attnum = ad.adnum
    LEFT JOIN pg_type t ON a.atttypid = t.oid
    LEFT JOIN pg_namespace d ON d.oid = c.relnamespace
    LEFT JOIN pg_constraint ct ON ct.conrelid = c.oid AND ct.contype = 'p'
WHERE
    a.attnum > 0
    AND NOT a.attisdropped
    AND c.relname = {table}
    AND d.nspname = {schema}
ORDER BY
    a.attnum
"""

# pg_constraint keeps key columns as attnum arrays, so the column names on both
# sides are aggregated per row in key order instead of joined flat.
FOREIGN_KEYS_SQL = """
SELECT
    ct.conname AS constraint_name,
    (SELECT string_agg(a.attname, ',' ORDER BY k.ord)
     FROM unnest(ct.conkey) WITH ORDINALITY AS k(attnum, ord)
     JOIN pg_attribute a ON a.attrelid = ct.conrelid AND a.attnum = k.attnum
    ) AS columns,
    fc.relname AS foreign_table_name,
    fns.nspname AS foreign_table_schema,
    (SELECT string_agg(a.attname, ',' ORDER BY k.ord)
     FROM unnest(ct.confkey) WITH ORDINALITY AS k(attnum, ord)
     JOIN pg_attribute a ON a.attrelid = ct.confrelid AND a.attnum = k.attnum
    ) AS foreign_columns
FROM
    pg_constraint ct
    INNER JOIN pg_class c ON c.oid = ct.conrelid
    INNER JOIN pg_namespace ns ON c.relnamespace = ns.oid
    LEFT JOIN pg_class fc ON fc.oid = ct.confrelid
    LEFT JOIN pg_namespace fns ON fc.relnamespace = fns.oid
WHERE
    ct.contype = 'f'
    AND c.relname = {table}
    AND ns.nspname = {schema}
"""

TABLE_NAMES_SQL = """
SELECT c.relname AS table_name
FROM pg_class c
    INNER JOIN pg_namespace ns ON ns.oid = c.relnamespace
WHERE
    ns.nspname = {schema}
    AND c.relkind IN ('r', 'p')
ORDER BY c.relname
"""


def build_columns_query(schema_name: str, table_name: str) -> str:
    """Return the column metadata query for one table."""
    return COLUMNS_SQL.format(table=quote_value(table_name), schema=quote_value(schema_name))


def build_foreign_keys_query(schema_name: str, table_name: str) -> str:
    """Return the foreign key query for one table."""
    return FOREIGN_KEYS_SQL.format(
        table=quote_value(table_name), schema=quote_value(schema_name)
    )


def build_table_names_query(schema_name: str) -> str:
    """Return the query listing ordinary and partitioned tables of a schema."""
    return TABLE_NAMES_SQL.format(schema=quote_value(schema_name))
