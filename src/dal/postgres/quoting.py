"""Quoting helpers for inlining names and values into PostgreSQL catalog queries."""


def quote_value(value: str) -> str:
    """Quote a string as a PostgreSQL literal.

    Embedded single quotes are doubled. Values containing backslashes use the
    escape-string form so the result is independent of standard_conforming_strings.
    """
    escaped = value.replace("'", "''")
    if "\\" in value:
        return "E'" + escaped.replace("\\", "\\\\") + "'"
    return "'" + escaped + "'"


def quote_simple_table_name(name: str) -> str:
    """Quote a table name that has no schema prefix; already-quoted names pass through."""
    return name if '"' in name else f'"{name}"'


def quote_simple_column_name(name: str) -> str:
    """Quote a column name that has no table prefix; ``*`` and quoted names pass through."""
    return name if '"' in name or name == "*" else f'"{name}"'


def quote_table_name(name: str) -> str:
    """Quote a possibly schema-qualified table name, part by part.

    Names containing a parenthesis are treated as expressions and returned unchanged.
    """
    if "(" in name:
        return name
    return ".".join(quote_simple_table_name(part) for part in name.split("."))


def quote_column_name(name: str) -> str:
    """Quote a possibly table-qualified column name, part by part."""
    if "(" in name:
        return name
    if "." not in name:
        return quote_simple_column_name(name)
    prefix, column = name.rsplit(".", 1)
    return f"{quote_table_name(prefix)}.{quote_simple_column_name(column)}"
