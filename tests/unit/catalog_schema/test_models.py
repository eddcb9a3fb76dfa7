"""Unit tests for the table metadata models."""

import pytest
from pydantic import ValidationError

from catalog_schema import ColumnSchema, ColumnType, ForeignKeySchema, TableSchema


def test_column_schema_construction():
    """Test ColumnSchema defaults."""
    col = ColumnSchema(name="id", db_type="int4", type=ColumnType.INTEGER, allow_null=False)
    assert col.name == "id"
    assert col.db_type == "int4"
    assert col.allow_null is False
    assert col.is_primary_key is False
    assert col.auto_increment is False
    assert col.unsigned is False
    assert col.enum_values is None
    assert col.comment is None


def test_column_type_defaults_to_string():
    """Columns without an abstract type are strings."""
    col = ColumnSchema(name="shape", db_type="geometry")
    assert col.type == ColumnType.STRING
    assert col.python_type == "str"


@pytest.mark.parametrize(
    "column_type, python_type",
    [
        (ColumnType.SMALLINT, "int"),
        (ColumnType.INTEGER, "int"),
        (ColumnType.BIGINT, "int"),
        (ColumnType.BOOLEAN, "bool"),
        (ColumnType.FLOAT, "float"),
        (ColumnType.DECIMAL, "str"),
        (ColumnType.MONEY, "str"),
        (ColumnType.TIMESTAMP, "str"),
        (ColumnType.TEXT, "str"),
    ],
)
def test_python_type(column_type, python_type):
    """Abstract types map onto a small set of Python types."""
    assert ColumnSchema(name="c", db_type="x", type=column_type).python_type == python_type


def test_typecast():
    """Raw values are converted to the column's Python type."""
    integer = ColumnSchema(name="n", db_type="int4", type=ColumnType.INTEGER)
    assert integer.typecast("42") == 42
    assert integer.typecast(7) == 7
    assert integer.typecast("") is None
    assert integer.typecast(None) is None

    flag = ColumnSchema(name="f", db_type="bool", type=ColumnType.BOOLEAN)
    assert flag.typecast(1) is True
    assert flag.typecast("") is None
    assert flag.typecast(False) is False


@pytest.mark.parametrize("raw", ["0", "f", "false", "FALSE", "n", "no", "off"])
def test_typecast_false_strings(raw):
    """Boolean columns read the usual false spellings as False."""
    flag = ColumnSchema(name="f", db_type="bool", type=ColumnType.BOOLEAN)
    assert flag.typecast(raw) is False


@pytest.mark.parametrize("raw", ["1", "t", "true", "yes", "on"])
def test_typecast_true_strings(raw):
    """Boolean columns read the usual true spellings as True."""
    flag = ColumnSchema(name="f", db_type="bool", type=ColumnType.BOOLEAN)
    assert flag.typecast(raw) is True


def test_typecast_string_like_columns():
    """Text keeps empty strings; decimals are strings but treat "" as no value."""
    text = ColumnSchema(name="t", db_type="text", type=ColumnType.TEXT)
    assert text.typecast("") == ""
    assert text.typecast(12) == "12"

    amount = ColumnSchema(name="a", db_type="numeric", type=ColumnType.DECIMAL)
    assert amount.typecast("") is None
    assert amount.typecast("1.50") == "1.50"


def test_foreign_key_schema_as_list():
    """Foreign keys render as [table, {referenced: local}, ...]."""
    fk = ForeignKeySchema(
        foreign_table="billing.accounts",
        column_pairs=[("id", "account_id"), ("region", "account_region")],
    )
    assert fk.as_list() == [
        "billing.accounts",
        {"id": "account_id"},
        {"region": "account_region"},
    ]
    assert fk.local_columns == ["account_id", "account_region"]
    assert fk.foreign_columns == ["id", "region"]


def test_table_schema_construction():
    """Test TableSchema defaults."""
    table = TableSchema(schema_name="public", name="orders")
    assert table.columns == {}
    assert table.primary_key == ()
    assert table.sequence_name is None
    assert table.foreign_keys == ()


def test_table_schema_column_access():
    """Columns are looked up by name and keep insertion order."""
    cols = [
        ColumnSchema(name="id", db_type="int4", type=ColumnType.INTEGER, is_primary_key=True),
        ColumnSchema(name="status", db_type="text", type=ColumnType.TEXT),
    ]
    table = TableSchema(
        schema_name="public",
        name="orders",
        columns={col.name: col for col in cols},
        primary_key=["id"],
    )
    assert table.column_names == ["id", "status"]
    assert table.get_column("status").type == ColumnType.TEXT
    assert table.get_column("missing") is None


def test_models_are_frozen():
    """Metadata snapshots cannot be reassigned once built."""
    col = ColumnSchema(name="id", db_type="int4")
    with pytest.raises(ValidationError):
        col.name = "new_name"

    table = TableSchema(schema_name="public", name="orders")
    with pytest.raises(ValidationError):
        table.sequence_name = "orders_id_seq"


def test_snapshot_containers_are_read_only():
    """Collections inside a snapshot cannot be modified in place."""
    col = ColumnSchema(name="mood", db_type="mood", enum_values=["happy", "sad"])
    fk = ForeignKeySchema(foreign_table="users", column_pairs=[("id", "user_id")])
    table = TableSchema(
        schema_name="public",
        name="orders",
        columns={"mood": col},
        primary_key=["id"],
        foreign_keys=[fk],
    )

    assert col.enum_values == ("happy", "sad")
    assert fk.column_pairs == (("id", "user_id"),)
    assert table.primary_key == ("id",)

    with pytest.raises(TypeError):
        table.columns["bogus"] = col
    with pytest.raises(AttributeError):
        table.primary_key.append("bogus")
    with pytest.raises(AttributeError):
        table.foreign_keys.append(fk)
    with pytest.raises(AttributeError):
        fk.column_pairs.append(("id", "other_id"))
    with pytest.raises(AttributeError):
        col.enum_values.append("angry")


def test_table_schema_copies_columns_mapping():
    """Changing the dict a table was built from does not change the table."""
    source = {"id": ColumnSchema(name="id", db_type="int4")}
    table = TableSchema(schema_name="public", name="t", columns=source)
    source["extra"] = ColumnSchema(name="extra", db_type="text")
    assert table.column_names == ["id"]


def test_table_schema_dumps_columns_as_dict():
    """Serialized snapshots render columns as a plain mapping."""
    table = TableSchema(
        schema_name="public",
        name="t",
        columns={"id": ColumnSchema(name="id", db_type="int4", type=ColumnType.INTEGER)},
    )
    payload = table.model_dump(mode="json")
    assert payload["columns"]["id"]["type"] == "integer"
    assert payload["primary_key"] == []
