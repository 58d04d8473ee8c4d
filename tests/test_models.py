"""Tests for data models."""

import dataclasses

import pytest
from sqlitemaster.models import SchemaObject, SchemaObjectType


class TestSchemaObjectType:
    """Tests for SchemaObjectType enum."""

    def test_values_match_catalog(self):
        """Should use the strings stored in the type column."""
        assert [t.value for t in SchemaObjectType] == ["table", "index", "trigger", "view"]

    def test_str(self):
        """Should render as the catalog value."""
        assert str(SchemaObjectType.TRIGGER) == "trigger"

    def test_keyword(self):
        """Should render the DDL keyword."""
        assert SchemaObjectType.INDEX.keyword == "INDEX"
        assert SchemaObjectType.VIEW.keyword == "VIEW"

    def test_lookup_by_value(self):
        """Should resolve from the catalog string."""
        assert SchemaObjectType("view") is SchemaObjectType.VIEW


class TestSchemaObject:
    """Tests for SchemaObject model."""

    def test_from_row(self):
        """Should build from a catalog row."""
        obj = SchemaObject.from_row(
            {"name": "v_a", "sql": "CREATE VIEW v_a AS SELECT 1", "type": "view"}
        )
        assert obj.name == "v_a"
        assert obj.sql == "CREATE VIEW v_a AS SELECT 1"
        assert obj.object_type is SchemaObjectType.VIEW

    def test_from_row_null_sql(self):
        """Should keep a missing definition as None."""
        obj = SchemaObject.from_row(
            {"name": "sqlite_autoindex_users_1", "sql": None, "type": "index"}
        )
        assert obj.sql is None

    def test_from_row_missing_column(self):
        """Should fail when a column is absent."""
        with pytest.raises(KeyError):
            SchemaObject.from_row({"name": "users", "type": "table"})

    def test_from_row_unknown_type(self):
        """Should fail on an unknown object type."""
        with pytest.raises(ValueError):
            SchemaObject.from_row({"name": "x", "sql": None, "type": "sequence"})

    def test_immutable(self):
        """Should not allow attribute assignment."""
        obj = SchemaObject(name="users", sql=None, object_type=SchemaObjectType.TABLE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            obj.name = "other"

    def test_equality_by_fields(self):
        """Should compare equal when all fields match."""
        a = SchemaObject(name="t1", sql="CREATE TRIGGER t1", object_type=SchemaObjectType.TRIGGER)
        b = SchemaObject(name="t1", sql="CREATE TRIGGER t1", object_type=SchemaObjectType.TRIGGER)
        assert a == b

    def test_is_auto_index(self):
        """Should flag indexes with the reserved prefix."""
        auto = SchemaObject(name="sqlite_autoindex_users_1", sql=None, object_type=SchemaObjectType.INDEX)
        explicit = SchemaObject(name="idx_users_name", sql="CREATE INDEX", object_type=SchemaObjectType.INDEX)
        assert auto.is_auto_index is True
        assert explicit.is_auto_index is False

    def test_is_auto_index_only_for_indexes(self):
        """Should not flag reserved tables as auto-indexes."""
        table = SchemaObject(name="sqlite_sequence", sql=None, object_type=SchemaObjectType.TABLE)
        assert table.is_auto_index is False
