"""Inspect the SQLite schema catalog and drop schema objects by type."""

from .catalog import (
    SchemaCatalogReader,
    drop_indexes,
    drop_triggers,
    drop_views,
    list_schema_objects,
)
from .models import SchemaObject, SchemaObjectType

__version__ = "0.1.0"

__all__ = [
    "SchemaCatalogReader",
    "SchemaObject",
    "SchemaObjectType",
    "list_schema_objects",
    "drop_triggers",
    "drop_indexes",
    "drop_views",
]
