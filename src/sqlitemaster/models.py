"""Dataclasses for schema catalog entries."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

# Names starting with this prefix are reserved for objects SQLite creates itself.
RESERVED_PREFIX = "sqlite_"


class SchemaObjectType(str, Enum):
    """Values of the ``type`` column in ``sqlite_master``."""

    TABLE = "table"
    INDEX = "index"
    TRIGGER = "trigger"
    VIEW = "view"

    def __str__(self) -> str:
        return self.value

    @property
    def keyword(self) -> str:
        """DDL keyword for this object type."""
        return self.value.upper()


@dataclass(frozen=True)
class SchemaObject:
    """Represents one row of the schema catalog."""

    name: str
    sql: Optional[str]
    object_type: SchemaObjectType

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SchemaObject":
        """Build from a catalog row keyed by column name."""
        return cls(
            name=row["name"],
            sql=row["sql"],
            object_type=SchemaObjectType(row["type"]),
        )

    @property
    def is_auto_index(self) -> bool:
        """Index created implicitly for a UNIQUE or PRIMARY KEY constraint."""
        return (
            self.object_type is SchemaObjectType.INDEX
            and self.name.startswith(RESERVED_PREFIX)
        )
