"""Configuration dataclasses for sqlitemaster."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .exceptions import ConfigurationError

# Order in which bulk drops run.
DROPPABLE_OBJECT_TYPES = ["triggers", "views", "indexes"]


@dataclass
class CatalogConfig:
    """Configuration for the sqlitemaster command line."""

    database_path: Optional[Union[str, Path]] = None

    object_types: list[str] = field(
        default_factory=lambda: list(DROPPABLE_OBJECT_TYPES)
    )

    # Behavior
    dry_run: bool = False
    verbosity: int = 0

    def __post_init__(self) -> None:
        """Normalize configuration after initialization."""
        if isinstance(self.database_path, Path):
            self.database_path = str(self.database_path)

        self.object_types = [t.lower() for t in self.object_types]
        if "all" in self.object_types:
            self.object_types = list(DROPPABLE_OBJECT_TYPES)

    def validate(self) -> None:
        """Validate the configuration is complete and consistent."""
        if not self.database_path:
            raise ConfigurationError("Database path is required")
        if not Path(self.database_path).is_file():
            raise ConfigurationError(f"Database file not found: {self.database_path}")

        unknown = [t for t in self.object_types if t not in DROPPABLE_OBJECT_TYPES]
        if unknown:
            raise ConfigurationError(
                f"Unknown object types: {', '.join(unknown)}. "
                f"Supported types: {', '.join(DROPPABLE_OBJECT_TYPES)}, all"
            )

    def should_drop(self, object_type: str) -> bool:
        """Check if an object type should be dropped."""
        return object_type in self.object_types

    @property
    def ordered_object_types(self) -> list[str]:
        """Selected object types in drop order."""
        return [t for t in DROPPABLE_OBJECT_TYPES if self.should_drop(t)]
