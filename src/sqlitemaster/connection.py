"""SQLite database connection."""

import logging
import sqlite3
from typing import Optional

from .config import CatalogConfig
from .exceptions import ConnectionError

logger = logging.getLogger(__name__)


class SQLiteConnection:
    """Opens and closes a SQLite database file described by a config."""

    def __init__(self, config: CatalogConfig):
        self.config = config
        self._connection: Optional[sqlite3.Connection] = None

    def connect(self) -> None:
        """Establish database connection."""
        try:
            db_path = self.config.database_path
            logger.debug(f"Connecting to SQLite: {db_path}")
            self._connection = sqlite3.connect(db_path)
            logger.info(f"Connected to {db_path}")
        except sqlite3.Error as e:
            raise ConnectionError(f"Failed to connect to database: {e}") from e

    def disconnect(self) -> None:
        """Close database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from database")

    def commit(self) -> None:
        """Commit any pending transaction."""
        try:
            self.connection.commit()
        except sqlite3.Error as e:
            raise ConnectionError(f"Failed to commit: {e}") from e

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the active connection."""
        if not self._connection:
            raise ConnectionError("Not connected to database")
        return self._connection

    def get_version(self) -> str:
        """Get SQLite version."""
        cursor = self.connection.cursor()
        try:
            cursor.execute("SELECT sqlite_version()")
            row = cursor.fetchone()
            return row[0] if row else "Unknown"
        finally:
            cursor.close()

    def __enter__(self) -> "SQLiteConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.disconnect()
