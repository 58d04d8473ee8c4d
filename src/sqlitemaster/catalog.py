"""Schema catalog queries and bulk teardown of schema objects."""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Generator, Optional, Union

from .exceptions import (
    ConfigurationError,
    ConnectionError,
    QueryError,
    StatementExecutionError,
)
from .models import SchemaObject, SchemaObjectType

SQLITE_MASTER_TABLE = "sqlite_master"

# sqlite_master only lists this schema; unqualified names resolve in temp first.
SCHEMA_NAME = "main"

DROPPABLE_TYPES = (
    SchemaObjectType.TRIGGER,
    SchemaObjectType.INDEX,
    SchemaObjectType.VIEW,
)


def quote_identifier(name: str) -> str:
    """Quote an identifier for use in a SQL statement."""
    return '"' + name.replace('"', '""') + '"'


def _coerce_type(object_type: Union[SchemaObjectType, str]) -> SchemaObjectType:
    try:
        return SchemaObjectType(object_type)
    except ValueError:
        valid = ", ".join(t.value for t in SchemaObjectType)
        raise ConfigurationError(
            f"Unknown object type: {object_type}. Supported types: {valid}"
        ) from None


class SchemaCatalogReader:
    """Reads ``sqlite_master`` and drops schema objects by type.

    The reader never opens, closes or commits the connection it is given.
    Each drop operation reads the complete list of matching objects before
    issuing any DDL, so the catalog is never modified while a cursor over it
    is still open. DDL statements are executed one at a time without an
    enclosing transaction; the first failure aborts the rest of the batch.
    """

    def __init__(self, connection: Any):
        if connection is None:
            raise ConnectionError("No database connection supplied")
        self.connection = connection
        self.logger = logging.getLogger(self.__class__.__name__)

    @contextmanager
    def cursor(self) -> Generator[Any, None, None]:
        """Get a cursor context manager."""
        try:
            cur = self.connection.cursor()
        except sqlite3.ProgrammingError as e:
            raise ConnectionError(f"Database connection is not usable: {e}") from e
        try:
            yield cur
        finally:
            cur.close()

    def list_schema_objects(
        self, object_type: Optional[Union[SchemaObjectType, str]] = None
    ) -> list[SchemaObject]:
        """List catalog entries ordered by name, optionally of one type."""
        query = f"SELECT name, sql, type FROM {SQLITE_MASTER_TABLE}"
        params: tuple = ()
        if object_type is not None:
            object_type = _coerce_type(object_type)
            query += " WHERE type = ?"
            params = (object_type.value,)
        query += " ORDER BY name"

        with self.cursor() as cur:
            # Plain tuples, whatever row_factory the caller configured
            cur.row_factory = None
            try:
                cur.execute(query, params)
                columns = [description[0] for description in cur.description]
                objects = [SchemaObject.from_row(dict(zip(columns, row))) for row in cur]
            except sqlite3.Error as e:
                raise QueryError(f"Failed to read {SQLITE_MASTER_TABLE}: {e}") from e
            except (KeyError, ValueError) as e:
                raise QueryError(
                    f"Unexpected row in {SQLITE_MASTER_TABLE}: {e}"
                ) from e

        self.logger.info(
            f"Found {len(objects)} {object_type or 'schema'} objects"
        )
        return objects

    def drop_statements(self, object_type: Union[SchemaObjectType, str]) -> list[str]:
        """Build the DROP statements for every droppable object of a type."""
        object_type = _coerce_type(object_type)
        if object_type not in DROPPABLE_TYPES:
            raise ConfigurationError(f"Dropping objects of type {object_type} is not supported")

        objects = self.list_schema_objects(object_type)
        return [
            f"DROP {object_type.keyword} IF EXISTS {SCHEMA_NAME}.{quote_identifier(obj.name)}"
            for obj in objects
            if not obj.is_auto_index
        ]

    def execute_statement(self, statement: str) -> None:
        """Execute a single DDL statement."""
        self.logger.debug(statement)
        with self.cursor() as cur:
            try:
                cur.execute(statement)
            except sqlite3.Error as e:
                raise StatementExecutionError(
                    f"Failed to execute '{statement}': {e}", statement
                ) from e

    def _drop(self, object_type: SchemaObjectType) -> list[str]:
        statements = self.drop_statements(object_type)
        for statement in statements:
            self.execute_statement(statement)
        self.logger.info(f"Dropped {len(statements)} {object_type.value} objects")
        return statements

    def drop_triggers(self) -> list[str]:
        """Drop all triggers."""
        return self._drop(SchemaObjectType.TRIGGER)

    def drop_indexes(self) -> list[str]:
        """Drop all indexes except the ones SQLite created automatically."""
        return self._drop(SchemaObjectType.INDEX)

    def drop_views(self) -> list[str]:
        """Drop all views."""
        return self._drop(SchemaObjectType.VIEW)


def list_schema_objects(
    connection: Any, object_type: Optional[Union[SchemaObjectType, str]] = None
) -> list[SchemaObject]:
    """List catalog entries of a connection ordered by name."""
    return SchemaCatalogReader(connection).list_schema_objects(object_type)


def drop_triggers(connection: Any) -> list[str]:
    """Drop all triggers of a connection."""
    return SchemaCatalogReader(connection).drop_triggers()


def drop_indexes(connection: Any) -> list[str]:
    """Drop all explicitly created indexes of a connection."""
    return SchemaCatalogReader(connection).drop_indexes()


def drop_views(connection: Any) -> list[str]:
    """Drop all views of a connection."""
    return SchemaCatalogReader(connection).drop_views()
