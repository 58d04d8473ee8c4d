"""Click CLI interface for sqlitemaster."""

import logging
import sys
from collections import Counter

import click

from . import __version__
from .catalog import SchemaCatalogReader
from .config import DROPPABLE_OBJECT_TYPES, CatalogConfig
from .connection import SQLiteConnection
from .exceptions import (
    ConfigurationError,
    ConnectionError,
    SQLiteMasterError,
    StatementExecutionError,
)
from .models import SchemaObjectType

OBJECT_TYPE_CHOICES = [t.value for t in SchemaObjectType]

DROP_TYPES = {
    "triggers": SchemaObjectType.TRIGGER,
    "views": SchemaObjectType.VIEW,
    "indexes": SchemaObjectType.INDEX,
}


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """sqlitemaster - Inspect sqlite_master and drop schema objects by type."""
    pass


@cli.command("list")
@click.argument("database", envvar="SQLITE_DATABASE", type=click.Path(dir_okay=False))
@click.option("--type", "-t", "object_type", type=click.Choice(OBJECT_TYPE_CHOICES, case_sensitive=False),
              help="Only list objects of this type")
@click.option("--sql", "show_sql", is_flag=True, help="Print the definition of each object")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def list_objects(database: str, object_type: str | None, show_sql: bool, verbose: int) -> None:
    """List schema objects ordered by name."""
    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        config = CatalogConfig(database_path=database, verbosity=verbose)
        config.validate()

        with SQLiteConnection(config) as conn:
            reader = SchemaCatalogReader(conn.connection)
            objects = reader.list_schema_objects(object_type.lower() if object_type else None)

        for obj in objects:
            click.echo(f"{obj.object_type.value:<8} {obj.name}")
            if show_sql and obj.sql:
                click.echo(f"    {obj.sql}")

    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ConnectionError as e:
        click.echo(f"Connection error: {e}", err=True)
        sys.exit(1)
    except SQLiteMasterError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("database", envvar="SQLITE_DATABASE", type=click.Path(dir_okay=False))
@click.option("--object-types", multiple=True,
              type=click.Choice(DROPPABLE_OBJECT_TYPES + ["all"], case_sensitive=False),
              help="Object types to drop (default: all)")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--dry-run", is_flag=True, help="Print the DROP statements without executing them")
def drop(database: str, object_types: tuple[str, ...], verbose: int, dry_run: bool) -> None:
    """Drop triggers, views and indexes."""
    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        config = CatalogConfig(
            database_path=database,
            object_types=list(object_types) if object_types else list(DROPPABLE_OBJECT_TYPES),
            dry_run=dry_run,
            verbosity=verbose,
        )
        config.validate()

        with SQLiteConnection(config) as conn:
            reader = SchemaCatalogReader(conn.connection)

            for obj_type in config.ordered_object_types:
                if config.dry_run:
                    statements = reader.drop_statements(DROP_TYPES[obj_type])
                    for statement in statements:
                        click.echo(statement)
                    click.echo(f"[DRY RUN] Would drop {len(statements)} {obj_type}")
                    continue

                click.echo(f"Dropping {obj_type}...")
                drop_method = getattr(reader, f"drop_{obj_type}")
                try:
                    statements = drop_method()
                except StatementExecutionError:
                    # Keep whatever was dropped before the failure
                    try:
                        conn.commit()
                    except ConnectionError as e:
                        logger.error(f"Commit after failed drop also failed: {e}")
                    raise
                conn.commit()
                click.echo(f"  Dropped {len(statements)} {obj_type}")

    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ConnectionError as e:
        click.echo(f"Connection error: {e}", err=True)
        sys.exit(1)
    except StatementExecutionError as e:
        click.echo(f"Drop failed: {e}", err=True)
        sys.exit(1)
    except SQLiteMasterError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("database", envvar="SQLITE_DATABASE", type=click.Path(dir_okay=False))
def info(database: str) -> None:
    """Show the SQLite version and schema object counts."""
    try:
        config = CatalogConfig(database_path=database)
        config.validate()

        with SQLiteConnection(config) as conn:
            version = conn.get_version()
            objects = SchemaCatalogReader(conn.connection).list_schema_objects()

        counts = Counter(obj.object_type for obj in objects)
        click.echo(f"SQLite version: {version}")
        for object_type in SchemaObjectType:
            click.echo(f"  {object_type.value:<8} {counts[object_type]}")

    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except ConnectionError as e:
        click.echo(f"Connection failed: {e}", err=True)
        sys.exit(1)
    except SQLiteMasterError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
