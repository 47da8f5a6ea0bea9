"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from .exceptions import StorageError

logger = logging.getLogger(__name__)

# Default database file, created in the working directory
DB_NAME = "lift_data.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = Path.cwd()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_NAME


def prepare_db_path(db_path: Path, operation: str | None = None) -> Path:
    """Make sure the database file can be created at ``db_path``.

    Missing parent directories are created. Paths that can never hold a
    database file raise StorageError before a connection is attempted.
    """
    if db_path.is_dir():
        raise StorageError(f"Database path {db_path} is a directory", operation=operation)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(
            f"Could not create database directory {db_path.parent}: {e}",
            operation=operation,
        ) from e
    return db_path


async def create_schema(db: aiosqlite.Connection) -> None:
    """Create the movements table on an open connection if it is missing."""
    await db.execute("""
        CREATE TABLE IF NOT EXISTS movements (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL UNIQUE,
            is_upper INTEGER,
            require_weight INTEGER
        )
    """)
    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema. Safe to call repeatedly."""
    if db_path is None:
        db_path = get_db_path()

    logger.debug("Ensuring schema in %s", db_path)
    prepare_db_path(db_path, operation="init")
    try:
        async with aiosqlite.connect(db_path) as db:
            await create_schema(db)
    except aiosqlite.Error as e:
        raise StorageError(
            f"Could not initialize database {db_path}: {e}", operation="init"
        ) from e
