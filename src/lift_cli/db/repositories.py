"""Data access layer for lift."""

import logging
from pathlib import Path

import aiosqlite

from ..models.movement import Movement
from .engine import create_schema, get_db_path, prepare_db_path
from .exceptions import DuplicateMovementError, StorageError

logger = logging.getLogger(__name__)


class MovementRepository:
    """Repository for movements.

    Every call makes sure the database directory exists, opens its own
    connection, creates the ``movements`` table if needed, runs one
    statement and closes the connection again.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, movement: Movement) -> int:
        """Insert a movement and return its row id.

        Raises DuplicateMovementError when the name (or an explicit id) is
        already taken.
        """
        data = movement.to_dict()
        logger.debug("Inserting movement %r into %s", movement, self.db_path)
        prepare_db_path(self.db_path, operation="insert")
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await create_schema(db)
                cursor = await db.execute(
                    """
                    INSERT INTO movements
                    (id, name, is_upper, require_weight)
                    VALUES (?, ?, ?, ?)
                    """,
                    (
                        data["id"],
                        data["name"],
                        data["is_upper"],
                        data["require_weight"],
                    ),
                )
                await db.commit()
                return cursor.lastrowid
        except aiosqlite.IntegrityError as e:
            logger.info("Constraint violation inserting %r: %s", movement.name, e)
            raise DuplicateMovementError(movement.name, str(e)) from e
        except aiosqlite.Error as e:
            raise StorageError(
                f"Could not add movement '{movement.name}': {e}", operation="insert"
            ) from e

    async def get_by_name(self, name: str) -> Movement | None:
        """Get a movement by its exact name."""
        prepare_db_path(self.db_path, operation="select")
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await create_schema(db)
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(
                    "SELECT * FROM movements WHERE name = ?", (name,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError(
                f"Could not look up movement '{name}': {e}", operation="select"
            ) from e
        if row is None:
            return None
        return self._row_to_movement(row)

    async def list_all(self) -> list[Movement]:
        """List all movements in storage order."""
        prepare_db_path(self.db_path, operation="select")
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await create_schema(db)
                db.row_factory = aiosqlite.Row
                cursor = await db.execute("SELECT * FROM movements")
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StorageError(
                f"Could not list movements: {e}", operation="select"
            ) from e
        logger.debug("Fetched %d movement(s) from %s", len(rows), self.db_path)
        return [self._row_to_movement(row) for row in rows]

    async def delete_by_name(self, name: str) -> int:
        """Delete movements matching ``name`` exactly.

        Returns the number of rows removed; zero is not an error.
        """
        logger.debug("Deleting movement %r from %s", name, self.db_path)
        prepare_db_path(self.db_path, operation="delete")
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await create_schema(db)
                cursor = await db.execute(
                    "DELETE FROM movements WHERE name = ?", (name,)
                )
                await db.commit()
                return cursor.rowcount
        except aiosqlite.Error as e:
            raise StorageError(
                f"Could not delete movement '{name}': {e}", operation="delete"
            ) from e

    def _row_to_movement(self, row: aiosqlite.Row) -> Movement:
        """Convert a database row to a Movement."""
        return Movement.from_dict(
            {
                "id": row["id"],
                "name": row["name"],
                "is_upper": row["is_upper"],
                "require_weight": row["require_weight"],
            }
        )
