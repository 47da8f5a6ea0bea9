"""Database layer for lift."""

from .engine import DB_NAME, get_db_path, init_db, prepare_db_path
from .exceptions import DuplicateMovementError, StorageError
from .repositories import MovementRepository

__all__ = [
    "DB_NAME",
    "DuplicateMovementError",
    "get_db_path",
    "init_db",
    "MovementRepository",
    "prepare_db_path",
    "StorageError",
]
