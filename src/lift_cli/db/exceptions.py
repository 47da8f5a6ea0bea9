"""Errors raised by the persistence layer."""


class StorageError(Exception):
    """A database operation failed."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


class DuplicateMovementError(StorageError):
    """An insert collided with an existing name or id."""

    def __init__(self, name: str, detail: str | None = None):
        message = f"Movement '{name}' conflicts with an existing row"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, operation="insert")
        self.name = name
