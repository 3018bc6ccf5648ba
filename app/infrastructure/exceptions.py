"""Infrastructure exceptions for key-value storage backends.

Storage errors extend FlowTaskException so callers can log and map them
consistently. Repositories translate them into the domain persistence
policy (soft reads, hard writes).
"""

from app.domain.exceptions import FlowTaskException


class StorageException(FlowTaskException):
    """Base exception for storage operations."""


class StorageReadError(StorageException):
    """Reading a key from the backend failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to read key: {key}",
            "STORAGE_READ_ERROR",
            {"key": key, "reason": reason},
        )


class StorageWriteError(StorageException):
    """Writing or deleting a key in the backend failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to write key: {key}",
            "STORAGE_WRITE_ERROR",
            {"key": key, "reason": reason},
        )


class StorageNotConnectedError(StorageException):
    """Backend is not connected (connect() not called yet, or it failed)."""

    def __init__(self, backend: str, reason: str | None = None) -> None:
        details = {"backend": backend}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"{backend} storage is not connected",
            "STORAGE_NOT_CONNECTED",
            details,
        )
