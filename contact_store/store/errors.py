"""
Error types raised by the contact store.

Every error carries the path and the operation that failed so the caller can
tell which step of a load or save went wrong.
"""

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """
    Base class for all contact store errors.

    Attributes:
        path: Path of the file involved, if any
        operation: Short description of the step that failed, if known
        detail: Human readable description of the failure
    """

    def __init__(
        self,
        detail: str,
        path: Path | str | None = None,
        operation: str | None = None,
    ):
        self.detail = detail
        self.path = Path(path) if path is not None else None
        self.operation = operation
        super().__init__(self._format())

    def _format(self) -> str:
        if self.operation and self.path is not None:
            return f"{self.operation} failed for {self.path}: {self.detail}"
        if self.operation:
            return f"{self.operation} failed: {self.detail}"
        if self.path is not None:
            return f"{self.path}: {self.detail}"
        return self.detail


class ValidationError(StoreError, ValueError):
    """Raised when contact input violates a field constraint."""

    def __init__(self, detail: str, field: str | None = None):
        self.field = field
        super().__init__(detail, operation="validate contact")


class CorruptStoreError(StoreError):
    """Raised when the backing file is not a JSON array of contact records."""

    pass


class LockError(StoreError):
    """Raised when a shared or exclusive lock cannot be acquired."""

    pass


class StoreIOError(StoreError):
    """Raised when a filesystem step (mkdir, open, read, write, sync) fails."""

    pass


class SerializationError(StoreError):
    """Raised when the collection cannot be encoded as UTF-8 JSON."""

    pass


class PersistError(StoreError):
    """
    Raised when the final rename of the temp file over the target fails.

    The temp file was fully written and synced at that point. ``temp_path``
    names it in case it was left behind and needs manual cleanup.
    """

    def __init__(
        self,
        detail: str,
        path: Path | str | None = None,
        temp_path: Path | str | None = None,
    ):
        self.temp_path = Path(temp_path) if temp_path is not None else None
        super().__init__(detail, path=path, operation="replace")
