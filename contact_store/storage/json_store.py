"""
JSON file persistence for the contact store.

Loads and saves a ContactCollection as a JSON array in a single file:
- Loads read the whole file under a shared lock
- Saves serialize writers with an exclusive lock on the target, then replace
  the file atomically through a temporary file in the same directory

No file handle is kept between calls; every load and save reopens and
relocks the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from contact_store.storage.atomic import DEFAULT_FILE_MODE, atomic_write_bytes
from contact_store.storage.locking import locked_file
from contact_store.store.collection import ContactCollection
from contact_store.store.errors import (
    CorruptStoreError,
    SerializationError,
    StoreIOError,
)

logger = logging.getLogger(__name__)

# Default indentation of the saved JSON document
DEFAULT_INDENT = 2


def open_store(path: Path | str) -> ContactCollection:
    """
    Load the contact collection stored at path.

    A missing file yields an empty collection and nothing is created; the
    file only appears on the first save. A zero-length file is also read as
    empty.

    Args:
        path: Backing file path

    Returns:
        The stored contacts, in stored order

    Raises:
        StoreIOError: If the file exists but cannot be opened or read
        LockError: If the shared lock cannot be acquired
        CorruptStoreError: If the contents are not a JSON array of contacts
    """
    path = Path(path)

    if not path.exists():
        logger.debug(f"Contact file not found, starting empty: {path}")
        return ContactCollection()

    with locked_file(path, shared=True) as handle:
        try:
            raw = handle.read()
        except OSError as e:
            raise StoreIOError(str(e), path=path, operation="read") from e

    # save_store() creates the target before its first replace, so a
    # zero-length file means nothing was committed yet.
    if not raw:
        logger.debug(f"Contact file is empty, starting empty: {path}")
        return ContactCollection()

    try:
        items = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise CorruptStoreError(
            f"invalid JSON: {e}", path=path, operation="parse"
        ) from e

    try:
        collection = ContactCollection.from_list(items)
    except ValueError as e:
        raise CorruptStoreError(str(e), path=path, operation="parse") from e

    logger.debug(f"Loaded {len(collection)} contacts from {path}")
    return collection


def serialize_collection(
    collection: ContactCollection,
    indent: Optional[int] = DEFAULT_INDENT,
    path: Path | str | None = None,
) -> bytes:
    """
    Encode the collection as UTF-8 JSON bytes.

    Raises:
        SerializationError: If a field holds text that UTF-8 cannot encode
    """
    text = json.dumps(collection.to_list(), indent=indent, ensure_ascii=False)
    try:
        return (text + "\n").encode("utf-8")
    except UnicodeEncodeError as e:
        raise SerializationError(str(e), path=path, operation="encode") from e


def save_store(
    path: Path | str,
    collection: ContactCollection,
    *,
    indent: Optional[int] = DEFAULT_INDENT,
) -> None:
    """
    Persist the whole collection to path, atomically and durably.

    The exclusive lock on the target is taken only to wait out other
    writers and readers, then released before the new content is written,
    because some platforms cannot rename over a file that is open and
    locked. Two writers that both pass the lock may still race the final
    rename; the last rename wins.

    Args:
        path: Backing file path; parent directories are created as needed
        collection: Contacts to write
        indent: JSON indentation, or None for compact output

    Raises:
        SerializationError: If the collection cannot be encoded
        StoreIOError: If a directory, open, write or sync step fails
        LockError: If the exclusive lock cannot be acquired
        PersistError: If the final rename fails
    """
    path = Path(path)

    # Encode first so a bad collection never reaches the filesystem.
    data = serialize_collection(collection, indent=indent, path=path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreIOError(
            str(e), path=path.parent, operation="create parent directory"
        ) from e

    with locked_file(path, shared=False, create=True):
        pass

    atomic_write_bytes(path, data, mode=DEFAULT_FILE_MODE)

    logger.debug(f"Saved {len(collection)} contacts to {path}")


class JsonContactStore:
    """
    Path-bound wrapper around open_store() and save_store().

    Attributes:
        path: Backing file path
        indent: JSON indentation used on save

    Usage:
        store = JsonContactStore(Path("~/contacts.json").expanduser())
        contacts = store.load()
        contacts.add(Contact.create("Alice", "alice@example.com"))
        store.save(contacts)
    """

    def __init__(self, path: Path | str, indent: Optional[int] = DEFAULT_INDENT):
        self.path = Path(path)
        self.indent = indent

    def exists(self) -> bool:
        """Check whether the backing file has been created yet."""
        return self.path.exists()

    def load(self) -> ContactCollection:
        """Load the collection from the backing file."""
        return open_store(self.path)

    def save(self, collection: ContactCollection) -> None:
        """Replace the backing file with the given collection."""
        save_store(self.path, collection, indent=self.indent)
