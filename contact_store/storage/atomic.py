"""
Atomic whole-file replacement.

The new content is built in a temporary file next to the target, synced to
disk, given owner-only permissions and then renamed over the target in one
step. Observers see either the old file or the new one, never a mix, and the
old file is never modified in place.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from contact_store.store.errors import PersistError, StoreIOError

logger = logging.getLogger(__name__)

# Owner read/write, nothing for group or others
DEFAULT_FILE_MODE = 0o600


def supports_owner_only_mode() -> bool:
    """Check whether the platform honors POSIX permission bits."""
    return os.name == "posix"


def _remove_temp(temp_path: Path) -> bool:
    try:
        temp_path.unlink()
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.warning(f"Could not remove temporary file {temp_path}: {e}")
        return False
    return True


def _sync_directory(directory: Path) -> None:
    """Flush the directory entry so a completed rename survives a crash."""
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def atomic_write_bytes(
    path: Path | str, data: bytes, *, mode: int = DEFAULT_FILE_MODE
) -> None:
    """
    Replace the contents of path with data atomically and durably.

    Steps:
        1. Create a temporary file in the same directory as path, so the
           final rename stays on one filesystem
        2. Write all data, flush and fsync the temporary file
        3. Set the permission bits (POSIX only) before the file is visible
        4. Rename the temporary file over path
        5. Sync the parent directory (POSIX only)

    The parent directory must already exist.

    Args:
        path: Target file path
        data: Complete new contents
        mode: Permission bits applied to the new file on POSIX systems

    Raises:
        StoreIOError: If creating, writing, syncing or chmod-ing the
                      temporary file fails (the target is untouched), or if
                      the directory sync after the rename fails
        PersistError: If the final rename fails (the target is untouched)
    """
    path = Path(path)
    directory = path.parent

    try:
        handle = tempfile.NamedTemporaryFile(
            mode="wb",
            dir=directory,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        )
    except OSError as e:
        raise StoreIOError(
            str(e), path=directory, operation="create temporary file"
        ) from e

    temp_path = Path(handle.name)
    operation = "write temporary file"
    try:
        with handle:
            handle.write(data)
            operation = "flush temporary file"
            handle.flush()
            operation = "sync temporary file"
            os.fsync(handle.fileno())
        if supports_owner_only_mode():
            operation = "set permissions on temporary file"
            os.chmod(temp_path, mode)
    except OSError as e:
        _remove_temp(temp_path)
        raise StoreIOError(str(e), path=temp_path, operation=operation) from e

    try:
        os.replace(temp_path, path)
    except OSError as e:
        if _remove_temp(temp_path):
            detail = f"{e} (temporary file removed)"
        else:
            detail = f"{e} (temporary file left at {temp_path})"
        raise PersistError(detail, path=path, temp_path=temp_path) from e

    logger.debug(f"Replaced {path} ({len(data)} bytes)")

    try:
        _sync_directory(directory)
    except OSError as e:
        raise StoreIOError(
            f"{e} (new content is already in place)",
            path=directory,
            operation="sync directory",
        ) from e
