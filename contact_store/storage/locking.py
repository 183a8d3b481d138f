"""
Advisory file locking for the contact store.

Provides a context manager that opens a file and holds a shared or exclusive
lock on the handle for the duration of a ``with`` block. The lock is released
and the handle closed on every exit path, including errors.

On POSIX systems ``fcntl.flock`` is used, which supports real shared locks.
On Windows ``msvcrt.locking`` only offers exclusive byte-range locks, so
shared requests are taken exclusively there. Its blocking mode gives up
after about ten seconds, so the request is repeated until it is granted.
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from contact_store.store.errors import LockError, StoreIOError

if os.name == "nt":
    import msvcrt
else:
    import fcntl

logger = logging.getLogger(__name__)

# Mode for files created through locked_file(create=True)
OWNER_ONLY_MODE = 0o600

# errno msvcrt.locking(LK_LOCK) reports when its retries run out
LOCK_RETRY_ERRNO = getattr(errno, "EDEADLOCK", errno.EDEADLK)


def _lock_windows(handle: BinaryIO) -> None:
    handle.seek(0)
    while True:
        try:
            msvcrt.locking(handle.fileno(), msvcrt.LK_LOCK, 1)
            return
        except OSError as e:
            if e.errno != LOCK_RETRY_ERRNO:
                raise
            logger.debug(f"Still waiting for lock on {handle.name}")


def _lock(handle: BinaryIO, shared: bool) -> None:
    if os.name == "nt":
        _lock_windows(handle)
    else:
        fcntl.flock(handle.fileno(), fcntl.LOCK_SH if shared else fcntl.LOCK_EX)


def _unlock(handle: BinaryIO) -> None:
    if os.name == "nt":
        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)
    else:
        fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


def _open(path: Path, create: bool) -> BinaryIO:
    if not create:
        return open(path, "rb")

    # O_CREAT with an explicit mode so a newly created file is never
    # readable by group or others, even before the first atomic replace.
    flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags, OWNER_ONLY_MODE)
    try:
        return os.fdopen(fd, "r+b")
    except Exception:
        os.close(fd)
        raise


@contextmanager
def locked_file(
    path: Path | str, *, shared: bool, create: bool = False
) -> Generator[BinaryIO, None, None]:
    """
    Open a file and hold a lock on it for the duration of the block.

    Acquisition blocks until the lock is granted; there is no timeout on
    any platform. A shared lock may be held by any number of readers at once
    but waits while anyone holds an exclusive lock. An exclusive lock waits
    until no other lock of either kind is held.

    Args:
        path: File to open and lock
        shared: True for a shared (read) lock, False for an exclusive one
        create: Create the file (owner read/write only) if it does not exist,
                and open it read/write. Otherwise open read-only.

    Yields:
        The open binary file handle

    Raises:
        StoreIOError: If the file cannot be opened
        LockError: If the lock cannot be acquired

    Usage:
        with locked_file(path, shared=True) as handle:
            data = handle.read()
    """
    path = Path(path)
    kind = "shared" if shared else "exclusive"

    try:
        handle = _open(path, create)
    except OSError as e:
        raise StoreIOError(
            str(e), path=path, operation=f"open for {kind} lock"
        ) from e

    try:
        try:
            _lock(handle, shared)
        except OSError as e:
            raise LockError(str(e), path=path, operation=f"acquire {kind} lock") from e

        logger.debug(f"Acquired {kind} lock on {path}")
        try:
            yield handle
        finally:
            # Closing the handle below drops the lock even if unlocking fails.
            try:
                _unlock(handle)
            except OSError as e:
                logger.warning(f"Could not release {kind} lock on {path}: {e}")
            else:
                logger.debug(f"Released {kind} lock on {path}")
    finally:
        handle.close()
