# src/zgit/core/atomic.py
"""Crash-safe file replacement.

write_atomically() guarantees that a reader of the target path sees either
no file (or the previous content) or the complete new content, never a
partial write, and that the rename survives a crash right after it returns:

1. write to a temp file in the target's own directory (same filesystem)
2. flush + fsync the temp file
3. os.replace() the temp file onto the target
4. fsync the parent directory so the new directory entry is durable

The temp name is unique per call, so concurrent writers in one directory
never share a temp file. mkstemp() creates it owner-only (0600); it is
chmod'ed before the rename so the result has the same permissions a plain
open() would give (0666 minus the umask), unless a mode is passed.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from zgit.contracts.errors import ObjectStoreIOError, ParentDirectoryMissingError

_TEMP_PREFIX = ".tmp-"
_DEFAULT_FILE_MODE = 0o666


def _current_umask() -> int:
    # umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _fsync_directory(directory: Path) -> None:
    """Force a directory's metadata (entries) to stable storage.

    Platforms that cannot open a directory for reading (Windows) skip this;
    their rename is already durable once it returns.
    """
    try:
        fd = os.open(directory, os.O_RDONLY)
    except (PermissionError, IsADirectoryError):
        return
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def write_atomically(target: Path, data: bytes, *, mode: int | None = None) -> None:
    """Atomically replace the contents of target with data.

    Args:
        target: File to create or replace. Its parent directory must exist.
        data: Complete new content.
        mode: Permission bits of the result. Defaults to 0666 masked by the
            process umask, as for a file created with open().

    Raises:
        ParentDirectoryMissingError: If target's parent directory doesn't exist
        ObjectStoreIOError: If writing, syncing or renaming fails
    """
    target = Path(os.path.abspath(target))
    parent = target.parent
    if not parent.is_dir():
        raise ParentDirectoryMissingError(target)
    if mode is None:
        mode = _DEFAULT_FILE_MODE & ~_current_umask()

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=_TEMP_PREFIX, dir=parent)
    except OSError as e:
        raise ObjectStoreIOError(parent, "creating temporary file in", e) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            os.chmod(tmp_path, mode)
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ObjectStoreIOError(target, "writing", e) from e
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    try:
        _fsync_directory(parent)
    except OSError as e:
        raise ObjectStoreIOError(parent, "syncing directory", e) from e
