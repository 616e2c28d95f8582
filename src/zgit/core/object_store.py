# src/zgit/core/object_store.py
"""
Loose object store.

Objects are stored zlib-compressed under the repository's marker directory,
sharded by the first 2 hex characters of their id:

    <root>/.zgit/objects/b6/fc4c620b67d95f953a5c1c1230aaab5db5a1b0

Records are written once through write_atomically() and never modified.
Storing an object whose record already exists is a no-op that returns
the same id.

Lookup accepts the full id or any key of at least 2 characters: the first
2 select the shard directory and the remainder must occur *somewhere* in
the record's file name (substring match, not just a prefix). Exactly one
record must match.
"""

from __future__ import annotations

import os
import re
import zlib
from pathlib import Path

from zgit.contracts.enums import ObjectKind
from zgit.contracts.errors import (
    AmbiguousPrefixError,
    CorruptObjectError,
    ObjectNotFoundError,
    ObjectStoreIOError,
    PrefixTooShortError,
)
from zgit.contracts.identity import ObjectId
from zgit.core.atomic import write_atomically
from zgit.core.config import DEFAULT_MARKER, ZgitSettings
from zgit.core.framing import Payload, digest_framing, frame, parse_header
from zgit.core.logging import get_logger
from zgit.core.repository import locate_repository

__all__ = ["MIN_PREFIX_LENGTH", "object_path", "objects_dir", "read_object", "store_object"]

logger = get_logger(__name__)

# Characters needed to select a shard directory
MIN_PREFIX_LENGTH = 2

_SHARD_PATTERN = re.compile(r"^[0-9a-f]{2}$")
# Only finished records are lookup candidates; in-flight temp files are not
_RECORD_NAME_PATTERN = re.compile(r"^[0-9a-f]{38}$")


def objects_dir(root: Path, *, marker: str = DEFAULT_MARKER) -> Path:
    """Directory holding the shard directories of a repository."""
    return root / marker / "objects"


def object_path(root: Path, oid: ObjectId, *, marker: str = DEFAULT_MARKER) -> Path:
    """Storage path of an object's record. Pure function of the id."""
    return objects_dir(root, marker=marker) / oid.directory / oid.filename


def store_object(
    repo: str | os.PathLike[str],
    kind: ObjectKind | str,
    payload: Payload,
    *,
    settings: ZgitSettings | None = None,
) -> ObjectId:
    """Store an object in the repository enclosing repo and return its id.

    Args:
        repo: Any path inside the repository.
        kind: Object kind. Plain strings are validated.
        payload: Raw payload bytes or a readable binary stream (position is restored if seekable).
        settings: Marker name and compression level; defaults when None.

    Returns:
        The object's id, whether or not it was already stored

    Raises:
        NotARepositoryError: If repo is not inside a repository
        InvalidObjectKindError: If kind is an unrecognized string
        ObjectStoreIOError: If the shard directory or record can't be written
    """
    settings = settings or ZgitSettings()
    root = locate_repository(repo, required=True, marker=settings.marker)
    assert root is not None

    framed = frame(kind, payload)
    oid = digest_framing(framed)
    path = object_path(root, oid, marker=settings.marker)

    try:
        already_stored = path.exists()
    except OSError as e:
        raise ObjectStoreIOError(path, "checking", e) from e
    if already_stored:
        logger.debug("Object already present", oid=oid.hex)
        return oid

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ObjectStoreIOError(path.parent, "creating directory", e) from e

    compressed = zlib.compress(framed, settings.object_store.compression_level)
    write_atomically(path, compressed)

    logger.debug(
        "Object stored",
        oid=oid.hex,
        framed_size=len(framed),
        compressed_size=len(compressed),
    )
    return oid


def _matching_records(shard: Path, fragment: str) -> list[Path]:
    """Records in shard whose file name contains fragment."""
    try:
        with os.scandir(shard) as entries:
            return sorted(
                shard / entry.name
                for entry in entries
                if _RECORD_NAME_PATTERN.match(entry.name) and fragment in entry.name and entry.is_file()
            )
    except OSError as e:
        raise ObjectStoreIOError(shard, "listing", e) from e


def read_object(
    repo: str | os.PathLike[str],
    oid_or_prefix: str,
    *,
    settings: ZgitSettings | None = None,
) -> tuple[ObjectKind, bytes]:
    """Read an object by full id or unique lookup key.

    The returned bytes are the entire canonical framing, header included;
    use payload_of() to get the raw payload.

    Args:
        repo: Any path inside the repository.
        oid_or_prefix: Full hex id or a key of at least 2 characters (case-insensitive).
        settings: Marker name; defaults when None.

    Returns:
        (kind, framed bytes)

    Raises:
        NotARepositoryError: If repo is not inside a repository
        PrefixTooShortError: If the key is shorter than 2 characters
        ObjectNotFoundError: If no record matches
        AmbiguousPrefixError: If more than one record matches
        CorruptObjectError: If the record can't be decompressed or its header parsed
        InvalidObjectKindError: If the record's kind tag is unrecognized
        ObjectStoreIOError: If the record can't be read
    """
    settings = settings or ZgitSettings()
    root = locate_repository(repo, required=True, marker=settings.marker)
    assert root is not None

    if len(oid_or_prefix) < MIN_PREFIX_LENGTH:
        raise PrefixTooShortError(oid_or_prefix, MIN_PREFIX_LENGTH)

    key = oid_or_prefix.lower()
    selector, fragment = key[:MIN_PREFIX_LENGTH], key[MIN_PREFIX_LENGTH:]
    shard = objects_dir(root, marker=settings.marker) / selector
    if not _SHARD_PATTERN.match(selector) or not shard.is_dir():
        raise ObjectNotFoundError(oid_or_prefix)

    matches = _matching_records(shard, fragment)
    if not matches:
        raise ObjectNotFoundError(oid_or_prefix)
    if len(matches) > 1:
        raise AmbiguousPrefixError(oid_or_prefix, [selector + p.name for p in matches])

    path = matches[0]
    try:
        compressed = path.read_bytes()
    except OSError as e:
        raise ObjectStoreIOError(path, "reading", e) from e

    try:
        framed = zlib.decompress(compressed)
    except zlib.error as e:
        raise CorruptObjectError(f"decompression failed: {e}", path) from e

    try:
        kind, length, start = parse_header(framed)
    except CorruptObjectError as e:
        raise CorruptObjectError(e.reason, path) from e
    if len(framed) - start != length:
        raise CorruptObjectError(f"declared length {length} but payload has {len(framed) - start} bytes", path)

    logger.debug("Object read", oid=selector + path.name, kind=kind.value, size=length)
    return kind, framed
