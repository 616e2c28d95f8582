"""Object store exceptions.

Every failure the store can report derives from ObjectStoreError, so
callers (the CLI in particular) can catch the whole taxonomy in one place
and still tell each condition apart by class. Each class carries the
path, prefix or kind needed to report the failure precisely.
"""

from __future__ import annotations

from pathlib import Path


class ObjectStoreError(Exception):
    """Base class for all object store failures."""


class NotARepositoryError(ObjectStoreError):
    """Raised when no marker directory exists between a path and the filesystem root.

    Attributes:
        path: The resolved start path of the search
        marker: Name of the marker directory that was searched for
    """

    def __init__(self, path: Path, marker: str) -> None:
        self.path = path
        self.marker = marker
        super().__init__(f"Not a zgit repository (or any parent up to mount point /): {path} (no {marker} directory)")


class ObjectStoreIOError(ObjectStoreError):
    """Raised when a filesystem operation fails.

    The underlying OSError is always chained as ``__cause__``.

    Attributes:
        path: Path the failing operation was acting on
        operation: Short description of what was being attempted
    """

    def __init__(self, path: Path, operation: str, error: OSError) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"I/O error while {operation} {path}: {error.strerror or error}")


class ParentDirectoryMissingError(ObjectStoreError):
    """Raised when an atomic write targets a path whose parent does not exist.

    Attributes:
        path: The target path of the write
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Parent directory doesn't exist for {path}")


class PrefixTooShortError(ObjectStoreError):
    """Raised when an object lookup key is shorter than the shard selector.

    Attributes:
        prefix: The rejected lookup key
        minimum: Minimum accepted length
    """

    def __init__(self, prefix: str, minimum: int) -> None:
        self.prefix = prefix
        self.minimum = minimum
        super().__init__(f"Provided prefix is too short: {prefix!r} (need at least {minimum} hex characters)")


class ObjectNotFoundError(ObjectStoreError):
    """Raised when no stored object matches a lookup key.

    Attributes:
        prefix: The lookup key that matched nothing
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Object not found with given prefix {prefix}")


class AmbiguousPrefixError(ObjectStoreError):
    """Raised when a lookup key matches more than one stored object.

    Attributes:
        prefix: The ambiguous lookup key
        candidates: Full hex ids of every matching object, sorted
    """

    def __init__(self, prefix: str, candidates: list[str]) -> None:
        self.prefix = prefix
        self.candidates = sorted(candidates)
        super().__init__(f"Prefix {prefix} is ambiguous, matches {len(self.candidates)} objects: {', '.join(self.candidates)}")


class InvalidObjectKindError(ObjectStoreError):
    """Raised when a kind tag from untrusted input is not a known ObjectKind.

    Attributes:
        kind: The rejected tag text
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Received invalid object type: {kind!r}")


class CorruptObjectError(ObjectStoreError):
    """Raised when a stored record cannot be decompressed or its header parsed.

    Attributes:
        path: Path of the corrupt record, if known
        reason: What was wrong with it
    """

    def __init__(self, reason: str, path: Path | None = None) -> None:
        self.path = path
        self.reason = reason
        location = f" at {path}" if path is not None else ""
        super().__init__(f"Corrupt object{location}: {reason}")
