# src/zgit/core/__init__.py
"""Core infrastructure: framing, object store, repository discovery, configuration, logging."""

from zgit.contracts import (
    AmbiguousPrefixError,
    CorruptObjectError,
    InitResult,
    InvalidObjectKindError,
    NotARepositoryError,
    ObjectId,
    ObjectKind,
    ObjectNotFoundError,
    ObjectStoreError,
    ObjectStoreIOError,
    ParentDirectoryMissingError,
    PrefixTooShortError,
)
from zgit.core.atomic import write_atomically
from zgit.core.config import (
    DEFAULT_MARKER,
    LoggingSettings,
    StoreSettings,
    ZgitSettings,
    load_settings,
)
from zgit.core.framing import (
    fingerprint,
    frame,
    parse_header,
    parse_kind,
    payload_of,
)
from zgit.core.logging import (
    configure_logging,
    get_logger,
)
from zgit.core.object_store import (
    MIN_PREFIX_LENGTH,
    object_path,
    read_object,
    store_object,
)
from zgit.core.repository import (
    init_repository,
    locate_repository,
)

__all__ = [
    "DEFAULT_MARKER",
    "MIN_PREFIX_LENGTH",
    "AmbiguousPrefixError",
    "CorruptObjectError",
    "InitResult",
    "InvalidObjectKindError",
    "LoggingSettings",
    "NotARepositoryError",
    "ObjectId",
    "ObjectKind",
    "ObjectNotFoundError",
    "ObjectStoreError",
    "ObjectStoreIOError",
    "ParentDirectoryMissingError",
    "PrefixTooShortError",
    "StoreSettings",
    "ZgitSettings",
    "configure_logging",
    "fingerprint",
    "frame",
    "get_logger",
    "init_repository",
    "load_settings",
    "locate_repository",
    "object_path",
    "parse_header",
    "parse_kind",
    "payload_of",
    "read_object",
    "store_object",
    "write_atomically",
]
