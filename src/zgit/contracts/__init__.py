"""Shared contracts for the object store boundary.

This package is a LEAF MODULE with no outbound dependencies to core/.
Settings classes are NOT re-exported here - import them from zgit.core.config.
"""

from zgit.contracts.enums import ObjectKind
from zgit.contracts.errors import (
    AmbiguousPrefixError,
    CorruptObjectError,
    InvalidObjectKindError,
    NotARepositoryError,
    ObjectNotFoundError,
    ObjectStoreError,
    ObjectStoreIOError,
    ParentDirectoryMissingError,
    PrefixTooShortError,
)
from zgit.contracts.identity import OID_BYTES, OID_HEX_LENGTH, InitResult, ObjectId

__all__ = [
    "OID_BYTES",
    "OID_HEX_LENGTH",
    "AmbiguousPrefixError",
    "CorruptObjectError",
    "InitResult",
    "InvalidObjectKindError",
    "NotARepositoryError",
    "ObjectId",
    "ObjectKind",
    "ObjectNotFoundError",
    "ObjectStoreError",
    "ObjectStoreIOError",
    "ParentDirectoryMissingError",
    "PrefixTooShortError",
]
