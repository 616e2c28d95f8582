"""Object and repository identifiers.

These types answer: "How do we refer to stored things?"
"""

import re
from dataclasses import dataclass
from pathlib import Path

# SHA-1 digest: 20 raw bytes, 40 lowercase hex characters
OID_BYTES = 20
OID_HEX_LENGTH = OID_BYTES * 2

_OID_HEX_PATTERN = re.compile(r"^[0-9a-f]{40}$")


@dataclass(frozen=True, slots=True)
class ObjectId:
    """160-bit content fingerprint of an object's (kind, payload) pair.

    Equality and hashing follow the raw digest, so two ids built from
    the same bytes or the same hex text are interchangeable.
    """

    digest: bytes

    def __post_init__(self) -> None:
        if len(self.digest) != OID_BYTES:
            raise ValueError(f"ObjectId requires {OID_BYTES} bytes, got {len(self.digest)}")

    @classmethod
    def from_hex(cls, text: str) -> "ObjectId":
        """Parse the canonical 40-character hex form.

        Uppercase input is accepted and normalized.

        Raises:
            ValueError: If text is not exactly 40 hex characters
        """
        lowered = text.lower()
        if not _OID_HEX_PATTERN.match(lowered):
            raise ValueError(f"Invalid object id: must be {OID_HEX_LENGTH} hex characters, got {text!r:.50}")
        return cls(bytes.fromhex(lowered))

    @property
    def hex(self) -> str:
        """Canonical lowercase hex text form."""
        return self.digest.hex()

    @property
    def directory(self) -> str:
        """Shard directory name (first 2 hex characters)."""
        return self.hex[:2]

    @property
    def filename(self) -> str:
        """File name inside the shard directory (remaining 38 hex characters)."""
        return self.hex[2:]

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class InitResult:
    """Outcome of repository initialization.

    Attributes:
        root: Absolute path of the repository root (the directory holding the marker)
        created: False when the path was already inside an existing repository
    """

    root: Path
    created: bool
