# src/zgit/core/framing.py
"""
Canonical object framing and fingerprinting.

Every object is framed as an ASCII header followed by its raw payload:

    b"<kind> <payload length in bytes>\\0" + payload

The fingerprint (ObjectId) is the SHA-1 digest of exactly those bytes.
It is computed over the uncompressed framing, so recompressing a record
at a different level never changes an object's identity.
"""

from __future__ import annotations

import hashlib
from typing import BinaryIO

from zgit.contracts.enums import ObjectKind
from zgit.contracts.errors import CorruptObjectError, InvalidObjectKindError
from zgit.contracts.identity import ObjectId

__all__ = [
    "Payload",
    "digest_framing",
    "fingerprint",
    "frame",
    "parse_header",
    "parse_kind",
    "payload_of",
]

Payload = bytes | bytearray | memoryview | BinaryIO


def parse_kind(tag: str | bytes) -> ObjectKind:
    """Map an unchecked kind tag (e.g. from disk or the command line) to an ObjectKind.

    Raises:
        InvalidObjectKindError: If tag is not one of blob, tree, commit, tag
    """
    if isinstance(tag, bytes):
        try:
            tag = tag.decode("ascii")
        except UnicodeDecodeError:
            raise InvalidObjectKindError(repr(tag)) from None
    try:
        return ObjectKind(tag)
    except ValueError:
        raise InvalidObjectKindError(tag) from None


def _coerce_kind(kind: ObjectKind | str) -> ObjectKind:
    if isinstance(kind, ObjectKind):
        return kind
    return parse_kind(kind)


def _materialize(payload: Payload) -> bytes:
    """Return payload as bytes, draining streams.

    A stream is read from its current position to EOF; if it is seekable
    its position is restored afterwards so the caller can reuse it.
    """
    if isinstance(payload, bytes | bytearray | memoryview):
        return bytes(payload)
    if isinstance(payload, str):
        raise TypeError("payload must be bytes or a binary stream, not str")

    position = payload.tell() if payload.seekable() else None
    data = payload.read()
    if position is not None:
        payload.seek(position)
    if not isinstance(data, bytes):
        raise TypeError(f"payload stream must yield bytes, got {type(data).__name__}")
    return data


def _header(kind: ObjectKind, length: int) -> bytes:
    return f"{kind.value} {length}\0".encode("ascii")


def frame(kind: ObjectKind | str, payload: Payload) -> bytes:
    """Build the canonical framing of an object.

    Args:
        kind: Object kind. Plain strings are validated with parse_kind().
        payload: Raw payload bytes or a readable binary stream.

    Returns:
        Header bytes followed by the payload bytes

    Raises:
        InvalidObjectKindError: If kind is an unrecognized string
    """
    kind = _coerce_kind(kind)
    data = _materialize(payload)
    return _header(kind, len(data)) + data


def digest_framing(framed: bytes) -> ObjectId:
    """Fingerprint an already framed object."""
    return ObjectId(hashlib.sha1(framed).digest())


def fingerprint(kind: ObjectKind | str, payload: Payload) -> ObjectId:
    """Compute the ObjectId of (kind, payload).

    Pure and stable: identical kind and payload bytes always give the same id.

    >>> fingerprint(ObjectKind.BLOB, b"hello").hex
    'b6fc4c620b67d95f953a5c1c1230aaab5db5a1b0'
    """
    return digest_framing(frame(kind, payload))


def parse_header(framed: bytes) -> tuple[ObjectKind, int, int]:
    """Split a canonical framing into its header fields.

    The kind ends at the first space; the length ends at the first NUL.

    Returns:
        (kind, declared payload length, offset of the first payload byte)

    Raises:
        CorruptObjectError: If the header is malformed
        InvalidObjectKindError: If the kind tag is unrecognized
    """
    nul = framed.find(b"\0")
    if nul == -1:
        raise CorruptObjectError("header is not NUL-terminated")
    kind_tag, separator, length_text = framed[:nul].partition(b" ")
    if not separator:
        raise CorruptObjectError("header has no length field")
    kind = parse_kind(kind_tag)
    if not length_text.isdigit():
        raise CorruptObjectError(f"header length is not a decimal number: {length_text[:20]!r}")
    return kind, int(length_text), nul + 1


def payload_of(framed: bytes) -> bytes:
    """Strip the header from a framing returned by read_object().

    Raises:
        CorruptObjectError: If the header is malformed or the declared length is wrong
    """
    _, length, start = parse_header(framed)
    body = framed[start:]
    if len(body) != length:
        raise CorruptObjectError(f"declared length {length} but payload has {len(body)} bytes")
    return body
