"""Closed tag sets shared across the object store boundary."""

from enum import StrEnum


class ObjectKind(StrEnum):
    """Kind of a stored object.

    The value is the discriminator written into the canonical header
    (``"<kind> <len>\\0"``). The store never interprets payload structure,
    so the kind only selects that header text.
    """

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"
    TAG = "tag"
