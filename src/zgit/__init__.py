"""
zgit: a minimal content-addressable version control store.

Objects (blobs, trees, commits, tags) are framed canonically, fingerprinted
with SHA-1 and persisted zlib-compressed under the repository's ``.zgit``
directory. The public operations live in :mod:`zgit.core`.
"""

__version__ = "0.1.0"
