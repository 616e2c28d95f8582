# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Usage:
    from tests.property.conftest import object_kinds, payloads

    @given(kind=object_kinds, payload=payloads)
    def test_fingerprint_is_stable(kind, payload) -> None:
        ...
"""

from __future__ import annotations

from hypothesis import strategies as st

from zgit.contracts import ObjectKind

object_kinds = st.sampled_from(list(ObjectKind))

# Arbitrary payloads, including NUL bytes, spaces and text that looks like a header
payloads = st.one_of(
    st.binary(max_size=4096),
    st.text(max_size=256).map(str.encode),
    st.builds(lambda k, n, rest: f"{k} {n}\0".encode() + rest, object_kinds, st.integers(0, 99), st.binary(max_size=64)),
)

# Keys too short to select a shard directory
short_keys = st.text(alphabet="0123456789abcdefABCDEF", max_size=1)
