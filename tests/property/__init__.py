# tests/property/__init__.py
"""Property-based tests for zgit.

These check invariants that must hold for all payloads rather than a few
hand-picked examples: fingerprints are deterministic and match SHA-1 of the
framing, stored objects read back unchanged, and repeated stores are no-ops.
"""
