# tests/property/settings.py
"""Standardized Hypothesis settings profiles for property tests.

Usage:
    from tests.property.settings import STANDARD_SETTINGS

    @given(payload=payloads)
    @STANDARD_SETTINGS
    def test_something(payload):
        ...

Tiers:
- DETERMINISM_SETTINGS: 500 examples - fingerprint/framing purity (object identity)
- STANDARD_SETTINGS: 100 examples - Regular property tests
- SLOW_SETTINGS: 50 examples - File system tests (every example fsyncs)
"""

from hypothesis import settings

# Object identity MUST be deterministic
DETERMINISM_SETTINGS = settings(max_examples=500, deadline=None)

STANDARD_SETTINGS = settings(max_examples=100, deadline=None)

# Each example initializes a repository and fsyncs records
SLOW_SETTINGS = settings(max_examples=50, deadline=None)
