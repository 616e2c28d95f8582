# tests/conftest.py
"""Shared test fixtures.

Repository Fixtures:
- repo: An initialized repository under tmp_path (default ``.zgit`` marker)
- plain_dir: A directory with no repository anywhere above it

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Fixture payloads whose blob ids share the "03" shard:
#   payload-389 -> 03356d196f05553c95c133a8c24ad2ab5ec80f49
#   payload-252 -> 0399a867f9ba396ac0eeeaad4baab9a70deaf885
SHARED_SHARD_PAYLOADS = (b"payload-389", b"payload-252")
SHARED_SHARD_IDS = (
    "03356d196f05553c95c133a8c24ad2ab5ec80f49",
    "0399a867f9ba396ac0eeeaad4baab9a70deaf885",
)

HELLO_BLOB_ID = "b6fc4c620b67d95f953a5c1c1230aaab5db5a1b0"
COMMIT_MESSAGE = b"Implementing version control system"
COMMIT_ID = "6863dbb7f3f6c7936432142d546034738fcdfdd7"


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Initialized repository root."""
    from zgit.core.repository import init_repository

    root = tmp_path / "repo"
    root.mkdir()
    return init_repository(root).root


@pytest.fixture
def plain_dir(tmp_path: Path) -> Path:
    """Directory that is not inside any repository."""
    path = tmp_path / "plain"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    """Start every test from WARNING-level logging bound to the current stdout."""
    from zgit.core.logging import configure_logging

    configure_logging(level="WARNING")
    yield


@pytest.fixture(autouse=True)
def _isolate_zgit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ZGIT_* variables from the developer's shell out of settings loading."""
    for key in list(os.environ):
        if key.startswith("ZGIT_"):
            monkeypatch.delenv(key)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # fsync timing varies
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
