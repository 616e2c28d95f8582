# src/zgit/core/repository.py
"""Repository discovery and scaffolding.

A repository is nothing more than a directory containing the marker
directory (``.zgit`` by default). No repository object is kept between
calls: every store operation re-resolves the root from its start path.
"""

from __future__ import annotations

import os
from pathlib import Path

from zgit.contracts.errors import NotARepositoryError, ObjectStoreIOError
from zgit.contracts.identity import InitResult
from zgit.core.atomic import write_atomically
from zgit.core.config import DEFAULT_MARKER, ZgitSettings
from zgit.core.logging import get_logger

__all__ = ["REPOSITORY_LAYOUT", "init_repository", "locate_repository"]

logger = get_logger(__name__)

# Directories created under the marker by init_repository(), in creation order
REPOSITORY_LAYOUT: tuple[str, ...] = (
    "refs",
    "refs/heads",
    "refs/tags",
    "objects",
    "objects/info",
    "objects/pack",
    "hooks",
    "info",
)


def _resolve(start: str | os.PathLike[str]) -> Path:
    """Resolve start to an absolute, symlink-free path that must exist."""
    try:
        return Path(start).resolve(strict=True)
    except OSError as e:
        raise ObjectStoreIOError(Path(start), "resolving", e) from e


def locate_repository(
    start: str | os.PathLike[str] = ".",
    required: bool = True,
    *,
    marker: str = DEFAULT_MARKER,
) -> Path | None:
    """Find the nearest directory at or above start that contains the marker directory.

    Walks upward one parent at a time until the marker is found or the
    filesystem root is reached (a path equal to its own parent). Purely
    read-only.

    Args:
        start: Where to begin the search. May be relative, and may be a file.
        required: If True, exhaustion raises instead of returning None.
        marker: Marker directory name.

    Returns:
        Absolute resolved repository root, or None if not found and not required

    Raises:
        ObjectStoreIOError: If start cannot be resolved (e.g. does not exist)
        NotARepositoryError: If no marker was found and required is True
    """
    origin = _resolve(start)
    current = origin
    while True:
        if (current / marker).is_dir():
            logger.debug("Repository located", root=str(current), start=str(origin))
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent

    if required:
        raise NotARepositoryError(origin, marker)
    return None


def init_repository(
    path: str | os.PathLike[str] = ".",
    *,
    settings: ZgitSettings | None = None,
) -> InitResult:
    """Create an empty repository at path, unless path is already inside one.

    Creates the marker directory tree (see REPOSITORY_LAYOUT) and writes
    HEAD pointing at the configured default branch. Idempotent: if path
    or any ancestor is already a repository nothing is touched.

    Args:
        path: Existing directory to turn into a repository root.
        settings: Marker name and default branch; defaults when None.

    Returns:
        InitResult with the repository root and whether it was created now

    Raises:
        ObjectStoreIOError: If path doesn't exist or a directory/HEAD can't be written
    """
    settings = settings or ZgitSettings()

    existing = locate_repository(path, required=False, marker=settings.marker)
    if existing is not None:
        logger.debug("Repository already exists", root=str(existing))
        return InitResult(root=existing, created=False)

    root = _resolve(path)
    git_dir = root / settings.marker
    for relative in ("", *REPOSITORY_LAYOUT):
        directory = git_dir / relative
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ObjectStoreIOError(directory, "creating directory", e) from e

    write_atomically(git_dir / "HEAD", f"ref: refs/heads/{settings.default_branch}\n".encode())

    logger.debug("Repository initialized", root=str(root), marker=settings.marker)
    return InitResult(root=root, created=True)
