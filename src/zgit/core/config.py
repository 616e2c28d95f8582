# src/zgit/core/config.py
"""
Configuration schema and loading for zgit.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

import zlib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_MARKER = ".zgit"

# Dynaconf bookkeeping keys that leak into as_dict()
_DYNACONF_INTERNAL_KEYS = frozenset({"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"})


class StoreSettings(BaseModel):
    """Object store configuration.

    Compression level never affects object identity: fingerprints are
    computed over the uncompressed framing.
    """

    model_config = {"frozen": True}

    compression_level: int = Field(
        default=zlib.Z_DEFAULT_COMPRESSION,
        ge=-1,
        le=9,
        description="zlib level for stored records (-1 = zlib default, 0-9 explicit)",
    )


class LoggingSettings(BaseModel):
    """Logging configuration consumed by configure_logging()."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(default=False, description="Emit JSON lines instead of console output")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class ZgitSettings(BaseModel):
    """Top-level zgit configuration.

    Passed explicitly to the store operations; ``None`` there means
    ``ZgitSettings()`` (all defaults).
    """

    model_config = {"frozen": True}

    marker: str = Field(
        default=DEFAULT_MARKER,
        description="Name of the directory that marks a repository root",
    )
    default_branch: str = Field(
        default="main",
        description="Branch HEAD points at in a freshly initialized repository",
    )
    object_store: StoreSettings = Field(default_factory=StoreSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Marker must be a single, real path component."""
        if not v or v in {".", ".."}:
            raise ValueError(f"marker must be a directory name, got {v!r}")
        if "/" in v or "\\" in v:
            raise ValueError(f"marker must be a single path component, got {v!r}")
        return v

    @field_validator("default_branch")
    @classmethod
    def validate_default_branch(cls, v: str) -> str:
        """Branch name must be usable as a ref path under refs/heads/."""
        if not v:
            raise ValueError("default_branch must not be empty")
        if any(ch.isspace() for ch in v):
            raise ValueError(f"default_branch must not contain whitespace, got {v!r}")
        if v.startswith("/") or v.endswith("/"):
            raise ValueError(f"default_branch must not start or end with '/', got {v!r}")
        return v


def _lower_keys(value: Any) -> Any:
    """Recursively lowercase mapping keys (Dynaconf uppercases env-derived keys)."""
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


def load_settings(config_path: Path | None = None) -> ZgitSettings:
    """Load settings from an optional YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (ZGIT_*) - highest priority
    2. Config file, when given
    3. Defaults from the Pydantic schema - lowest priority

    Environment variable format: ZGIT_OBJECT_STORE__COMPRESSION_LEVEL for nested keys.

    Args:
        config_path: Path to a YAML configuration file, or None for env + defaults only

    Returns:
        Validated ZgitSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config_path is given but doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="ZGIT",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    raw_config = {k: v for k, v in dynaconf_settings.as_dict().items() if k not in _DYNACONF_INTERNAL_KEYS}
    return ZgitSettings(**_lower_keys(raw_config))
