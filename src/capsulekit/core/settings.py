"""
Project settings for CapsuleKit.

Settings live in an optional ``capsulekit.toml``:

    [compiler]
    platforms = ["web", "ios"]
    output = "generated/"

    [platforms.ios]
    bundle_id = "com.acme.notes"

Platform sections seed each compiler's default configuration. A
composition's own ``platformConfig`` still wins for a single compile.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .errors import SettingsError
from .ir import TargetPlatform

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "capsulekit.toml"


class CompilerSection(BaseModel):
    """The ``[compiler]`` table."""

    platforms: list[TargetPlatform] | None = None
    output: str = "generated/"


class CompilerSettings(BaseModel):
    """Complete project settings."""

    compiler: CompilerSection = Field(default_factory=CompilerSection)
    platforms: dict[TargetPlatform, dict[str, Any]] = Field(default_factory=dict)

    def get_output_path(self, project_root: Path) -> Path:
        """Get absolute output directory path."""
        output_dir = Path(self.compiler.output)
        if output_dir.is_absolute():
            return output_dir
        return project_root / output_dir

    def config_for(self, platform: TargetPlatform) -> dict[str, Any]:
        """Raw overrides for one platform, empty when none are set."""
        return dict(self.platforms.get(platform) or {})


def load_settings(toml_path: Path) -> CompilerSettings:
    """
    Load settings from a capsulekit.toml file.

    Args:
        toml_path: Path to capsulekit.toml

    Returns:
        CompilerSettings with parsed values, or defaults when the file is absent

    Raises:
        SettingsError: If the file is not valid TOML or holds invalid values
    """
    if not toml_path.exists():
        logger.debug("No settings file at %s, using defaults", toml_path)
        return CompilerSettings()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML in {toml_path}: {e}") from e

    try:
        return CompilerSettings.model_validate(
            {
                "compiler": data.get("compiler", {}),
                "platforms": data.get("platforms", {}),
            }
        )
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {toml_path}: {e}") from e


def find_settings(start: Path) -> Path | None:
    """Return ``capsulekit.toml`` in ``start`` or one of its parents."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None
