"""
Theme types for CapsuleKit IR.

Every color is optional: consumers fall back to DEFAULT_COLORS for any
slot the composition leaves out.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from .base import IRModel


class SpacingDensity(StrEnum):
    COMPACT = "compact"
    NORMAL = "normal"
    RELAXED = "relaxed"


class BorderRadius(StrEnum):
    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"
    FULL = "full"


class TypographyScale(StrEnum):
    COMPACT = "compact"
    NORMAL = "normal"
    LARGE = "large"


DEFAULT_COLORS: dict[str, str] = {
    "primary": "#3b82f6",
    "secondary": "#8b5cf6",
    "accent": "#06b6d4",
    "background": "#ffffff",
    "surface": "#f8fafc",
    "error": "#ef4444",
    "success": "#22c55e",
    "warning": "#f59e0b",
    "text_primary": "#0f172a",
    "text_secondary": "#64748b",
    "text_disabled": "#94a3b8",
}

DEFAULT_FONT_FAMILY = "Inter"


def _null_to_default(model: type[IRModel], value: Any, info: ValidationInfo) -> Any:
    if value is None and info.field_name is not None:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


class TextColors(IRModel):
    primary: str | None = None
    secondary: str | None = None
    disabled: str | None = None


class ThemeColors(IRModel):
    """Semantic color slots, hex strings."""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    background: str | None = None
    surface: str | None = None
    error: str | None = None
    success: str | None = None
    warning: str | None = None
    text: TextColors = Field(default_factory=TextColors)

    @field_validator("text", mode="before")
    @classmethod
    def _default_text(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    def resolved(self) -> dict[str, str]:
        """
        Flatten to DEFAULT_COLORS keys, filling missing slots with defaults.

        Text colors are flattened as ``text_primary``, ``text_secondary``
        and ``text_disabled``.
        """
        values = {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "surface": self.surface,
            "error": self.error,
            "success": self.success,
            "warning": self.warning,
            "text_primary": self.text.primary,
            "text_secondary": self.text.secondary,
            "text_disabled": self.text.disabled,
        }
        return {key: value or DEFAULT_COLORS[key] for key, value in values.items()}


class Typography(IRModel):
    font_family: str = DEFAULT_FONT_FAMILY
    heading_font: str | None = None
    mono_font: str | None = None
    scale: TypographyScale = TypographyScale.NORMAL

    @field_validator("font_family", "scale", mode="before")
    @classmethod
    def _defaults_for_null(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)


class ThemeConfig(IRModel):
    """Global theme of a composition."""

    name: str = "Default"
    colors: ThemeColors = Field(default_factory=ThemeColors)
    typography: Typography = Field(default_factory=Typography)
    spacing: SpacingDensity | str = SpacingDensity.NORMAL
    border_radius: BorderRadius | str = BorderRadius.MD
    shadows: bool = True

    @field_validator(
        "name", "colors", "typography", "spacing", "border_radius", "shadows", mode="before"
    )
    @classmethod
    def _defaults_for_null(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)
