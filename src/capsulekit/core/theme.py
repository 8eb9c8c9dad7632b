"""
Theme processing.

Turns a composition's ThemeConfig into platform theme sources: a CSS
custom-property block for web and desktop, a SwiftUI Color extension and
a Compose color object. Missing colors fall back to DEFAULT_COLORS.
"""

from __future__ import annotations

from .ir import ThemeConfig
from .strings import hex_to_rgb, to_pascal_case

_SPACING_SCALE = {
    "compact": "0.875",
    "relaxed": "1.25",
}

_RADII = {
    "none": "0px",
    "sm": "4px",
    "md": "8px",
    "lg": "12px",
    "full": "9999px",
}

_DEFAULT_RADIUS = "8px"

DEFAULT_KOTLIN_THEME_PACKAGE = "com.capsulekit.ui.theme"

# Emission order shared by every output format
_COLOR_KEYS = (
    "primary",
    "secondary",
    "accent",
    "background",
    "surface",
    "error",
    "success",
    "warning",
    "text_primary",
    "text_secondary",
    "text_disabled",
)


def _member_name(key: str) -> str:
    return to_pascal_case(key.replace("_", " "))


class ThemeProcessor:
    """Stateless converters from ThemeConfig to platform theme code."""

    @staticmethod
    def spacing_scale(theme: ThemeConfig) -> str:
        return _SPACING_SCALE.get(str(theme.spacing), "1")

    @staticmethod
    def border_radius(theme: ThemeConfig) -> str:
        return _RADII.get(str(theme.border_radius), _DEFAULT_RADIUS)

    @classmethod
    def to_css_variables(cls, theme: ThemeConfig) -> str:
        """
        Render a ``:root`` block of CSS custom properties.

        Color keys map to ``--color-<kebab-key>``; the block also carries
        the font stacks, the spacing scale and the base radius.
        """
        colors = theme.colors.resolved()
        font = theme.typography.font_family
        heading = theme.typography.heading_font or font

        lines = [":root {"]
        for key in _COLOR_KEYS:
            lines.append(f"  --color-{key.replace('_', '-')}: {colors[key]};")
        lines.append(f"  --font-family: {font}, system-ui, sans-serif;")
        lines.append(f"  --font-heading: {heading}, system-ui, sans-serif;")
        if theme.typography.mono_font:
            lines.append(f"  --font-mono: {theme.typography.mono_font}, ui-monospace, monospace;")
        lines.append(f"  --spacing-scale: {cls.spacing_scale(theme)};")
        lines.append(f"  --radius-base: {cls.border_radius(theme)};")
        lines.append("}")
        return "\n".join(lines)

    @staticmethod
    def swift_color(hex_color: str) -> str:
        """``Color(red:green:blue:)`` with 0-1 components, or ``Color.clear``."""
        rgb = hex_to_rgb(hex_color)
        if rgb is None:
            return "Color.clear"
        return (
            f"Color(red: {rgb.r / 255:.3f}, green: {rgb.g / 255:.3f}, "
            f"blue: {rgb.b / 255:.3f})"
        )

    @staticmethod
    def kotlin_color(hex_color: str) -> str:
        """``Color(0xFFRRGGBB)``, or ``Color.Transparent``."""
        rgb = hex_to_rgb(hex_color)
        if rgb is None:
            return "Color.Transparent"
        return f"Color(0xFF{rgb.r:02X}{rgb.g:02X}{rgb.b:02X})"

    @classmethod
    def to_swift_colors(cls, theme: ThemeConfig) -> str:
        """Render a SwiftUI ``extension Color`` with ``brand*`` members."""
        colors = theme.colors.resolved()
        lines = ["import SwiftUI", "", "extension Color {"]
        for key in _COLOR_KEYS:
            lines.append(f"    static let brand{_member_name(key)} = {cls.swift_color(colors[key])}")
        lines.append("}")
        return "\n".join(lines)

    @classmethod
    def to_kotlin_colors(
        cls,
        theme: ThemeConfig,
        package: str = DEFAULT_KOTLIN_THEME_PACKAGE,
    ) -> str:
        """Render a Compose ``object BrandColors`` in ``package``."""
        colors = theme.colors.resolved()
        lines = [
            f"package {package}",
            "",
            "import androidx.compose.ui.graphics.Color",
            "",
            "object BrandColors {",
        ]
        for key in _COLOR_KEYS:
            lines.append(f"    val {_member_name(key)} = {cls.kotlin_color(colors[key])}")
        lines.append("}")
        return "\n".join(lines)
